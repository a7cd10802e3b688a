import pytest

from blog_list_api.app.schemas.blog import BlogRead
from blog_list_api.app.services.statistics_service import (
    favorite_blog,
    most_blogs,
    most_likes,
    total_likes,
)


def make_blog(blog_id, author, likes, title=None):
    return BlogRead(
        id=blog_id,
        title=title or f"blog {blog_id}",
        author=author,
        url=f"https://example.com/{blog_id}",
        likes=likes,
        user=1,
    )


@pytest.fixture
def many_blogs():
    return [
        make_blog(1, "Michael Chan", 7, "React patterns"),
        make_blog(2, "Edsger W. Dijkstra", 5, "Go To Statement Considered Harmful"),
        make_blog(3, "Edsger W. Dijkstra", 12, "Canonical string reduction"),
        make_blog(4, "Robert C. Martin", 10, "First class tests"),
        make_blog(5, "Robert C. Martin", 0, "TDD harms architecture"),
        make_blog(6, "Robert C. Martin", 2, "Type wars"),
    ]


def test_total_likes_of_empty_list_is_zero():
    assert total_likes([]) == 0


def test_total_likes_of_single_blog_equals_its_likes():
    assert total_likes([make_blog(1, "A", 5)]) == 5


def test_total_likes_of_many_blogs(many_blogs):
    assert total_likes(many_blogs) == 36


def test_favorite_blog_of_empty_list_is_none():
    assert favorite_blog([]) is None


def test_favorite_blog_of_single_blog():
    blog = make_blog(1, "A", 3)
    assert favorite_blog([blog]) is blog


def test_favorite_blog_ignores_blogs_without_likes():
    assert favorite_blog([make_blog(1, "A", 0)]) is None
    assert favorite_blog([make_blog(1, "A", 0), make_blog(2, "B", 0)]) is None


def test_favorite_blog_of_many_blogs(many_blogs):
    assert favorite_blog(many_blogs).title == "Canonical string reduction"


def test_favorite_blog_tie_keeps_first():
    first, second = make_blog(1, "A", 4), make_blog(2, "B", 4)
    assert favorite_blog([first, second]) is first


def test_most_blogs_of_empty_list_is_none():
    assert most_blogs([]) is None


def test_most_blogs_of_many_blogs(many_blogs):
    result = most_blogs(many_blogs)
    assert result.author == "Robert C. Martin"
    assert result.blogs == 3


def test_most_blogs_tie_keeps_first_author():
    blogs = [make_blog(1, "B", 1), make_blog(2, "A", 1), make_blog(3, "A", 1), make_blog(4, "B", 1)]
    assert most_blogs(blogs).model_dump() == {"author": "B", "blogs": 2}


def test_most_blogs_groups_missing_author_together():
    blogs = [make_blog(1, None, 1), make_blog(2, "A", 1), make_blog(3, None, 1)]
    assert most_blogs(blogs).model_dump() == {"author": None, "blogs": 2}


def test_most_likes_of_empty_list_is_none():
    assert most_likes([]) is None


def test_most_likes_of_many_blogs(many_blogs):
    result = most_likes(many_blogs)
    assert result.author == "Edsger W. Dijkstra"
    assert result.likes == 17


def test_most_likes_tie_keeps_first_author():
    blogs = [make_blog(1, "A", 3), make_blog(2, "B", 1), make_blog(3, "B", 2)]
    assert most_likes(blogs).model_dump() == {"author": "A", "likes": 3}


def test_most_likes_selects_author_with_zero_likes():
    assert most_likes([make_blog(1, "A", 0)]).model_dump() == {"author": "A", "likes": 0}


def test_mixed_authors_example():
    blogs = [make_blog(1, "A", 3), make_blog(2, "B", 5), make_blog(3, "A", 2)]
    assert most_blogs(blogs).model_dump() == {"author": "A", "blogs": 2}
    # A sums to 5 as well and appears first
    assert most_likes(blogs).model_dump() == {"author": "A", "likes": 5}


def test_most_likes_later_author_wins_when_strictly_ahead():
    blogs = [make_blog(1, "A", 3), make_blog(2, "B", 6), make_blog(3, "A", 2)]
    assert most_likes(blogs).model_dump() == {"author": "B", "likes": 6}


def test_aggregates_are_repeatable_and_leave_input_untouched(many_blogs):
    before = [blog.model_dump() for blog in many_blogs]
    first = (total_likes(many_blogs), favorite_blog(many_blogs), most_blogs(many_blogs), most_likes(many_blogs))
    second = (total_likes(many_blogs), favorite_blog(many_blogs), most_blogs(many_blogs), most_likes(many_blogs))
    assert first == second
    assert [blog.model_dump() for blog in many_blogs] == before
