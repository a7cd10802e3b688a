from helper import auth_header


def test_statistics_of_empty_database(client):
    response = client.get("/api/v1/statistics/")
    assert response.status_code == 200
    assert response.json() == {
        "total_likes": 0,
        "favorite_blog": None,
        "most_blogs": None,
        "most_likes": None,
    }


def test_statistics_over_stored_blogs(client, users, blogs):
    client.post(
        "/api/v1/blogs/",
        json={"title": "Canonical string reduction", "author": "Edsger W. Dijkstra", "url": "u", "likes": 12},
        headers=auth_header(users["dummy"]["token"]),
    )
    body = client.get("/api/v1/statistics/").json()
    assert body["total_likes"] == 24
    assert body["favorite_blog"]["title"] == "Canonical string reduction"
    assert body["favorite_blog"]["user"] == users["dummy"]["id"]
    assert body["most_blogs"] == {"author": "Edsger W. Dijkstra", "blogs": 2}
    assert body["most_likes"] == {"author": "Edsger W. Dijkstra", "likes": 17}


def test_statistics_follow_deletions(client, users, blogs):
    client.delete(f"/api/v1/blogs/{blogs[1]['id']}", headers=auth_header(users["dummy"]["token"]))
    body = client.get("/api/v1/statistics/").json()
    assert body["total_likes"] == 7
    assert body["most_likes"] == {"author": "Michael Chan", "likes": 7}
