"""Shared data and request helpers for the API tests."""

INITIAL_USERS = [
    {"username": "root", "name": "Superuser", "password": "sekret"},
    {"username": "dummy", "name": None, "password": "password"},
]

INITIAL_BLOGS = [
    {
        "title": "React patterns",
        "author": "Michael Chan",
        "url": "https://reactpatterns.com/",
        "likes": 7,
    },
    {
        "title": "Go To Statement Considered Harmful",
        "author": "Edsger W. Dijkstra",
        "url": "http://www.u.arizona.edu/~rubinson/copyright_violations/Go_To_Considered_Harmful.html",
        "likes": 5,
    },
]


def auth_header(token):
    return {"Authorization": f"Bearer {token}"}


def login(client, username, password):
    response = client.post("/api/v1/login/", json={"username": username, "password": password})
    assert response.status_code == 200
    return response.json()["token"]


def blogs_in_db(client):
    response = client.get("/api/v1/blogs/")
    assert response.status_code == 200
    return response.json()


def users_in_db(client):
    response = client.get("/api/v1/users/")
    assert response.status_code == 200
    return response.json()
