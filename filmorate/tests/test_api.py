# tests/test_api.py

INCEPTION = {
    "name": "Inception",
    "description": "Dreams within dreams",
    "releaseDate": "2010-07-16",
    "duration": 148,
    "mpa": {"id": 3},
    "genres": [{"id": 1}],
}


def create_user(client, login):
    response = client.post("/users", json={
        "email": f"{login}@mail.ru",
        "login": login,
        "name": "",
        "birthday": "1990-01-01",
    })
    assert response.status_code == 201
    return response.json()


def test_liveness(client):
    response = client.get("/liveness")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_create_and_get_film(client):
    response = client.post("/films", json=INCEPTION)
    assert response.status_code == 201
    film = response.json()
    assert film["id"] > 0
    assert film["releaseDate"] == "2010-07-16"
    assert film["genres"] == [{"id": 1, "name": "Comedy"}]

    response = client.get(f"/films/{film['id']}")
    assert response.status_code == 200
    data = response.json()
    assert data["name"] == "Inception"
    assert data["mpa"] == {"id": 3, "name": "PG-13"}
    assert data["genres"] == [{"id": 1, "name": "Comedy"}]


def test_create_invalid_film(client):
    response = client.post("/films", json={**INCEPTION, "name": "", "duration": -1})
    assert response.status_code == 400
    assert "name must not be empty" in response.json()["detail"]
    assert client.get("/films").json() == []


def test_create_film_with_unknown_mpa(client):
    response = client.post("/films", json={**INCEPTION, "mpa": {"id": 99}})
    assert response.status_code == 404


def test_get_missing_film(client):
    response = client.get("/films/999")
    assert response.status_code == 404


def test_update_film(client):
    film = client.post("/films", json=INCEPTION).json()
    response = client.put("/films", json={**INCEPTION, "id": film["id"], "genres": [{"id": 2}, {"id": 4}]})
    assert response.status_code == 200
    assert [g["id"] for g in response.json()["genres"]] == [2, 4]

    response = client.put("/films", json={**INCEPTION, "id": 999})
    assert response.status_code == 404
    assert len(client.get("/films").json()) == 1


def test_likes_and_popular(client):
    first = client.post("/films", json=INCEPTION).json()
    second = client.post("/films", json={**INCEPTION, "name": "Tenet"}).json()
    neo = create_user(client, "neo")
    trinity = create_user(client, "trinity")

    assert client.put(f"/films/{second['id']}/like/{neo['id']}").status_code == 200
    assert client.put(f"/films/{second['id']}/like/{trinity['id']}").status_code == 200
    assert client.put(f"/films/{first['id']}/like/{neo['id']}").status_code == 200
    assert client.put(f"/films/{first['id']}/like/{neo['id']}").status_code == 409

    popular = client.get("/films/popular", params={"count": 2}).json()
    assert [f["id"] for f in popular] == [second["id"], first["id"]]

    assert client.delete(f"/films/{second['id']}/like/{neo['id']}").status_code == 200
    assert client.delete(f"/films/{second['id']}/like/{trinity['id']}").status_code == 200
    popular = client.get("/films/popular", params={"count": 1}).json()
    assert [f["id"] for f in popular] == [first["id"]]


def test_like_unknown_user(client):
    film = client.post("/films", json=INCEPTION).json()
    response = client.put(f"/films/{film['id']}/like/42")
    assert response.status_code == 404


def test_popular_count_must_be_positive(client):
    response = client.get("/films/popular", params={"count": 0})
    assert response.status_code == 422


def test_create_user_uses_login_for_blank_name(client):
    user = create_user(client, "neo")
    assert user["name"] == "neo"
    assert user["friends"] == []


def test_create_invalid_user(client):
    response = client.post("/users", json={"email": "bad", "login": "neo", "birthday": "2999-01-01"})
    assert response.status_code == 400
    detail = response.json()["detail"]
    assert "email is not a valid address" in detail
    assert "birthday must be in the past" in detail


def test_update_user(client):
    user = create_user(client, "neo")
    response = client.put("/users", json={**user, "name": "Thomas Anderson"})
    assert response.status_code == 200
    assert response.json()["name"] == "Thomas Anderson"

    response = client.put("/users", json={**user, "id": 999})
    assert response.status_code == 404


def test_friends(client):
    neo = create_user(client, "neo")
    trinity = create_user(client, "trinity")
    morpheus = create_user(client, "morpheus")

    assert client.put(f"/users/{neo['id']}/friends/{morpheus['id']}").status_code == 200
    assert client.put(f"/users/{trinity['id']}/friends/{morpheus['id']}").status_code == 200
    assert client.put(f"/users/{neo['id']}/friends/{neo['id']}").status_code == 400
    assert client.put(f"/users/{neo['id']}/friends/999").status_code == 404

    friends = client.get(f"/users/{neo['id']}/friends").json()
    assert [u["id"] for u in friends] == [morpheus["id"]]
    assert client.get(f"/users/{neo['id']}").json()["friends"] == [morpheus["id"]]

    common = client.get(f"/users/{neo['id']}/friends/common/{trinity['id']}").json()
    assert [u["id"] for u in common] == [morpheus["id"]]

    assert client.delete(f"/users/{neo['id']}/friends/{morpheus['id']}").status_code == 200
    assert client.get(f"/users/{neo['id']}/friends").json() == []


def test_catalog(client):
    assert len(client.get("/mpa").json()) == 5
    assert client.get("/mpa/1").json() == {"id": 1, "name": "G"}
    assert client.get("/mpa/42").status_code == 404
    assert len(client.get("/genres").json()) == 6
    assert client.get("/genres/2").json() == {"id": 2, "name": "Drama"}
    assert client.get("/genres/42").status_code == 404
