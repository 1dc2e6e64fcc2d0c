"""
Tests for the user lookup endpoints.
"""


def test_list_users_empty(client):
    response = client.get("/api/users")
    assert response.status_code == 200
    assert response.json() == {"message": "success", "data": []}


def test_list_users_in_insertion_order(client, register):
    register(Username="a", Email="a@x.com")
    register(Username="b", Email="b@x.com")

    response = client.get("/api/users")
    assert response.status_code == 200
    assert [u["Username"] for u in response.json()["data"]] == ["a", "b"]


def test_get_user_by_id(client, register):
    register(Username="a", Email="a@x.com", UserType="admin")

    response = client.get("/api/user/1")
    assert response.status_code == 200
    data = response.json()["data"]
    assert len(data) == 1
    assert data[0]["Id"] == 1
    assert data[0]["Email"] == "a@x.com"
    assert data[0]["UserType"] == "admin"
    assert data[0]["DateLoggedIn"] is None
    assert data[0]["Password"] != "p"


def test_get_unknown_user_is_empty_not_404(client):
    response = client.get("/api/user/999")
    assert response.status_code == 200
    assert response.json() == {"message": "success", "data": []}


def test_get_user_with_non_numeric_id(client, register):
    register()
    response = client.get("/api/user/abc")
    assert response.status_code == 200
    assert response.json()["data"] == []


def test_store_errors_are_400(client, repo):
    repo.fail_lookup = True

    response = client.get("/api/users")
    assert response.status_code == 400
    assert response.json() == {"error": "connection refused"}

    response = client.get("/api/user/1")
    assert response.status_code == 400
    assert response.json() == {"error": "connection refused"}


def test_get_user_with_zero_padded_id(client, register):
    register()
    response = client.get("/api/user/01")
    assert response.status_code == 200
    assert [u["Id"] for u in response.json()["data"]] == [1]
