"""
Paths outside the known collection and item forms are answered with 404.
"""
import pytest


@pytest.mark.parametrize(
    "path",
    [
        "/",
        "/accounts",
        "/user",
        "/user/abc",
        "/users/",
        "/banks/",
        "/user/1/extra",
        "/lineitem/",
    ],
)
def test_unknown_paths_are_not_found(client, path):
    resp = client.get(path, follow_redirects=False)
    assert resp.status_code == 404


def test_item_path_dispatches_to_matching_entity(client):
    bucket = client.post("/buckets", json={"name": "Fun", "ownerid": 1}).json()
    assert client.get(f"/bucket/{bucket['id']}").status_code == 200
    # Same id on another entity's table does not exist.
    assert client.get(f"/bank/{bucket['id']}").status_code == 404


def test_method_not_allowed_carries_allow_header(client):
    resp = client.put("/banks", json={})
    assert resp.status_code == 405
    assert "allow" in resp.headers


def test_trailing_slash_is_not_redirected(client):
    resp = client.post("/users/", json={"username": "x"}, follow_redirects=False)
    assert resp.status_code == 404
    assert resp.json() == "Not Found"


class TestNegativeIds:
    """Negative ids are valid item paths; they just never match a row."""

    def test_get_is_not_found(self, client):
        resp = client.get("/user/-1")
        assert resp.status_code == 404
        assert resp.json() == "Not Found!"

    def test_put_echoes_body(self, client):
        resp = client.put("/user/-1", json={"username": "g", "name": "G", "pin": 1})
        assert resp.status_code == 200
        assert resp.json() == {"id": -1, "username": "g", "name": "G", "pin": 1}

    def test_delete_has_no_rows(self, client):
        resp = client.delete("/bank/-7")
        assert resp.status_code == 500
        assert resp.json() == "sql: no rows in result set"


def test_id_beyond_integer_column_is_bad_request(client):
    assert client.get(f"/user/{2**40}").status_code == 400
    assert client.delete(f"/lineitem/{-2**40}").status_code == 400
