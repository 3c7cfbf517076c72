from __future__ import annotations

from typing import Any

import pytest
from fastapi.testclient import TestClient

USER = {"email": "a@x.com", "firstName": "A", "lastName": "B", "class": "C1"}


def test_user_lifecycle_end_to_end(client: TestClient) -> None:
    response = client.post("/users", json=USER)
    assert response.status_code == 201
    assert response.json() == USER

    response = client.get("/users/a@x.com")
    assert response.status_code == 200
    assert response.json() == USER

    response = client.put(
        "/users/a@x.com", json={"firstName": "A2", "lastName": "B", "class": "C1"}
    )
    assert response.status_code == 200
    assert response.json() == {
        "email": "a@x.com",
        "firstName": "A2",
        "lastName": "B",
        "class": "C1",
    }

    response = client.delete("/users/a@x.com")
    assert response.status_code == 200
    assert response.json() == {"message": "User deleted"}

    response = client.get("/users/a@x.com")
    assert response.status_code == 404
    assert response.json() == {"error": "User not found"}


@pytest.mark.parametrize(
    "user",
    [
        USER,
        {
            "email": "grace@navy.mil",
            "firstName": "Grace",
            "lastName": "Hopper",
            "class": None,
        },
        {
            "email": "noname@example.com",
            "firstName": None,
            "lastName": None,
            "class": None,
        },
        {
            "email": "árvíztűrő@példa.hu",
            "firstName": "Tükörfúrógép",
            "lastName": "",
            "class": "9.B",
        },
    ],
)
def test_created_user_reads_back_unchanged(
    client: TestClient, user: dict[str, Any]
) -> None:
    assert client.post("/users", json=user).status_code == 201

    response = client.get(f"/users/{user['email']}")

    assert response.status_code == 200
    assert response.json() == user


def test_create_without_optional_fields_stores_nulls(client: TestClient) -> None:
    response = client.post("/users", json={"email": "min@example.com"})

    assert response.status_code == 201
    assert response.json() == {
        "email": "min@example.com",
        "firstName": None,
        "lastName": None,
        "class": None,
    }


def test_list_users_empty(client: TestClient) -> None:
    response = client.get("/users")

    assert response.status_code == 200
    assert response.json() == []


def test_list_users_returns_every_created_user(client: TestClient) -> None:
    emails = [f"user{index}@example.com" for index in range(5)]
    for email in emails:
        response = client.post("/users", json={"email": email, "class": "C1"})
        assert response.status_code == 201

    response = client.get("/users")

    assert response.status_code == 200
    body = response.json()
    assert len(body) == len(emails)
    assert {user["email"] for user in body} == set(emails)


def test_get_missing_user_returns_404(client: TestClient) -> None:
    response = client.get("/users/ghost@example.com")

    assert response.status_code == 404
    assert response.json() == {"error": "User not found"}


def test_create_duplicate_email_fails_and_keeps_first(client: TestClient) -> None:
    assert client.post("/users", json=USER).status_code == 201

    response = client.post("/users", json={**USER, "firstName": "Impostor"})

    assert response.status_code == 500
    assert "UNIQUE constraint failed" in response.json()["error"]

    listing = client.get("/users").json()
    assert listing == [USER]


def test_update_missing_user_returns_404_without_creating(client: TestClient) -> None:
    response = client.put(
        "/users/ghost@example.com",
        json={"firstName": "G", "lastName": "H", "class": "C1"},
    )

    assert response.status_code == 404
    assert response.json() == {"error": "User not found"}
    assert client.get("/users").json() == []


def test_update_replaces_all_fields(client: TestClient) -> None:
    assert client.post("/users", json=USER).status_code == 201

    response = client.put("/users/a@x.com", json={"lastName": "Z"})

    expected = {"email": "a@x.com", "firstName": None, "lastName": "Z", "class": None}
    assert response.status_code == 200
    assert response.json() == expected
    assert client.get("/users/a@x.com").json() == expected


def test_update_ignores_email_in_body(client: TestClient) -> None:
    assert client.post("/users", json=USER).status_code == 201

    response = client.put(
        "/users/a@x.com",
        json={"email": "other@x.com", "firstName": "A", "lastName": "B", "class": "C2"},
    )

    assert response.status_code == 200
    assert response.json()["email"] == "a@x.com"
    assert client.get("/users/other@x.com").status_code == 404


def test_delete_missing_user_returns_404(client: TestClient) -> None:
    response = client.delete("/users/ghost@example.com")

    assert response.status_code == 404
    assert response.json() == {"error": "User not found"}


def test_delete_twice_second_returns_404(client: TestClient) -> None:
    assert client.post("/users", json=USER).status_code == 201
    assert client.delete("/users/a@x.com").status_code == 200

    assert client.delete("/users/a@x.com").status_code == 404
    assert client.get("/users").json() == []


@pytest.mark.parametrize(
    "payload",
    [
        {"firstName": "A", "lastName": "B", "class": "C1"},
        {"email": None},
        {"email": 42},
        {"email": "a@x.com", "firstName": ["A"]},
    ],
)
def test_create_with_malformed_body_returns_400(
    client: TestClient, payload: dict[str, Any]
) -> None:
    response = client.post("/users", json=payload)

    assert response.status_code == 400
    assert "error" in response.json()
    assert client.get("/users").json() == []


def test_create_with_invalid_json_returns_400(client: TestClient) -> None:
    response = client.post(
        "/users",
        content=b"{not json",
        headers={"Content-Type": "application/json"},
    )

    assert response.status_code == 400
    assert "error" in response.json()


def test_missing_email_error_names_the_field(client: TestClient) -> None:
    response = client.post("/users", json={"firstName": "A"})

    assert response.status_code == 400
    assert "email" in response.json()["error"]


def test_unknown_route_uses_error_body(client: TestClient) -> None:
    response = client.get("/groups")

    assert response.status_code == 404
    assert response.json() == {"error": "Not Found"}


def test_unsupported_method_uses_error_body(client: TestClient) -> None:
    response = client.patch("/users/a@x.com", json={"firstName": "A"})

    assert response.status_code == 405
    assert response.json() == {"error": "Method Not Allowed"}


def test_openapi_document_lists_user_operations(client: TestClient) -> None:
    response = client.get("/users/api-docs/openapi.json")

    assert response.status_code == 200
    document = response.json()
    assert document["info"]["title"] == "User API"
    assert document["info"]["version"] == "1.0.0"
    assert set(document["paths"]["/users"]) == {"get", "post"}
    assert set(document["paths"]["/users/{email}"]) == {"get", "put", "delete"}


def test_swagger_ui_is_served(client: TestClient) -> None:
    response = client.get("/users/api-docs")

    assert response.status_code == 200
    assert "text/html" in response.headers["content-type"]
