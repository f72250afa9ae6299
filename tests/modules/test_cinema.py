import pytest_asyncio
from fastapi.testclient import TestClient

from app.modules.cinema import models_cinema
from app.modules.filme import models_filme
from tests.commons import add_object_to_db

cinema: models_cinema.Cinema
cinema_to_delete: models_cinema.Cinema
filme_in_deleted_cinema: models_filme.Filme


@pytest_asyncio.fixture(scope="module", autouse=True)
async def init_objects() -> None:
    global cinema
    cinema = models_cinema.Cinema(name="Cine Belas Artes")
    await add_object_to_db(cinema)

    global cinema_to_delete
    cinema_to_delete = models_cinema.Cinema(name="Cine Marrocos")
    await add_object_to_db(cinema_to_delete)

    global filme_in_deleted_cinema
    filme_in_deleted_cinema = models_filme.Filme(
        title="Pixote",
        genre="Drama",
        duration=128,
        cinema_id=cinema_to_delete.id,
    )
    await add_object_to_db(filme_in_deleted_cinema)


def test_create_cinema(client: TestClient) -> None:
    response = client.post(
        "/cinema",
        json={"name": "Cinesystem Morumbi"},
    )
    assert response.status_code == 201
    json = response.json()
    assert json["name"] == "Cinesystem Morumbi"
    assert response.headers["Location"].endswith(f"/cinema/{json['id']}")

    response = client.get(response.headers["Location"])
    assert response.status_code == 200
    assert response.json() == json


def test_create_cinema_trims_name(client: TestClient) -> None:
    response = client.post(
        "/cinema",
        json={"name": "  Espaço Itaú Augusta "},
    )
    assert response.status_code == 201
    assert response.json()["name"] == "Espaço Itaú Augusta"


def test_create_cinema_ignores_client_id(client: TestClient) -> None:
    response = client.post(
        "/cinema",
        json={"id": 4242, "name": "Cine Joia"},
    )
    assert response.status_code == 201
    assert response.json()["id"] != 4242


def test_create_cinema_with_empty_name(client: TestClient) -> None:
    response = client.post(
        "/cinema",
        json={"name": "   "},
    )
    assert response.status_code == 400
    assert response.json()["detail"][0]["loc"] == ["body", "name"]


def test_create_cinema_without_name(client: TestClient) -> None:
    response = client.post("/cinema", json={})
    assert response.status_code == 400


def test_create_cinema_with_too_long_name(client: TestClient) -> None:
    response = client.post("/cinema", json={"name": "a" * 101})
    assert response.status_code == 400


def test_get_cinema_by_id(client: TestClient) -> None:
    response = client.get(f"/cinema/{cinema.id}")
    assert response.status_code == 200
    assert response.json() == {"id": cinema.id, "name": "Cine Belas Artes"}


def test_get_unknown_cinema(client: TestClient) -> None:
    response = client.get("/cinema/424242")
    assert response.status_code == 404
    assert response.json()["detail"] == "Cinema not found"


def test_get_cinema_with_invalid_id(client: TestClient) -> None:
    response = client.get("/cinema/abc")
    assert response.status_code == 400


def test_get_cinemas_is_ordered_by_id(client: TestClient) -> None:
    response = client.get("/cinema")
    assert response.status_code == 200
    ids = [item["id"] for item in response.json()]
    assert ids == sorted(ids)
    assert cinema.id in ids


def test_get_cinemas_pagination(client: TestClient) -> None:
    all_cinemas = client.get("/cinema", params={"take": 1000}).json()
    assert len(all_cinemas) >= 2

    response = client.get("/cinema", params={"skip": 1, "take": 1})
    assert response.status_code == 200
    assert response.json() == all_cinemas[1:2]

    response = client.get(
        "/cinema",
        params={"skip": len(all_cinemas) - 1, "take": 10},
    )
    assert response.json() == all_cinemas[-1:]


def test_get_cinemas_with_take_zero(client: TestClient) -> None:
    response = client.get("/cinema", params={"take": 0})
    assert response.status_code == 200
    assert response.json() == []


def test_get_cinemas_skip_beyond_collection(client: TestClient) -> None:
    response = client.get("/cinema", params={"skip": 100000})
    assert response.status_code == 200
    assert response.json() == []


def test_get_cinemas_with_negative_pagination(client: TestClient) -> None:
    response = client.get("/cinema", params={"skip": -1})
    assert response.status_code == 400

    response = client.get("/cinema", params={"take": -5})
    assert response.status_code == 400


def test_update_cinema(client: TestClient) -> None:
    response = client.post("/cinema", json={"name": "Cine Olido"})
    cinema_id = response.json()["id"]

    response = client.put(f"/cinema/{cinema_id}", json={"name": "Galeria Olido"})
    assert response.status_code == 204
    assert response.content == b""

    response = client.get(f"/cinema/{cinema_id}")
    assert response.json() == {"id": cinema_id, "name": "Galeria Olido"}


def test_update_cinema_with_invalid_body(client: TestClient) -> None:
    response = client.put(f"/cinema/{cinema.id}", json={"name": ""})
    assert response.status_code == 400

    response = client.get(f"/cinema/{cinema.id}")
    assert response.json()["name"] == "Cine Belas Artes"


def test_update_unknown_cinema(client: TestClient) -> None:
    response = client.put("/cinema/424242", json={"name": "Cine Ipiranga"})
    assert response.status_code == 404


def test_patch_cinema(client: TestClient) -> None:
    response = client.post("/cinema", json={"name": "Cine Bijou"})
    cinema_id = response.json()["id"]

    response = client.patch(
        f"/cinema/{cinema_id}",
        json=[{"op": "replace", "path": "/name", "value": "Cine Bijou Paulista"}],
    )
    assert response.status_code == 204

    response = client.get(f"/cinema/{cinema_id}")
    assert response.json()["name"] == "Cine Bijou Paulista"


def test_patch_cinema_with_json_patch_media_type(client: TestClient) -> None:
    response = client.post("/cinema", json={"name": "Cine Metro"})
    cinema_id = response.json()["id"]

    response = client.patch(
        f"/cinema/{cinema_id}",
        content='[{"op": "replace", "path": "/name", "value": "Cine Metrópole"}]',
        headers={"Content-Type": "application/json-patch+json"},
    )
    assert response.status_code == 204

    response = client.get(f"/cinema/{cinema_id}")
    assert response.json()["name"] == "Cine Metrópole"


def test_patch_cinema_with_invalid_result(client: TestClient) -> None:
    response = client.patch(
        f"/cinema/{cinema.id}",
        json=[{"op": "remove", "path": "/name"}],
    )
    assert response.status_code == 400
    assert response.json()["detail"][0]["loc"] == ["name"]

    response = client.get(f"/cinema/{cinema.id}")
    assert response.json()["name"] == "Cine Belas Artes"


def test_patch_cinema_with_unknown_path(client: TestClient) -> None:
    response = client.patch(
        f"/cinema/{cinema.id}",
        json=[{"op": "replace", "path": "/id", "value": 1000}],
    )
    assert response.status_code == 400
    assert response.json()["detail"][0]["type"] == "json_patch_error"

    response = client.get(f"/cinema/{cinema.id}")
    assert response.json()["id"] == cinema.id


def test_patch_cinema_with_malformed_operation(client: TestClient) -> None:
    response = client.patch(
        f"/cinema/{cinema.id}",
        json=[{"op": "rename", "path": "/name", "value": "Cine"}],
    )
    assert response.status_code == 400


def test_patch_unknown_cinema(client: TestClient) -> None:
    response = client.patch(
        "/cinema/424242",
        json=[{"op": "replace", "path": "/name", "value": "Cine Ipiranga"}],
    )
    assert response.status_code == 404


def test_delete_cinema(client: TestClient) -> None:
    response = client.delete(f"/cinema/{cinema_to_delete.id}")
    assert response.status_code == 204

    response = client.get(f"/cinema/{cinema_to_delete.id}")
    assert response.status_code == 404

    response = client.delete(f"/cinema/{cinema_to_delete.id}")
    assert response.status_code == 404


def test_delete_cinema_keeps_its_filmes(client: TestClient) -> None:
    response = client.get(f"/filme/{filme_in_deleted_cinema.id}")
    assert response.status_code == 200
    assert response.json()["cinema_id"] is None


def test_deleted_cinema_id_is_not_reused(client: TestClient) -> None:
    response = client.post("/cinema", json={"name": "Cine Art Palácio"})
    assert response.status_code == 201
    assert response.json()["id"] > cinema_to_delete.id


def test_get_cinemas_with_huge_pagination(client: TestClient) -> None:
    response = client.get("/cinema", params={"skip": 2**63})
    assert response.status_code == 200
    assert response.json() == []

    response = client.get("/cinema", params={"take": 2**63})
    assert response.status_code == 200
    assert cinema.id in [item["id"] for item in response.json()]


def test_cinema_with_huge_id_is_not_found(client: TestClient) -> None:
    huge_id = 2**63

    response = client.get(f"/cinema/{huge_id}")
    assert response.status_code == 404

    response = client.put(f"/cinema/{huge_id}", json={"name": "Cine Ipiranga"})
    assert response.status_code == 404

    response = client.patch(
        f"/cinema/{huge_id}",
        json=[{"op": "replace", "path": "/name", "value": "Cine Ipiranga"}],
    )
    assert response.status_code == 404

    response = client.delete(f"/cinema/{-huge_id}")
    assert response.status_code == 404
