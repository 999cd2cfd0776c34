import pytest
from sqlalchemy import text

from webapi.core.logging.middleware import REQUEST_ID_HEADER


@pytest.mark.asyncio
class TestCarsRoutes:
    async def test_add_then_list(self, client):
        resp = await client.post("/cars", json=[{"name": "Volvo"}, {"name": "Saab"}])

        assert resp.status_code == 200
        body = resp.json()
        assert body["errorCode"] == 0
        assert body["errorName"] == "Ok"
        volvo, saab = body["ids"]

        resp = await client.get("/cars")
        assert resp.status_code == 200
        assert sorted(resp.json(), key=lambda r: r["id"]) == [
            {"id": volvo, "name": "Volvo"},
            {"id": saab, "name": "Saab"},
        ]

    async def test_get_by_ids(self, client, add_cars):
        volvo, saab = await add_cars("Volvo", "Saab")

        resp = await client.get("/cars", params={"ids": [saab, 999]})

        assert resp.json() == [{"id": saab, "name": "Saab"}]

    async def test_modify_unknown_id_is_not_found(self, client, add_cars):
        (volvo,) = await add_cars("Volvo")

        resp = await client.put("/cars", json=[{"id": volvo, "name": "V60"}, {"id": 999, "name": "x"}])

        assert resp.status_code == 404
        assert resp.json() == {"errorCode": 2, "errorName": "NotFoundError"}
        listed = (await client.get("/cars")).json()
        assert listed == [{"id": volvo, "name": "Volvo"}]

    async def test_modify_success(self, client, add_cars):
        (volvo,) = await add_cars("Volvo")

        resp = await client.put("/cars", json=[{"id": volvo, "name": "Volvo V60"}])

        assert resp.status_code == 200
        assert resp.json() == {"errorCode": 0, "errorName": "Ok"}

    async def test_remove(self, client, add_cars):
        volvo, saab = await add_cars("Volvo", "Saab")

        resp = await client.delete("/cars", params={"ids": [volvo, saab]})

        assert resp.status_code == 200
        assert resp.json()["errorCode"] == 0
        assert (await client.get("/cars")).json() == []

    async def test_remove_requires_ids(self, client):
        resp = await client.delete("/cars")

        assert resp.status_code == 422
        assert resp.json() == {"errorCode": 3}

    async def test_unknown_field_is_invalid_request(self, client):
        resp = await client.post("/cars", json=[{"name": "Volvo", "colour": "red"}])

        assert resp.status_code == 422
        assert resp.json()["errorCode"] == 3
        assert (await client.get("/cars")).json() == []

    async def test_response_carries_request_id(self, client):
        resp = await client.get("/cars", headers={REQUEST_ID_HEADER: "rid-7"})

        assert resp.headers[REQUEST_ID_HEADER] == "rid-7"


@pytest.mark.asyncio
class TestOtherCollections:
    async def test_duplicate_user_batch_is_database_error(self, client):
        resp = await client.post(
            "/users",
            json=[{"name": "alice", "password": "a"}, {"name": "alice", "password": "b"}],
        )

        assert resp.status_code == 500
        assert resp.json() == {"errorCode": 1, "errorName": "DatabaseError"}
        assert (await client.get("/users")).json() == []

    async def test_subscriptions_use_camel_case(self, client):
        resp = await client.post(
            "/subscriptions",
            json=[{"objectName": "car", "eventName": "ondelete", "callback": "http://localhost/cb"}],
        )
        assert resp.status_code == 200
        (sub_id,) = resp.json()["ids"]

        listed = (await client.get("/subscriptions", params={"ids": [sub_id]})).json()

        assert listed == [
            {"id": sub_id, "objectName": "car", "eventName": "ondelete", "callback": "http://localhost/cb"}
        ]

    async def test_errors_are_read_only(self, client):
        resp = await client.get("/errors")
        assert {(r["id"], r["name"]) for r in resp.json()} == {
            (0, "Ok"),
            (1, "DatabaseError"),
            (2, "NotFoundError"),
        }

        resp = await client.post("/errors", json=[{"name": "Nope"}])
        assert resp.status_code == 405


@pytest.mark.asyncio
async def test_read_failure_answers_with_reply(client, engine):
    async with engine.begin() as conn:
        await conn.execute(text("DROP TABLE car"))

    resp = await client.get("/cars")

    assert resp.status_code == 500
    assert resp.json() == {"errorCode": 1, "errorName": "DatabaseError"}
