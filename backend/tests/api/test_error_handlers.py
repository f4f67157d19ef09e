"""Error Handlers - response bodies and the category attached to each log record."""

import logging

from httpx import ASGITransport, AsyncClient


def _handler_records(caplog):
    return [r for r in caplog.records if r.name == "incalink.api.error_handlers"]


async def test_validation_error_logged_with_validation_category(client, caplog):
    caplog.set_level(logging.WARNING)

    res = await client.post("/api/groups", json={"group_name": "A"})

    assert res.status_code == 400
    records = _handler_records(caplog)
    assert records[-1].category == "validation"
    assert records[-1].error_code == "VALIDATION_ERROR"


async def test_domain_error_logged_with_its_category(client, caplog):
    caplog.set_level(logging.WARNING)

    res = await client.get("/api/groups/31337")

    assert res.status_code == 404
    records = _handler_records(caplog)
    assert records[-1].category == "resource_not_found"
    assert records[-1].group_id == 31337


async def test_unhandled_error_hides_details(app, caplog):
    caplog.set_level(logging.ERROR)

    async def boom():
        raise RuntimeError("secret connection string")

    app.add_api_route("/boom", boom)
    async with AsyncClient(
        transport=ASGITransport(app=app, raise_app_exceptions=False),
        base_url="http://test",
    ) as c:
        res = await c.get("/boom")

    assert res.status_code == 500
    assert res.json() == {"error": "An unexpected error occurred"}
    assert _handler_records(caplog)[-1].category == "internal"
