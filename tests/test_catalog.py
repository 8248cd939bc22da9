import logging

import httpx
import pytest

from domain.catalog import RecipeCatalog, catalog_client_factory
from domain.models import Recipe


RECIPES = [
    {
        "id": 1,
        "name": "Pasta",
        "ingredients": ["tomato", "basil", "pasta", "salt"],
        "instructions": ["Boil."],
    },
    {
        "id": 2,
        "name": "Salad",
        "ingredients": ["lettuce"],
        "instructions": ["Toss."],
        "image": "https://example.com/salad.jpg",
    },
]


def catalog_with(handler) -> RecipeCatalog:
    transport = httpx.MockTransport(handler)
    return RecipeCatalog(client=catalog_client_factory(transport=transport))


@pytest.mark.asyncio
async def test_fetch_all() -> None:
    paths: list[str] = []

    def handler(request: httpx.Request) -> httpx.Response:
        paths.append(request.url.path)
        return httpx.Response(200, json=RECIPES)

    catalog = catalog_with(handler)
    got = await catalog.fetch_all()

    assert paths == ["/data.json"]
    assert [r.id for r in got] == [1, 2]
    assert got[0].image is None
    assert got[1] == Recipe.from_dict(RECIPES[1])
    assert catalog.recipes == got


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "response",
    (
        httpx.Response(404, text="Not Found"),
        httpx.Response(500),
        httpx.Response(200, text="<html>not json</html>"),
        httpx.Response(200, json=[{"name": "No id"}]),
        httpx.Response(200, json={"recipes": []}),
    ),
)
async def test_fetch_all_failure_is_empty(
    response: httpx.Response,
    caplog: pytest.LogCaptureFixture,
) -> None:
    catalog = catalog_with(lambda request: response)
    with caplog.at_level(logging.ERROR, logger="domain.catalog"):
        got = await catalog.fetch_all()
    assert got == []
    assert "Error fetching recipes" in caplog.text


@pytest.mark.asyncio
async def test_fetch_all_unreachable() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("unreachable", request=request)

    assert await catalog_with(handler).fetch_all() == []


@pytest.mark.asyncio
async def test_all_fetches_once() -> None:
    calls: list[str] = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request.url.path)
        return httpx.Response(200, json=RECIPES)

    catalog = catalog_with(handler)
    first = await catalog.all()
    second = await catalog.all()

    assert [r.id for r in second] == [1, 2]
    assert first is second
    assert calls == ["/data.json"]


@pytest.mark.asyncio
async def test_all_stays_empty_after_failure() -> None:
    calls: list[str] = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request.url.path)
        return httpx.Response(503)

    catalog = catalog_with(handler)

    assert await catalog.all() == []
    assert await catalog.all() == []
    assert len(calls) == 1
