import contextlib
import functools
import logging
import re
from typing import Any, AsyncIterator, Awaitable, Callable

import httpx
from jinja2 import Environment, FileSystemLoader, select_autoescape
from rich.logging import RichHandler
from starlette.applications import Starlette
from starlette.requests import Request
from starlette.responses import HTMLResponse, Response
from starlette.routing import Mount, Route
from starlette.staticfiles import StaticFiles

from app import config
from app.html.alert import Alert
from app.html.recipe_detail import RecipeDetail
from app.html.recipe_grid import GridMode, RecipeGrid
from app.pages import PAGE_FILES, Page
from domain.catalog import RecipeCatalog, catalog_client_factory
from domain.models import Recipe
from domain.recipe_book import RecipeBook, search_recipes
from domain.store import FileKeyValueStore, RecipeStore


CONFIG = config.Config()


logging.basicConfig(
    level=CONFIG.log_level,
    format="%(message)s",
    datefmt="[%X]",
    handlers=[RichHandler(rich_tracebacks=True)],
)
logger = logging.getLogger(__name__)


TEMPLATES = Environment(
    loader=FileSystemLoader(CONFIG.html_dir),
    autoescape=select_autoescape(),
)


SAVED = "Recipe saved to My Recipes!"
ADDED = "Recipe added successfully!"


def aHTMLResponse(route: Callable[..., Awaitable[str | tuple[str, int]]]):
    @functools.wraps(route)
    async def wrapper(*args: Any, **kwargs: Any) -> HTMLResponse:
        resp = await route(*args, **kwargs)
        if not isinstance(resp, tuple):
            html, code = resp, 200
        else:
            html, code = resp
        return HTMLResponse(html, status_code=code)

    return wrapper


def catalog_client(cfg: config.Config) -> httpx.AsyncClient:
    if cfg.catalog_url:
        return catalog_client_factory(timeout=cfg.catalog_timeout)
    # data.json is fetched from the assets directory without leaving the process.
    transport = httpx.ASGITransport(
        app=StaticFiles(directory=cfg.assets_dir, check_dir=False),
        raise_app_exceptions=False,
    )
    return catalog_client_factory(transport=transport, timeout=cfg.catalog_timeout)


def recipe_book(request: Request) -> RecipeBook:
    """Per request state over the shared catalog copy and store."""
    state = request.app.state
    return RecipeBook(catalog=state.catalog, store=state.store)


LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def parse_id(value: str | None) -> int | None:
    """Leading integer of the value, so `1abc` is 1."""
    match = LEADING_INT.match(value or "")
    return int(match.group(1)) if match else None


def render_grid(recipes: list[Recipe], mode: GridMode) -> str:
    return RecipeGrid(recipes, mode, environment=TEMPLATES).render()


async def browse_all(request: Request, book: RecipeBook) -> str:
    recipes = await book.load_all()
    grid = RecipeGrid(recipes, GridMode.browsing, environment=TEMPLATES)
    return TEMPLATES.get_template(Page.browse_all.template).render(
        grid=grid, page=Page.browse_all.value
    )


async def browse_mine(request: Request, book: RecipeBook) -> str:
    recipes = book.load_mine()
    grid = RecipeGrid(recipes, GridMode.mine, environment=TEMPLATES)
    return TEMPLATES.get_template(Page.browse_mine.template).render(
        grid=grid, page=Page.browse_mine.value
    )


async def view_detail(request: Request, book: RecipeBook) -> str:
    id = parse_id(request.query_params.get("id"))
    logger.debug("Recipe ID: %s", id)
    recipe = await book.find(id)
    detail = RecipeDetail(recipe, environment=TEMPLATES)
    return TEMPLATES.get_template(Page.view_detail.template).render(detail=detail)


async def add_recipe(request: Request, book: RecipeBook) -> str:
    return TEMPLATES.get_template(Page.add_recipe.template).render()


PAGES: dict[Page, Callable[[Request, RecipeBook], Awaitable[str]]] = {
    Page.browse_all: browse_all,
    Page.browse_mine: browse_mine,
    Page.view_detail: view_detail,
    Page.add_recipe: add_recipe,
}


@aHTMLResponse
async def page(request: Request) -> str | tuple[str, int]:
    current = Page.from_path(request.url.path)
    if current is None:
        return "Page not found.", 404
    return await PAGES[current](request, recipe_book(request))


@aHTMLResponse
async def search(request: Request) -> str:
    """Filtered grid for the search box. Leaves the collection untouched."""
    term = request.query_params.get("q", "")
    book = recipe_book(request)
    if request.query_params.get("page") == Page.browse_mine.value:
        recipes, mode = book.load_mine(), GridMode.mine
    else:
        recipes, mode = await book.load_all(), GridMode.browsing
    return render_grid(search_recipes(recipes, term), mode)


@aHTMLResponse
async def save(request: Request) -> str:
    book = recipe_book(request)
    await book.load_all()
    book.load_mine()
    if book.save(request.path_params["id"]) is None:
        return ""
    return Alert(SAVED, environment=TEMPLATES).render()


@aHTMLResponse
async def delete(request: Request) -> str:
    book = recipe_book(request)
    book.load_mine()
    book.delete(request.path_params["id"])
    return render_grid(book.my_recipes, GridMode.mine)


@aHTMLResponse
async def create(request: Request) -> str:
    async with request.form() as form:
        name = str(form.get("recipe-name", ""))
        ingredients = str(form.get("ingredients", ""))
        instructions = str(form.get("instructions", ""))
        image = str(form.get("recipe-image", ""))

    book = recipe_book(request)
    book.load_mine()
    book.add(
        name=name,
        ingredients=ingredients,
        instructions=instructions,
        image=image,
    )
    return Alert(ADDED, environment=TEMPLATES).render()


async def placeholder(request: Request) -> Response:
    svg = TEMPLATES.get_template("placeholder.svg").render(
        width=request.path_params["width"],
        height=request.path_params["height"],
    )
    return Response(svg, media_type="image/svg+xml")


@contextlib.asynccontextmanager
async def lifespan(app: Starlette) -> AsyncIterator[None]:
    async with catalog_client(CONFIG) as client:
        app.state.catalog = RecipeCatalog(
            client=client,
            path=CONFIG.catalog_url or CONFIG.catalog_path,
        )
        yield


app = Starlette(
    debug=True if CONFIG.env == config.Env.local else False,
    routes=[
        *[Route(f"/{name}", page) for name in PAGE_FILES],
        Route("/search", search),
        Route("/recipes", create, methods=["POST"]),
        Route("/recipes/{id:int}/save", save, methods=["POST"]),
        Route("/my-recipes/{id:int}/delete", delete, methods=["POST"]),
        Route("/api/placeholder/{width:int}/{height:int}", placeholder),
        Mount("/assets", StaticFiles(directory=CONFIG.assets_dir)),
    ],
    lifespan=lifespan,
)

app.state.store = RecipeStore(FileKeyValueStore(CONFIG.store_path))
