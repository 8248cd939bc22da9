import pytest

from app.pages import Page


@pytest.mark.parametrize(
    "path,expected",
    (
        ("/", Page.browse_all),
        ("/index.html", Page.browse_all),
        ("/my-recipes.html", Page.browse_mine),
        ("/recipe-detail.html", Page.view_detail),
        ("/add-recipe.html", Page.add_recipe),
        ("/recipes/index.html", Page.browse_all),
        ("/about.html", None),
    ),
)
def test_from_path(path: str, expected: Page | None) -> None:
    assert Page.from_path(path) is expected


def test_every_page_has_a_template() -> None:
    assert {page.template for page in Page} == {
        "index.html",
        "my-recipes.html",
        "recipe-detail.html",
        "add-recipe.html",
    }
