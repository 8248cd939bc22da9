from enum import Enum


class Page(Enum):
    browse_all = "browse-all"
    browse_mine = "browse-mine"
    view_detail = "view-detail"
    add_recipe = "add-recipe"

    @classmethod
    def from_path(cls, path: str) -> "Page | None":
        name = path.rstrip("/").rsplit("/", 1)[-1]
        return PAGE_FILES.get(name)

    @property
    def template(self) -> str:
        return PAGE_TEMPLATES[self]


PAGE_FILES = {
    "": Page.browse_all,
    "index.html": Page.browse_all,
    "my-recipes.html": Page.browse_mine,
    "recipe-detail.html": Page.view_detail,
    "add-recipe.html": Page.add_recipe,
}


PAGE_TEMPLATES = {
    Page.browse_all: "index.html",
    Page.browse_mine: "my-recipes.html",
    Page.view_detail: "recipe-detail.html",
    Page.add_recipe: "add-recipe.html",
}
