from enum import Enum

from jinja2 import Environment

from domain.models import PLACEHOLDER_IMAGE, Recipe


PREVIEW_INGREDIENTS = 3


class GridMode(Enum):
    browsing = "browsing"
    mine = "mine"

    @property
    def grid_id(self) -> str:
        return "my-recipes-grid" if self is GridMode.mine else "all-recipes-grid"


class RecipeCard:
    def __init__(self, recipe: Recipe) -> None:
        self.recipe = recipe

    @property
    def id(self) -> int:
        return self.recipe.id

    @property
    def name(self) -> str:
        return self.recipe.name

    @property
    def image(self) -> str:
        return self.recipe.image or PLACEHOLDER_IMAGE

    @property
    def preview(self) -> str:
        """First few ingredients, with an ellipsis if there are more."""
        ingredients = self.recipe.ingredients
        text = ", ".join(ingredients[:PREVIEW_INGREDIENTS])
        return f"{text}..." if len(ingredients) > PREVIEW_INGREDIENTS else text


class RecipeGrid:
    def __init__(
        self,
        recipes: list[Recipe],
        mode: GridMode,
        *,
        environment: Environment,
        template_name: str = "recipe-grid.html",
    ) -> None:
        self.cards = [RecipeCard(r) for r in recipes]
        self.mode = mode
        self.env = environment
        self.name = template_name

    @property
    def id(self) -> str:
        return self.mode.grid_id

    def render(self) -> str:
        return self.env.get_template(self.name).render(grid=self)
