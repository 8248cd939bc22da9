import logging
import time
from typing import Iterable

from domain.catalog import RecipeCatalog
from domain.models import PLACEHOLDER_IMAGE, Recipe
from domain.store import RecipeStore


logger = logging.getLogger(__name__)


def search_recipes(recipes: Iterable[Recipe], term: str) -> list[Recipe]:
    """Recipes whose name or ingredients contain the term, in their given order."""
    return [recipe for recipe in recipes if recipe.matches(term)]


def split_lines(text: str) -> list[str]:
    # Blank lines are kept as empty entries.
    return text.replace("\r\n", "\n").split("\n")


def new_recipe_id(taken: Iterable[int] = ()) -> int:
    """Millisecond timestamp, bumped past any id already in use."""
    taken = set(taken)
    id = int(time.time() * 1000)
    while id in taken:
        id += 1
    return id


class RecipeBook:
    """All recipes and my recipes for a single page load."""

    def __init__(self, *, catalog: RecipeCatalog, store: RecipeStore) -> None:
        self.catalog = catalog
        self.store = store
        self.all_recipes: list[Recipe] = []
        self.my_recipes: list[Recipe] = []

    async def load_all(self) -> list[Recipe]:
        self.all_recipes = list(await self.catalog.all())
        return self.all_recipes

    def load_mine(self) -> list[Recipe]:
        self.my_recipes = self.store.load()
        return self.my_recipes

    def is_mine(self, id: int) -> bool:
        return any(r.id == id for r in self.my_recipes)

    def save(self, id: int) -> Recipe | None:
        """Copy a catalog recipe into my recipes.

        Returns the saved recipe, or None if it is unknown or already saved.
        """
        recipe = next((r for r in self.all_recipes if r.id == id), None)
        if recipe is None or self.is_mine(recipe.id):
            return None
        self.my_recipes.append(recipe)
        self.store.save_all(self.my_recipes)
        logger.info("Saved recipe %s", recipe.id)
        return recipe

    def delete(self, id: int) -> None:
        self.my_recipes = [r for r in self.my_recipes if r.id != id]
        self.store.save_all(self.my_recipes)

    def add(
        self,
        *,
        name: str,
        ingredients: str,
        instructions: str,
        image: str = "",
    ) -> Recipe:
        recipe = Recipe(
            id=new_recipe_id(r.id for r in self.my_recipes),
            name=name,
            ingredients=split_lines(ingredients),
            instructions=split_lines(instructions),
            image=image or PLACEHOLDER_IMAGE,
        )
        self.my_recipes.append(recipe)
        self.store.save_all(self.my_recipes)
        logger.info("Added recipe %s", recipe.id)
        return recipe

    async def find(self, id: int | None) -> Recipe | None:
        """Look in all recipes first, then mine. Loads whichever is empty."""
        if not self.all_recipes:
            await self.load_all()
        if not self.my_recipes:
            self.load_mine()

        recipe = next((r for r in self.all_recipes + self.my_recipes if r.id == id), None)
        logger.debug("Recipe %s: %r", id, recipe)
        return recipe
