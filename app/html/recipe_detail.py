from jinja2 import Environment

from domain.models import Recipe


PLACEHOLDER_IMAGE = "/api/placeholder/400/300"
NOT_FOUND = "Recipe not found"


class RecipeDetail:
    def __init__(
        self,
        recipe: Recipe | None,
        *,
        environment: Environment,
        template_name: str = "recipe-detail-card.html",
    ) -> None:
        self.recipe = recipe
        self.env = environment
        self.name = template_name

    @property
    def found(self) -> bool:
        return self.recipe is not None

    @property
    def title(self) -> str:
        return self.recipe.name if self.recipe else NOT_FOUND

    @property
    def image(self) -> str:
        return (self.recipe and self.recipe.image) or PLACEHOLDER_IMAGE

    def render(self) -> str:
        return self.env.get_template(self.name).render(
            detail=self,
            recipe=self.recipe,
            not_found=NOT_FOUND,
        )
