from typing import Any


PLACEHOLDER_IMAGE = "/api/placeholder/250/200"


class Recipe:
    def __init__(
        self,
        *,
        id: int,
        name: str,
        ingredients: list[str],
        instructions: list[str],
        image: str | None = None,
    ) -> None:
        self.id = id
        self.name = name
        self.ingredients = ingredients
        self.instructions = instructions
        self.image = image

    def __repr__(self) -> str:
        return f"<Recipe(id={self.id}, name={self.name})>"

    def __str__(self) -> str:
        return self.name

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Recipe):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def matches(self, term: str) -> bool:
        """Case insensitive substring match on the name or any ingredient."""
        term = term.lower()
        return term in self.name.lower() or any(
            term in ingredient.lower() for ingredient in self.ingredients
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "ingredients": list(self.ingredients),
            "instructions": list(self.instructions),
            "image": self.image,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Recipe":
        return cls(
            id=data["id"],
            name=data["name"],
            ingredients=list(data["ingredients"]),
            instructions=list(data["instructions"]),
            image=data.get("image"),
        )
