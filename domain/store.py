"""Local persistence for my recipes.

A key-value string store, the same shape as the browser's local storage.
"""

import json
import logging
import os
from pathlib import Path
import tempfile
from typing import Iterable, Protocol

from domain.models import Recipe


logger = logging.getLogger(__name__)


MY_RECIPES_KEY = "myRecipes"


class KeyValueStore(Protocol):
    def get_item(self, key: str) -> str | None: ...

    def set_item(self, key: str, value: str) -> None: ...

    def remove_item(self, key: str) -> None: ...


class MemoryKeyValueStore:
    def __init__(self, items: dict[str, str] | None = None) -> None:
        self.items = {} if items is None else items

    def get_item(self, key: str) -> str | None:
        return self.items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self.items[key] = value

    def remove_item(self, key: str) -> None:
        self.items.pop(key, None)


class FileKeyValueStore:
    """Keeps every item in one json object on disk.

    The whole file is read on each access and rewritten on each change.
    """

    def __init__(self, path: Path) -> None:
        self.path = path

    def _read(self) -> dict[str, str]:
        if not self.path.exists():
            return {}
        with open(self.path) as f:
            return json.load(f)

    def _write(self, items: dict[str, str]) -> None:
        # The old file stays in place until the new one is complete.
        with tempfile.NamedTemporaryFile(
            "w", dir=self.path.parent, prefix=f".{self.path.name}.", delete=False
        ) as f:
            tmp = Path(f.name)
            try:
                json.dump(items, f)
            except BaseException:
                f.close()
                tmp.unlink()
                raise
        os.replace(tmp, self.path)

    def get_item(self, key: str) -> str | None:
        return self._read().get(key)

    def set_item(self, key: str, value: str) -> None:
        items = self._read()
        items[key] = value
        self._write(items)

    def remove_item(self, key: str) -> None:
        items = self._read()
        if items.pop(key, None) is not None:
            self._write(items)


class RecipeStore:
    """My recipes, serialized under a single key."""

    def __init__(self, store: KeyValueStore, *, key: str = MY_RECIPES_KEY) -> None:
        self.store = store
        self.key = key

    def load(self) -> list[Recipe]:
        # Malformed data raises, nothing tries to repair it.
        stored = self.store.get_item(self.key)
        if stored is None:
            return []
        return [Recipe.from_dict(r) for r in json.loads(stored)]

    def save_all(self, recipes: Iterable[Recipe]) -> None:
        data = [recipe.to_dict() for recipe in recipes]
        self.store.set_item(self.key, json.dumps(data))
        logger.debug("Stored %d recipes under %s", len(data), self.key)
