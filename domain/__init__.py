"""Describes the Recipe Box domain. Centres around the `RecipeBook`.

Two sources of recipes:

- The catalog. A static json file, read once per page load and never changed.
- My recipes. Whatever the user saved or wrote themselves, kept in a
  key-value store under a single key and rewritten in full on every change.

No invariants beyond unique ids. No validation of what comes in.
"""
