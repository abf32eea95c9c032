"""
Shared test helpers and utilities.
"""

SHOPPING_ITEM_KEYS = {"id", "name", "checked"}
RECIPE_KEYS = {"id", "name", "ingredients"}


def ids_of(records) -> list:
    """
    Collect the ``id`` of every record in a JSON array response.

    Example:
        >>> ids_of([{"id": "a"}, {"id": "b"}])
        ['a', 'b']
    """
    return [record["id"] for record in records]
