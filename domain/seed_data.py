"""
Sample records loaded into the stores at startup so a fresh server has
something to list.
"""

SHOPPING_LIST_SEED = [
    {"name": "beans", "checked": False},
    {"name": "tomatoes", "checked": False},
    {"name": "peppers", "checked": False},
]

RECIPE_SEED = [
    {
        "name": "boiled white rice",
        "ingredients": ["1 cup white rice", "2 cups water", "pinch of salt"],
    },
    {
        "name": "milkshake",
        "ingredients": ["2 tbsp cocoa", "2 cups vanilla ice cream", "1 cup milk"],
    },
]
