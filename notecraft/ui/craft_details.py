# notecraft/ui/craft_details.py
from typing import List, Optional

from notecraft.config import CURRENCY_NAME
from notecraft.crafting.recipe import Recipe
from notecraft.items.entity_registry import EntityRegistry

# (label, stat key) pairs, laid out three per line
STAT_LINES = (
    (("Attack", "atk"), ("Defense", "def"), ("Agility", "agi")),
    (("M.Attack", "mat"), ("M.Defense", "mdf"), ("Luck", "luk")),
)


def describe_recipe(recipe: Optional[Recipe], registry: EntityRegistry,
                    currency_name: str = CURRENCY_NAME) -> List[str]:
    """Text lines for the details pane of the selected recipe."""
    if recipe is None:
        return []

    lines = ["Description:", recipe.description]

    result = registry.get(recipe.result)
    stats = result.combat_stats if result else None
    if stats:
        for row in STAT_LINES:
            lines.append("   ".join(f"{label}: {stats[key]}" for label, key in row))

    if recipe.cost > 0:
        lines.append(f"Cost: {recipe.cost} {currency_name}")

    lines.append("Materials:")
    for number, material in enumerate(recipe.materials, start=1):
        lines.append(f"  Material {number}: {registry.name_of(material.ref)} x{material.quantity}")

    if recipe.requirement:
        lines.append(f"Requires: {registry.name_of(recipe.requirement)}")
    return lines
