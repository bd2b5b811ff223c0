# notecraft/crafting/evaluator.py
from typing import Optional, Tuple

from notecraft.config import (
    CURRENCY_NAME, MSG_CANNOT_CRAFT, MSG_INVALID_RECIPE, MSG_READY, UNKNOWN_ENTITY_NAME
)
from notecraft.crafting.recipe import Recipe
from notecraft.items.entity import EntityRef
from notecraft.items.entity_registry import EntityRegistry
from notecraft.items.inventory import InventoryAdapter
from notecraft.utils.logger import Logger


def _name(registry: Optional[EntityRegistry], ref: EntityRef) -> str:
    return registry.name_of(ref) if registry else UNKNOWN_ENTITY_NAME


def _check(recipe: Optional[Recipe], inventory: InventoryAdapter,
           registry: Optional[EntityRegistry], currency_name: str) -> Tuple[bool, str]:
    # 1. Structure
    if recipe is None or not recipe.materials:
        return False, MSG_INVALID_RECIPE

    # 2. Materials, in declared order
    for material in recipe.materials:
        if inventory.quantity_of(material.ref) < material.quantity:
            return False, f"Not enough {_name(registry, material.ref)}."

    # 3. Requirement (owned, never consumed)
    if recipe.requirement and not inventory.has(recipe.requirement):
        return False, f"Requires {_name(registry, recipe.requirement)}."

    # 4. Currency
    if recipe.cost > 0 and inventory.currency() < recipe.cost:
        return False, f"Not enough {currency_name}."

    return True, MSG_READY


def evaluate(recipe: Optional[Recipe], inventory: InventoryAdapter,
             registry: Optional[EntityRegistry] = None,
             currency_name: str = CURRENCY_NAME) -> Tuple[bool, str]:
    """
    Decides whether the party can craft `recipe` right now.

    Returns (True, "Ready to craft.") or (False, reason). The first failing
    check wins: structure, then materials in declared order, then the
    requirement, then currency. Reads only; never raises.
    """
    try:
        return _check(recipe, inventory, registry, currency_name)
    except Exception as e:
        Logger.error("CraftEvaluator", f"Inventory check failed for {getattr(recipe, 'result', None)}: {e}")
        return False, MSG_CANNOT_CRAFT
