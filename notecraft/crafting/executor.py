# notecraft/crafting/executor.py
from collections import Counter
from functools import partial
from typing import Callable, List, Optional

from notecraft.crafting.recipe import Recipe
from notecraft.items.inventory import InventoryAdapter
from notecraft.utils.logger import Logger


def _still_available(recipe: Recipe, inventory: InventoryAdapter) -> bool:
    # Materials naming the same entity twice draw from one stack.
    needed = Counter()
    for material in recipe.materials:
        needed[material.ref] += material.quantity
    if any(inventory.quantity_of(ref) < qty for ref, qty in needed.items()):
        return False
    return recipe.cost <= 0 or inventory.currency() >= recipe.cost


def _rollback(undo: List[Callable[[], None]]) -> None:
    for step in reversed(undo):
        try:
            step()
        except Exception as e:
            Logger.critical("CraftExecutor", f"Rollback step failed, inventory may be inconsistent: {e}")


def execute(recipe: Optional[Recipe], inventory: InventoryAdapter) -> bool:
    """
    Applies a recipe: consume materials, add one result, spend the cost.

    Callers evaluate first. Availability is re-derived under the inventory
    lock, and either every effect lands or none does.
    """
    if recipe is None or not recipe.materials:
        Logger.error("CraftExecutor", "Invalid recipe or missing materials.")
        return False

    with inventory.lock:
        if not _still_available(recipe, inventory):
            Logger.warning("CraftExecutor", f"Resources for {recipe.result} changed before crafting; nothing applied.")
            return False

        undo: List[Callable[[], None]] = []
        try:
            for material in recipe.materials:
                inventory.consume(material.ref, material.quantity)
                undo.append(partial(inventory.add, material.ref, material.quantity))

            inventory.add(recipe.result, 1)
            undo.append(partial(inventory.consume, recipe.result, 1))

            if recipe.cost > 0:
                inventory.spend_currency(recipe.cost)
                undo.append(partial(inventory.gain_currency, recipe.cost))
        except Exception as e:
            Logger.error("CraftExecutor", f"Crafting {recipe.result} failed part way, rolling back: {e}")
            _rollback(undo)
            return False

    Logger.info("CraftExecutor", f"Crafted {recipe.result} (cost {recipe.cost}).")
    return True
