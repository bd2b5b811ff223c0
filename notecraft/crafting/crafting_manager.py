# notecraft/crafting/crafting_manager.py
from dataclasses import dataclass
from typing import List, Optional, Tuple

from notecraft.config import (
    CURRENCY_NAME, MSG_CANNOT_CRAFT, MSG_CRAFT_SUCCESS,
    SOUND_CRAFT_FAILURE, SOUND_CRAFT_SUCCESS
)
from notecraft.core.event_system import (
    EVENT_CRAFT_BLOCKED, EVENT_CRAFT_SUCCEEDED, EVENT_SOUND_CUE, EventSystem
)
from notecraft.crafting.catalog import RecipeCatalog, VisibilityPredicate
from notecraft.crafting.evaluator import evaluate
from notecraft.crafting.executor import execute
from notecraft.crafting.recipe import Recipe
from notecraft.items.entity_registry import EntityRegistry
from notecraft.items.inventory import InventoryAdapter
from notecraft.utils.logger import Logger


@dataclass(frozen=True)
class CraftOutcome:
    success: bool
    message: str
    recipe: Optional[Recipe] = None


class CraftingManager:
    """
    Ties the catalog, the evaluator and the executor to one party.

    `craft` is the commit path: it re-checks and applies under the inventory
    lock, then reports the outcome on the event bus for the UI.
    """

    def __init__(self, registry: EntityRegistry, inventory: InventoryAdapter,
                 events: Optional[EventSystem] = None,
                 visibility: Optional[VisibilityPredicate] = None,
                 currency_name: str = CURRENCY_NAME,
                 multi: Optional[bool] = None):
        self.registry = registry
        self.inventory = inventory
        self.events = events or EventSystem()
        self.currency_name = currency_name
        self.catalog = RecipeCatalog(registry, inventory, visibility, self.events, multi)

    @property
    def recipes(self) -> List[Recipe]:
        return self.catalog.recipes

    def refresh_catalog(self) -> List[Recipe]:
        return self.catalog.refresh()

    def can_craft(self, recipe: Optional[Recipe]) -> Tuple[bool, str]:
        """Checks materials, requirement AND currency."""
        return evaluate(recipe, self.inventory, self.registry, self.currency_name)

    def craft(self, recipe: Optional[Recipe]) -> CraftOutcome:
        """Executes the crafting process: re-check, consume materials, create result."""
        with self.inventory.lock:
            craftable, reason = self.can_craft(recipe)
            applied = craftable and execute(recipe, self.inventory)

        if not craftable:
            outcome = CraftOutcome(False, reason, recipe)
        elif not applied:
            outcome = CraftOutcome(False, MSG_CANNOT_CRAFT, recipe)
        else:
            outcome = CraftOutcome(True, MSG_CRAFT_SUCCESS, recipe)

        self._announce(outcome)
        if outcome.success:
            self.refresh_catalog()
        return outcome

    def _announce(self, outcome: CraftOutcome) -> None:
        if outcome.success:
            Logger.debug("CraftingManager", f"Crafted {self.registry.name_of(outcome.recipe.result)}.")
            self.events.publish(EVENT_CRAFT_SUCCEEDED, outcome)
            self.events.publish(EVENT_SOUND_CUE, SOUND_CRAFT_SUCCESS)
        else:
            Logger.debug("CraftingManager", f"Craft blocked: {outcome.message}")
            self.events.publish(EVENT_CRAFT_BLOCKED, outcome)
            self.events.publish(EVENT_SOUND_CUE, SOUND_CRAFT_FAILURE)
