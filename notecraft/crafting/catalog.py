# notecraft/crafting/catalog.py
from typing import Callable, Iterator, List, Optional, TYPE_CHECKING

from notecraft.core.event_system import EVENT_CATALOG_REFRESHED
from notecraft.crafting.recipe import Recipe
from notecraft.crafting.recipe_parser import parse_note
from notecraft.items.entity_registry import EntityRegistry
from notecraft.items.inventory import InventoryAdapter
from notecraft.utils.logger import Logger

if TYPE_CHECKING:
    from notecraft.core.event_system import EventSystem

VisibilityPredicate = Callable[[Recipe], bool]


def requirement_visible(inventory: Optional[InventoryAdapter]) -> VisibilityPredicate:
    """Recipes gated by a requirement show only while the party owns one of it."""
    def _visible(recipe: Recipe) -> bool:
        if recipe.requirement is None:
            return True
        return inventory is not None and inventory.has(recipe.requirement)
    return _visible


def _unresolved(recipe: Recipe, registry: EntityRegistry) -> List[str]:
    return [str(ref) for ref in recipe.entity_refs() if not registry.resolves(ref)]


def build_catalog(registry: EntityRegistry,
                  visibility: Optional[VisibilityPredicate] = None,
                  inventory: Optional[InventoryAdapter] = None,
                  multi: Optional[bool] = None) -> List[Recipe]:
    """
    Scans items, weapons and armor (declaration order) for recipe notes.

    Recipes that mention an entity missing from the registry are dropped.
    The rest pass through `visibility`, which defaults to the requirement rule
    evaluated against `inventory`. Discovery order is kept.
    """
    if visibility is None:
        visibility = requirement_visible(inventory)

    catalog: List[Recipe] = []
    for entity in registry.iter_craftable():
        if not entity.note:
            continue
        for recipe in parse_note(entity.note, source=entity.ref, multi=multi):
            missing = _unresolved(recipe, registry)
            if missing:
                Logger.warning("RecipeCatalog", f"Dropping recipe on {entity.ref} ({entity.name}): unknown {', '.join(missing)}.")
                continue
            if visibility(recipe):
                catalog.append(recipe)
    return catalog


class RecipeCatalog:
    """The recipe list currently on offer; rebuilt from scratch on every refresh."""

    def __init__(self, registry: EntityRegistry, inventory: Optional[InventoryAdapter] = None,
                 visibility: Optional[VisibilityPredicate] = None,
                 events: Optional['EventSystem'] = None,
                 multi: Optional[bool] = None):
        self.registry = registry
        self.inventory = inventory
        self.visibility = visibility
        self.events = events
        self.multi = multi
        self.recipes: List[Recipe] = []

    def refresh(self) -> List[Recipe]:
        self.recipes = build_catalog(self.registry, self.visibility, self.inventory, self.multi)
        Logger.debug("RecipeCatalog", f"Catalog rebuilt with {len(self.recipes)} recipe(s).")
        if self.events:
            self.events.publish(EVENT_CATALOG_REFRESHED, list(self.recipes))
        return self.recipes

    def get(self, index: Optional[int]) -> Optional[Recipe]:
        if index is None or not 0 <= index < len(self.recipes):
            return None
        return self.recipes[index]

    def index_of(self, recipe: Recipe) -> Optional[int]:
        for index, candidate in enumerate(self.recipes):
            if candidate == recipe:
                return index
        return None

    def find(self, text: str) -> Optional[int]:
        """Index of the first recipe whose result name contains `text` (case-insensitive)."""
        needle = text.strip().lower()
        if not needle:
            return None
        for index, recipe in enumerate(self.recipes):
            if needle in self.registry.name_of(recipe.result).lower():
                return index
        return None

    def __len__(self) -> int:
        return len(self.recipes)

    def __getitem__(self, index: int) -> Recipe:
        return self.recipes[index]

    def __iter__(self) -> Iterator[Recipe]:
        return iter(self.recipes)
