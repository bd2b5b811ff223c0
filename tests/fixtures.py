# tests/fixtures.py
import io
import sys
import unittest
from typing import Any, List, Tuple

from notecraft.core.event_system import EventSystem
from notecraft.crafting.crafting_manager import CraftingManager
from notecraft.items.entity import EntityRef
from notecraft.items.entity_registry import EntityRegistry
from notecraft.items.inventory import PartyInventory
from notecraft.utils.logger import Logger

POTION = EntityRef("Item", 1)
ETHER = EntityRef("Item", 2)
MORTAR = EntityRef("Item", 7)
HERB = EntityRef("Item", 8)
WATER = EntityRef("Item", 9)
DUST = EntityRef("Item", 10)
SWORD = EntityRef("Weapon", 1)
CAP = EntityRef("Armor", 1)

POTION_NOTE = """<recipe>
Result: Item 1
Material1: Item 8, 1
Material2: Item 9, 1
Description: Potion to heal
Requirement: Item 7
Cost: 50
</recipe>"""

ETHER_NOTE = """<recipe>
Result: Item 2
Material1: Item 10, 2
Cost: 20
</recipe>"""

SWORD_NOTE = """<recipe>
Result: Weapon 1
Material1: Item 8, 3
Description: Forged in a hurry.
Cost: 100
</recipe>"""

CAP_NOTE = """<recipe>
Result: Armor 1
Material1: Item 9, 2
</recipe>"""


def item_records() -> List[Any]:
    return [
        None,
        {"id": 1, "name": "Potion", "description": "Restores HP.", "note": POTION_NOTE},
        {"id": 2, "name": "Ether", "note": ETHER_NOTE},
        None, None, None, None,
        {"id": 7, "name": "Mortar", "note": ""},
        {"id": 8, "name": "Herb", "note": ""},
        {"id": 9, "name": "Spring Water", "note": ""},
        {"id": 10, "name": "Fairy Dust", "note": ""},
    ]


def weapon_records() -> List[Any]:
    return [None, {"id": 1, "name": "Bronze Sword", "note": SWORD_NOTE, "params": [0, 0, 10, 1, 2, 3, 4, 5]}]


def armor_records() -> List[Any]:
    return [None, {"id": 1, "name": "Leather Cap", "note": CAP_NOTE, "params": [0, 0, 0, 5, 0, 2, 0, 1]}]


def state_records() -> List[Any]:
    return [
        None,
        {"id": 1, "name": "Knockout", "note": ""},
        {"id": 2, "name": "Hidden", "note": "<SP variable>nontargetable</SP variable>"},
    ]


class EventRecorder:
    """
    A dummy subscriber that remembers every event it sees.
    """
    def __init__(self, events: EventSystem, *event_types: str):
        self.received: List[Tuple[str, Any]] = []
        for event_type in event_types:
            events.subscribe(event_type, self)

    def __call__(self, event_type: str, data: Any):
        self.received.append((event_type, data))

    def of_type(self, event_type: str) -> List[Any]:
        return [data for kind, data in self.received if kind == event_type]

    def clear(self):
        self.received = []


class CraftingTestBase(unittest.TestCase):
    """Base class for crafting tests: a small registry, an empty party and an event bus."""

    def setUp(self):
        """Runs before EVERY test function."""
        # 1. Silence the console logger
        self.log_output = io.StringIO()
        self._saved_level = Logger.get_level()
        Logger.set_stream(self.log_output)
        Logger.set_level(0)

        # 2. In-memory entity data
        self.registry = EntityRegistry.from_records(
            Item=item_records(),
            Weapon=weapon_records(),
            Armor=armor_records(),
            State=state_records(),
        )

        # 3. Fresh party and bus
        self.inventory = PartyInventory(gold=0)
        self.events = EventSystem()
        self.manager = CraftingManager(self.registry, self.inventory, self.events)

    def tearDown(self):
        Logger.set_stream(sys.stdout)
        Logger.set_level(self._saved_level)

    def give(self, ref: EntityRef, quantity: int = 1):
        self.inventory.add(ref, quantity)

    def give_potion_materials(self, gold: int = 60):
        """The canonical potion setup: one herb, one water, a mortar and some gold."""
        self.give(HERB)
        self.give(WATER)
        self.give(MORTAR)
        self.inventory.gain_currency(gold)
