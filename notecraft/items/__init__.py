# notecraft/items/__init__.py
"""
Items Package.
Entity definitions, the registry that loads them and the party inventory.
"""
from .entity import Entity, EntityRef
from .entity_registry import EntityRegistry
from .inventory import InventoryAdapter, PartyInventory
