# notecraft/items/inventory.py
"""
Inventory adapter seen by the crafting core, plus an in-memory party implementation.
"""
import threading
from typing import Any, Dict

from notecraft.items.entity import EQUIPMENT_KINDS, EntityRef

_LOCK_GUARD = threading.Lock()


class InventoryAdapter:
    """
    Holdings and currency the crafting core reads and mutates.

    Hosts subclass this to wrap their own party/actor store. `lock` guards
    check-then-act sequences when the host can mutate holdings from elsewhere.
    It is created on first use, so subclasses need not call super().__init__().
    """

    def __init__(self):
        self._lock = threading.RLock()

    @property
    def lock(self):
        lock = self.__dict__.get("_lock")
        if lock is None:
            with _LOCK_GUARD:
                lock = self.__dict__.setdefault("_lock", threading.RLock())
        return lock

    def quantity_of(self, ref: EntityRef) -> int:
        raise NotImplementedError

    def has(self, ref: EntityRef) -> bool:
        return self.quantity_of(ref) > 0

    def currency(self) -> int:
        raise NotImplementedError

    def consume(self, ref: EntityRef, quantity: int) -> None:
        raise NotImplementedError

    def add(self, ref: EntityRef, quantity: int) -> None:
        raise NotImplementedError

    def spend_currency(self, amount: int) -> None:
        raise NotImplementedError

    def gain_currency(self, amount: int) -> None:
        raise NotImplementedError


class PartyInventory(InventoryAdapter):
    """Party-wide holdings: stack counts per entity, equipped gear and a gold purse."""

    def __init__(self, gold: int = 0, max_gold: int = 99999999):
        super().__init__()
        if gold < 0:
            raise ValueError("Gold cannot be negative.")
        self.max_gold = max_gold
        self._gold = min(gold, max_gold)
        self._held: Dict[EntityRef, int] = {}
        self._equipped: Dict[EntityRef, int] = {}

    def quantity_of(self, ref: EntityRef) -> int:
        return self._held.get(ref, 0)

    def has(self, ref: EntityRef, include_equipped: bool = True) -> bool:
        """Owned units count; equipped weapons and armor count too unless excluded."""
        if self.quantity_of(ref) > 0:
            return True
        return include_equipped and self._equipped.get(ref, 0) > 0

    def currency(self) -> int:
        return self._gold

    def add(self, ref: EntityRef, quantity: int = 1) -> None:
        if quantity < 1:
            raise ValueError(f"Cannot add {quantity} of {ref}.")
        with self.lock:
            self._held[ref] = self._held.get(ref, 0) + quantity

    def consume(self, ref: EntityRef, quantity: int = 1) -> None:
        if quantity < 1:
            raise ValueError(f"Cannot consume {quantity} of {ref}.")
        with self.lock:
            held = self._held.get(ref, 0)
            if held < quantity:
                raise ValueError(f"Only {held} of {ref} held, cannot consume {quantity}.")
            if held == quantity:
                del self._held[ref]
            else:
                self._held[ref] = held - quantity

    def spend_currency(self, amount: int) -> None:
        if amount < 0:
            raise ValueError("Cannot spend a negative amount.")
        with self.lock:
            if amount > self._gold:
                raise ValueError(f"Only {self._gold} gold available, cannot spend {amount}.")
            self._gold -= amount

    def gain_currency(self, amount: int) -> None:
        if amount < 0:
            raise ValueError("Cannot gain a negative amount.")
        with self.lock:
            self._gold = min(self.max_gold, self._gold + amount)

    def equip(self, ref: EntityRef) -> bool:
        """Moves one held weapon/armor into the equipped set."""
        if ref.kind not in EQUIPMENT_KINDS:
            return False
        with self.lock:
            if self.quantity_of(ref) < 1:
                return False
            self.consume(ref, 1)
            self._equipped[ref] = self._equipped.get(ref, 0) + 1
        return True

    def unequip(self, ref: EntityRef) -> bool:
        with self.lock:
            count = self._equipped.get(ref, 0)
            if count < 1:
                return False
            if count == 1:
                del self._equipped[ref]
            else:
                self._equipped[ref] = count - 1
            self.add(ref, 1)
        return True

    def held_items(self) -> Dict[EntityRef, int]:
        return dict(self._held)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'PartyInventory':
        """
        Builds a party from a starting-state mapping:
        {"gold": 60, "items": [{"kind": "Item", "id": 8, "quantity": 1}], "equipped": [...]}
        """
        party = cls(gold=int(data.get("gold", 0)))
        for entry in data.get("items", []):
            party.add(_ref_from_entry(entry), int(entry.get("quantity", 1)))
        for entry in data.get("equipped", []):
            ref = _ref_from_entry(entry)
            party.add(ref, 1)
            party.equip(ref)
        return party


def _ref_from_entry(entry: Dict[str, Any]) -> EntityRef:
    return EntityRef(entry["kind"], int(entry["id"]))

