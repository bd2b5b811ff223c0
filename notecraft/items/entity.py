# notecraft/items/entity.py
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from notecraft.config import KIND_ALIASES

KIND_ITEM = "Item"
KIND_WEAPON = "Weapon"
KIND_ARMOR = "Armor"
KIND_STATE = "State"

ENTITY_KINDS = (KIND_ITEM, KIND_WEAPON, KIND_ARMOR, KIND_STATE)
EQUIPMENT_KINDS = (KIND_WEAPON, KIND_ARMOR)

# Slots of the 8-entry parameter array that describe combat stats.
COMBAT_STAT_SLOTS = {"atk": 2, "def": 3, "mat": 4, "mdf": 5, "agi": 6, "luk": 7}


def normalize_kind(name: str) -> Optional[str]:
    """Maps an annotation spelling ("item", "WEAPON", "Consumable") to a kind, or None."""
    key = name.strip().lower()
    if key in KIND_ALIASES:
        return KIND_ALIASES[key]
    for kind in ENTITY_KINDS:
        if kind.lower() == key:
            return kind
    return None


@dataclass(frozen=True)
class EntityRef:
    """Identifies an entity inside the registries: (kind, id)."""
    kind: str
    id: int

    def __post_init__(self):
        if self.kind not in ENTITY_KINDS:
            raise ValueError(f"Unknown entity kind '{self.kind}'.")
        if self.id < 1:
            raise ValueError(f"Entity id must be positive, got {self.id}.")

    def __str__(self) -> str:
        return f"{self.kind} {self.id}"


@dataclass
class Entity:
    ref: EntityRef
    name: str
    icon_index: int = 0
    description: str = ""
    note: str = ""
    params: List[int] = field(default_factory=list)

    @property
    def kind(self) -> str:
        return self.ref.kind

    @property
    def combat_stats(self) -> Optional[Dict[str, int]]:
        """Attack/defense block for weapons and armor; consumables have none."""
        if self.ref.kind not in EQUIPMENT_KINDS:
            return None
        return {
            stat: (self.params[slot] if slot < len(self.params) else 0) or 0
            for stat, slot in COMBAT_STAT_SLOTS.items()
        }

    @classmethod
    def from_dict(cls, kind: str, data: Dict[str, Any]) -> 'Entity':
        """Builds an entity from an RPG Maker style record ({"id", "name", "iconIndex", ...})."""
        return cls(
            ref=EntityRef(kind, int(data["id"])),
            name=data.get("name", ""),
            icon_index=int(data.get("iconIndex", 0) or 0),
            description=data.get("description", "") or "",
            note=data.get("note", "") or "",
            params=list(data.get("params", []) or []),
        )
