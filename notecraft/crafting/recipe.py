# notecraft/crafting/recipe.py
from dataclasses import dataclass, field
from typing import Optional, Tuple

from notecraft.items.entity import EntityRef


@dataclass(frozen=True)
class Material:
    ref: EntityRef
    quantity: int = 1

    def __post_init__(self):
        if self.quantity < 1:
            raise ValueError(f"Material quantity must be at least 1, got {self.quantity}.")


@dataclass(frozen=True)
class Recipe:
    """
    One crafting rule read from an entity note.

    Crafting consumes every material, spends `cost` currency and yields one
    `result`. A `requirement` is a gate: it must be owned but is not consumed.
    `source` names the entity whose note declared the recipe and is ignored
    when comparing recipes.
    """
    result: EntityRef
    materials: Tuple[Material, ...]
    description: str = ""
    requirement: Optional[EntityRef] = None
    cost: int = 0
    source: Optional[EntityRef] = field(default=None, compare=False)

    def __post_init__(self):
        if not self.materials:
            raise ValueError("A recipe needs at least one material.")
        if self.cost < 0:
            raise ValueError(f"Recipe cost cannot be negative, got {self.cost}.")

    def entity_refs(self) -> Tuple[EntityRef, ...]:
        """Every entity the recipe mentions: result, materials, then requirement."""
        refs = [self.result] + [m.ref for m in self.materials]
        if self.requirement:
            refs.append(self.requirement)
        return tuple(refs)
