# notecraft/combat/targeting.py
"""
Note-tag predicate deciding which combatants can be picked as targets.
A combatant under any state whose note carries the non-targetable tag
cannot be selected.
"""
from dataclasses import dataclass, field
from typing import Iterable, List

from notecraft.config import NONTARGETABLE_TAG
from notecraft.items.entity import KIND_STATE
from notecraft.items.entity_registry import EntityRegistry


def has_tag(note: str, tag: str) -> bool:
    """True when `tag` appears verbatim in `note`."""
    if not note or not tag:
        return False
    return tag in note


@dataclass
class Combatant:
    name: str
    hp: int = 1
    state_ids: List[int] = field(default_factory=list)

    @property
    def is_alive(self) -> bool:
        return self.hp > 0


def is_selectable(combatant: Combatant, registry: EntityRegistry, tag: str = NONTARGETABLE_TAG) -> bool:
    for state_id in combatant.state_ids:
        state = registry.lookup(KIND_STATE, state_id)
        if state and has_tag(state.note, tag):
            return False
    return True


def selectable_targets(combatants: Iterable[Combatant], registry: EntityRegistry,
                       tag: str = NONTARGETABLE_TAG) -> List[Combatant]:
    """Living combatants that may be targeted, in their original order."""
    return [c for c in combatants if c.is_alive and is_selectable(c, registry, tag)]
