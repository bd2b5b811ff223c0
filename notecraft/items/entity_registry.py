# notecraft/items/entity_registry.py
import json
import os
from typing import Any, Dict, Iterable, Iterator, List, Optional

from notecraft.config import CRAFTABLE_KINDS, ENTITY_DATA_FILES, UNKNOWN_ENTITY_NAME
from notecraft.items.entity import ENTITY_KINDS, Entity, EntityRef
from notecraft.utils.logger import Logger


class EntityRegistry:
    """
    Read-only view of the game's entity definitions, one table per kind.
    Declaration order is kept so catalog scans are reproducible.
    """

    def __init__(self):
        self._tables: Dict[str, Dict[int, Entity]] = {kind: {} for kind in ENTITY_KINDS}

    def register(self, entity: Entity) -> None:
        table = self._tables[entity.kind]
        if entity.ref.id in table:
            Logger.warning("EntityRegistry", f"Duplicate definition for {entity.ref}; keeping the latest.")
        table[entity.ref.id] = entity

    def lookup(self, kind: str, entity_id: int) -> Optional[Entity]:
        table = self._tables.get(kind)
        if table is None:
            return None
        return table.get(entity_id)

    def get(self, ref: Optional[EntityRef]) -> Optional[Entity]:
        if ref is None:
            return None
        return self.lookup(ref.kind, ref.id)

    def resolves(self, ref: EntityRef) -> bool:
        return self.get(ref) is not None

    def name_of(self, ref: Optional[EntityRef]) -> str:
        entity = self.get(ref)
        return entity.name if entity else UNKNOWN_ENTITY_NAME

    def entities(self, kind: str) -> List[Entity]:
        return list(self._tables.get(kind, {}).values())

    def iter_craftable(self) -> Iterator[Entity]:
        """Items, then weapons, then armor; declaration order within each kind."""
        for kind in CRAFTABLE_KINDS:
            yield from self._tables[kind].values()

    def __len__(self) -> int:
        return sum(len(table) for table in self._tables.values())

    # --- Loading ---

    def load_records(self, kind: str, records: Iterable[Optional[Dict[str, Any]]]) -> int:
        """Registers RPG Maker style records. Null slots and broken records are skipped."""
        count = 0
        for record in records:
            if not record:
                continue
            try:
                self.register(Entity.from_dict(kind, record))
                count += 1
            except (KeyError, TypeError, ValueError, AttributeError) as e:
                record_id = record.get("id") if isinstance(record, dict) else record
                Logger.warning("EntityRegistry", f"Skipping malformed {kind} record {record_id!r}: {e}")
        return count

    @classmethod
    def from_records(cls, **tables: Iterable[Optional[Dict[str, Any]]]) -> 'EntityRegistry':
        """
        Builds a registry from in-memory record lists keyed by kind name,
        e.g. from_records(Item=[None, {...}], Weapon=[...]).
        """
        registry = cls()
        for kind, records in tables.items():
            if kind not in ENTITY_KINDS:
                raise ValueError(f"Unknown entity kind '{kind}'.")
            registry.load_records(kind, records)
        return registry

    @classmethod
    def from_data_dir(cls, data_dir: str) -> 'EntityRegistry':
        """Loads Items.json, Weapons.json, Armors.json and States.json from a data directory."""
        registry = cls()
        for kind, filename in ENTITY_DATA_FILES.items():
            file_path = os.path.join(data_dir, filename)
            if not os.path.exists(file_path):
                Logger.warning("EntityRegistry", f"No {kind} data at '{file_path}'.")
                continue
            try:
                with open(file_path, 'r', encoding='utf-8') as f:
                    records = json.load(f)
            except (OSError, json.JSONDecodeError) as e:
                Logger.error("EntityRegistry", f"Error loading {filename}: {e}")
                continue
            if not isinstance(records, list):
                Logger.error("EntityRegistry", f"{filename} must contain a JSON array.")
                continue
            loaded = registry.load_records(kind, records)
            Logger.debug("EntityRegistry", f"Loaded {loaded} {kind} entries from {filename}.")
        return registry
