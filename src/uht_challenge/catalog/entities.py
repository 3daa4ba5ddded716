"""Entity catalog management."""

import json
from functools import lru_cache
from pathlib import Path
from typing import Dict, FrozenSet, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from uht_challenge.catalog.traits import TraitCatalog, get_trait_catalog
from uht_challenge.errors import CatalogError
from uht_challenge.utils.logging import get_logger

logger = get_logger(__name__)


class Entity(BaseModel):
    """An entity to be classified, with its true trait set."""

    model_config = ConfigDict(frozen=True)

    name: str
    image: str
    traits: FrozenSet[str] = Field(default_factory=frozenset)
    feedback: Dict[str, str] = Field(default_factory=dict)


class EntityCatalog:
    """Catalog of challenge entities."""

    def __init__(self, entities: List[Entity], trait_catalog: Optional[TraitCatalog] = None):
        self.entities = list(entities)
        self._by_name: Dict[str, Entity] = {}
        for entity in self.entities:
            if entity.name in self._by_name:
                raise CatalogError(f"Duplicate entity name in catalog: {entity.name!r}")
            self._by_name[entity.name] = entity

        if trait_catalog is not None:
            self.validate(trait_catalog)

    @classmethod
    def load_from_file(
        cls, path: Optional[Path] = None, trait_catalog: Optional[TraitCatalog] = None
    ) -> "EntityCatalog":
        """Load entity catalog from JSON file, checking traits against the trait catalog."""
        if path is None:
            path = Path(__file__).parent / "entities_catalog.json"

        logger.debug(f"Loading entity catalog from: {path}")
        with open(path, "r") as f:
            data = json.load(f)

        entities = [Entity(**e) for e in data["entities"]]
        logger.info(f"Loaded {len(entities)} entities from catalog")
        return cls(entities, trait_catalog=trait_catalog)

    def validate(self, trait_catalog: TraitCatalog) -> None:
        """Raise CatalogError if any entity names a trait missing from the catalog."""
        for entity in self.entities:
            unknown = sorted(
                name for name in entity.traits | set(entity.feedback) if name not in trait_catalog
            )
            if unknown:
                raise CatalogError(
                    f"Entity {entity.name!r} references unknown traits: {', '.join(unknown)}"
                )

    def __len__(self) -> int:
        return len(self.entities)

    def __iter__(self):
        return iter(self.entities)

    def get_entity(self, name: str) -> Optional[Entity]:
        """Get an entity by name."""
        return self._by_name.get(name)

    def get_names(self) -> List[str]:
        """Entity names in catalog order."""
        return [e.name for e in self.entities]


@lru_cache()
def get_entity_catalog() -> EntityCatalog:
    """Get cached entity catalog instance."""
    from uht_challenge.config import get_settings

    return EntityCatalog.load_from_file(
        get_settings().entities_file, trait_catalog=get_trait_catalog()
    )
