"""Trait catalog management."""

import json
from functools import lru_cache
from pathlib import Path
from typing import Dict, List, Optional

from pydantic import BaseModel

from uht_challenge.errors import CatalogError
from uht_challenge.utils.logging import get_logger

logger = get_logger(__name__)


class TraitDefinition(BaseModel):
    """Definition of a taxonomy trait."""

    id: str
    name: str
    icon: Optional[str] = None
    feedback: Optional[str] = None


class TraitCatalog:
    """
    Ordered catalog of taxonomy traits.

    Position in the catalog decides both the trait's layer and its bit in the
    hex fingerprint, so the order given at construction is kept as-is.
    """

    def __init__(self, traits: List[TraitDefinition]):
        self.traits = list(traits)
        self._index: Dict[str, int] = {}
        for position, trait in enumerate(self.traits):
            if trait.name in self._index:
                raise CatalogError(f"Duplicate trait name in catalog: {trait.name!r}")
            self._index[trait.name] = position

    @classmethod
    def load_from_file(cls, path: Optional[Path] = None) -> "TraitCatalog":
        """Load trait catalog from JSON file."""
        if path is None:
            path = Path(__file__).parent / "traits_catalog.json"

        logger.debug(f"Loading trait catalog from: {path}")
        with open(path, "r") as f:
            data = json.load(f)

        traits = [TraitDefinition(**t) for t in data["traits"]]
        logger.info(f"Loaded {len(traits)} traits from catalog")
        return cls(traits)

    def __len__(self) -> int:
        return len(self.traits)

    def __iter__(self):
        return iter(self.traits)

    def __contains__(self, name: str) -> bool:
        return name in self._index

    def get_trait(self, name: str) -> Optional[TraitDefinition]:
        """Get a trait by name."""
        position = self._index.get(name)
        return self.traits[position] if position is not None else None

    def index_of(self, name: str) -> Optional[int]:
        """Zero-based catalog position of a trait, or None if unknown."""
        return self._index.get(name)

    def get_names(self) -> List[str]:
        """Trait names in catalog order."""
        return [t.name for t in self.traits]


@lru_cache()
def get_trait_catalog() -> TraitCatalog:
    """Get cached trait catalog instance."""
    from uht_challenge.config import get_settings

    return TraitCatalog.load_from_file(get_settings().traits_file)
