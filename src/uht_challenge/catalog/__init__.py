"""Trait and entity reference data."""

from uht_challenge.catalog.entities import Entity, EntityCatalog, get_entity_catalog
from uht_challenge.catalog.traits import TraitCatalog, TraitDefinition, get_trait_catalog

__all__ = [
    "TraitDefinition",
    "TraitCatalog",
    "get_trait_catalog",
    "Entity",
    "EntityCatalog",
    "get_entity_catalog",
]
