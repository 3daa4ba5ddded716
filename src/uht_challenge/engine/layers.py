"""Layer classification of catalog traits by position."""

from enum import Enum
from typing import Dict, List, Optional

from uht_challenge.catalog.entities import Entity
from uht_challenge.catalog.traits import TraitCatalog, TraitDefinition

# Each layer covers this many consecutive catalog positions; anything past the
# third boundary is Social regardless of catalog size.
LAYER_WIDTH = 8


class Layer(str, Enum):
    """The four taxonomy layers, in catalog order."""

    PHYSICAL = "Physical"
    FUNCTIONAL = "Functional"
    ABSTRACT = "Abstract"
    SOCIAL = "Social"


LAYER_ORDER: List[Layer] = [Layer.PHYSICAL, Layer.FUNCTIONAL, Layer.ABSTRACT, Layer.SOCIAL]


def layer_of(trait_index: int) -> Layer:
    """
    Classify a zero-based catalog position into its layer.

    Args:
        trait_index: Position of the trait in the catalog

    Returns:
        Layer for that position

    Raises:
        ValueError: If the index is negative
    """
    if trait_index < 0:
        raise ValueError(f"Trait index must be non-negative, got {trait_index}")
    return LAYER_ORDER[min(trait_index // LAYER_WIDTH, len(LAYER_ORDER) - 1)]


def count_traits_in_layer(
    entity: Optional[Entity], layer: Layer, catalog: TraitCatalog
) -> int:
    """Count how many of an entity's traits fall into a layer (0 without an entity)."""
    if entity is None:
        return 0

    count = 0
    for name in entity.traits:
        index = catalog.index_of(name)
        if index is not None and layer_of(index) is layer:
            count += 1
    return count


def layer_counts(entity: Optional[Entity], catalog: TraitCatalog) -> Dict[Layer, int]:
    """Trait counts for every layer, in layer order."""
    return {layer: count_traits_in_layer(entity, layer, catalog) for layer in LAYER_ORDER}


def traits_in_layer(catalog: TraitCatalog, layer: Layer) -> List[TraitDefinition]:
    """Catalog traits belonging to a layer, in catalog order."""
    return [t for i, t in enumerate(catalog) if layer_of(i) is layer]
