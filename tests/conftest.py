"""Pytest configuration and fixtures."""

import os
import sys
from pathlib import Path

import pytest

# Add src to path for imports
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))

# Set test environment variables
os.environ["UHT_LOG_LEVEL"] = "WARNING"
os.environ.pop("UHT_TRAITS_FILE", None)
os.environ.pop("UHT_ENTITIES_FILE", None)


@pytest.fixture
def small_traits():
    """A four-trait catalog: A, B, C, D."""
    from uht_challenge.catalog import TraitCatalog, TraitDefinition

    return TraitCatalog(
        [
            TraitDefinition(id="a", name="A", feedback="A is the first trait."),
            TraitDefinition(id="b", name="B"),
            TraitDefinition(id="c", name="C", feedback="C is rarely right."),
            TraitDefinition(id="d", name="D", feedback="D default feedback."),
        ]
    )


@pytest.fixture
def small_entities(small_traits):
    """Three entities over the four-trait catalog."""
    from uht_challenge.catalog import Entity, EntityCatalog

    return EntityCatalog(
        [
            Entity(
                name="Widget",
                image="images/widget.png",
                traits=["B", "D"],
                feedback={"D": "Widgets always have D."},
            ),
            Entity(name="Gadget", image="images/gadget.png", traits=["A"]),
            Entity(name="Gizmo", image="images/gizmo.png", traits=["A", "B", "C", "D"]),
        ],
        trait_catalog=small_traits,
    )


@pytest.fixture
def session(small_entities, small_traits):
    """A seeded session over the small catalogs."""
    from uht_challenge.engine import ChallengeSession

    return ChallengeSession(small_entities, small_traits, seed=7)


@pytest.fixture
def widget_session(small_entities, small_traits):
    """A session whose only entity is Widget, already started."""
    from uht_challenge.catalog import EntityCatalog
    from uht_challenge.engine import ChallengeSession

    catalog = EntityCatalog([small_entities.get_entity("Widget")], trait_catalog=small_traits)
    session = ChallengeSession(catalog, small_traits, seed=1)
    session.start()
    return session
