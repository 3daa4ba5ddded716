"""Challenge session: entity draws, trait selection, hints and scoring."""

import random
from typing import Dict, Optional, Set

from pydantic import BaseModel, Field

from uht_challenge.catalog.entities import Entity, EntityCatalog, get_entity_catalog
from uht_challenge.catalog.traits import TraitCatalog, get_trait_catalog
from uht_challenge.engine.hexcode import encode_selection
from uht_challenge.engine.layers import Layer, layer_counts
from uht_challenge.engine.scoring import ScoreResult, compare_selection
from uht_challenge.errors import EmptyCatalogError, NoActiveChallengeError
from uht_challenge.utils.logging import get_logger

logger = get_logger(__name__)


class SessionState(BaseModel):
    """Mutable state of one quiz."""

    current_entity: Optional[Entity] = None
    selected_traits: Set[str] = Field(default_factory=set)
    seen_entity_names: Set[str] = Field(default_factory=set)
    hint_used: bool = False
    result: Optional[ScoreResult] = None


class ChallengeSession:
    """
    Drives a single quiz over fixed trait and entity catalogs.

    Entities are drawn at random without repeats until every entity in the
    catalog has been shown once, after which the rotation starts over.
    The caller owns the session and is expected to call its methods one at a
    time.
    """

    def __init__(
        self,
        entity_catalog: Optional[EntityCatalog] = None,
        trait_catalog: Optional[TraitCatalog] = None,
        seed: Optional[int] = None,
        rng: Optional[random.Random] = None,
    ):
        """
        Initialize a challenge session.

        Args:
            entity_catalog: Entities to draw from (uses default if None)
            trait_catalog: Trait taxonomy (uses default if None)
            seed: Seed for a private random generator, ignored when rng is given
            rng: Random generator used for entity draws
        """
        self.trait_catalog = trait_catalog if trait_catalog is not None else get_trait_catalog()
        self.entity_catalog = (
            entity_catalog if entity_catalog is not None else get_entity_catalog()
        )
        self.rng = rng if rng is not None else random.Random(seed)
        self.state = SessionState()

    @property
    def current_entity(self) -> Optional[Entity]:
        return self.state.current_entity

    @property
    def selected_traits(self) -> Set[str]:
        return set(self.state.selected_traits)

    @property
    def hint_used(self) -> bool:
        return self.state.hint_used

    @property
    def result(self) -> Optional[ScoreResult]:
        return self.state.result

    @property
    def hex_code(self) -> str:
        """Hex fingerprint of the current selection."""
        return encode_selection(self.state.selected_traits, self.trait_catalog)

    def _require_entity(self, operation: str) -> Entity:
        if self.state.current_entity is None:
            raise NoActiveChallengeError(operation)
        return self.state.current_entity

    def start(self) -> Entity:
        """
        Start a new challenge with an entity not yet seen in this rotation.

        Returns:
            The drawn entity

        Raises:
            EmptyCatalogError: If the entity catalog has no entries
        """
        if len(self.entity_catalog) == 0:
            raise EmptyCatalogError()

        remaining = [
            e for e in self.entity_catalog if e.name not in self.state.seen_entity_names
        ]
        if not remaining:
            logger.debug("All entities presented, starting a new rotation")
            self.state.seen_entity_names = set()
            remaining = list(self.entity_catalog)

        entity = self.rng.choice(remaining)

        self.state.current_entity = entity
        self.state.selected_traits = set()
        self.state.result = None
        self.state.hint_used = False
        self.state.seen_entity_names.add(entity.name)

        logger.debug(
            f"Started challenge: {entity.name} "
            f"({len(self.state.seen_entity_names)}/{len(self.entity_catalog)} in rotation)"
        )
        return entity

    def toggle_trait(self, name: str) -> Set[str]:
        """
        Select a trait if unselected, otherwise deselect it.

        Any stored result is cleared, since it no longer matches the selection.

        Returns:
            The selection after the toggle

        Raises:
            NoActiveChallengeError: If no challenge has been started
        """
        self._require_entity("toggle a trait")

        if name in self.state.selected_traits:
            self.state.selected_traits.discard(name)
        else:
            self.state.selected_traits.add(name)
        self.state.result = None

        return self.selected_traits

    def request_hint(self) -> Dict[Layer, int]:
        """
        Grant the one-shot hint for this challenge.

        The hint penalty applies from the first call on; repeated calls
        change nothing.

        Returns:
            Number of the entity's traits in each layer

        Raises:
            NoActiveChallengeError: If no challenge has been started
        """
        self._require_entity("request a hint")

        if not self.state.hint_used:
            self.state.hint_used = True
            logger.debug(f"Hint granted for {self.state.current_entity.name}")

        return self.layer_hints()

    def layer_hints(self) -> Dict[Layer, int]:
        """Number of the current entity's traits in each layer (zeros without an entity)."""
        return layer_counts(self.state.current_entity, self.trait_catalog)

    def score(self) -> ScoreResult:
        """
        Score the current selection against the current entity.

        Returns:
            The stored ScoreResult

        Raises:
            NoActiveChallengeError: If no challenge has been started
        """
        entity = self._require_entity("score")

        result = compare_selection(
            entity,
            self.state.selected_traits,
            self.trait_catalog,
            hint_used=self.state.hint_used,
        )
        self.state.result = result
        return result

    def snapshot(self) -> SessionState:
        """Independent copy of the session state."""
        return self.state.model_copy(deep=True)
