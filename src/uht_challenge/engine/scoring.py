"""Comparison of a trait selection against an entity's true traits."""

from typing import AbstractSet, Dict, Iterable, List, Optional

from pydantic import BaseModel, Field

from uht_challenge.catalog.entities import Entity
from uht_challenge.catalog.traits import TraitCatalog
from uht_challenge.engine.hexcode import encode_selection
from uht_challenge.utils.logging import get_logger

logger = get_logger(__name__)

MAX_SCORE = 100
MISSED_PENALTY = 5
EXTRA_PENALTY = 5
HINT_PENALTY = 10


class ScoreResult(BaseModel):
    """Outcome of scoring one selection against one entity."""

    entity_name: str
    correct_matches: List[str] = Field(default_factory=list)
    missed_traits: List[str] = Field(default_factory=list)
    extra_traits: List[str] = Field(default_factory=list)
    score: int = Field(ge=0, le=MAX_SCORE)
    hint_used: bool = False
    hex_code: str = ""
    feedback: Dict[str, str] = Field(default_factory=dict)

    @property
    def is_perfect(self) -> bool:
        """True when nothing was missed and nothing extra was selected."""
        return not self.missed_traits and not self.extra_traits


def compute_score(missed: int, extra: int, hint_used: bool) -> int:
    """
    Points left after penalties, floored at zero.

    Args:
        missed: Number of true traits the user did not select
        extra: Number of selected traits that are not true traits
        hint_used: Whether a hint was granted for this challenge

    Returns:
        Score in the range 0-100
    """
    penalty = MISSED_PENALTY * missed + EXTRA_PENALTY * extra
    if hint_used:
        penalty += HINT_PENALTY
    return max(0, MAX_SCORE - penalty)


def order_by_catalog(names: Iterable[str], catalog: TraitCatalog) -> List[str]:
    """Sort trait names by catalog position; unknown names go last, alphabetically."""
    known = []
    unknown = []
    for name in names:
        index = catalog.index_of(name)
        if index is None:
            unknown.append(name)
        else:
            known.append((index, name))
    return [name for _, name in sorted(known)] + sorted(unknown)


def feedback_for(trait_name: str, entity: Entity, catalog: TraitCatalog) -> Optional[str]:
    """Entity-specific feedback for a trait, falling back to the trait's default text."""
    if trait_name in entity.feedback:
        return entity.feedback[trait_name]
    trait = catalog.get_trait(trait_name)
    return trait.feedback if trait else None


def compare_selection(
    entity: Entity,
    selected: AbstractSet[str],
    catalog: TraitCatalog,
    hint_used: bool = False,
) -> ScoreResult:
    """
    Score a selection against an entity.

    Args:
        entity: Entity whose traits are the answer
        selected: Trait names chosen by the user
        catalog: Trait catalog used for ordering, feedback and the hex code
        hint_used: Whether the hint penalty applies

    Returns:
        ScoreResult with matches, misses, extras, score and feedback
    """
    correct_set = set(entity.traits)
    user_set = set(selected)

    correct_matches = order_by_catalog(user_set & correct_set, catalog)
    missed_traits = order_by_catalog(correct_set - user_set, catalog)
    extra_traits = order_by_catalog(user_set - correct_set, catalog)

    feedback = {}
    for name in missed_traits + extra_traits:
        text = feedback_for(name, entity, catalog)
        if text:
            feedback[name] = text

    score = compute_score(len(missed_traits), len(extra_traits), hint_used)
    logger.debug(
        f"Scored {entity.name}: {len(correct_matches)} correct, "
        f"{len(missed_traits)} missed, {len(extra_traits)} extra -> {score}"
    )

    return ScoreResult(
        entity_name=entity.name,
        correct_matches=correct_matches,
        missed_traits=missed_traits,
        extra_traits=extra_traits,
        score=score,
        hint_used=hint_used,
        hex_code=encode_selection(user_set, catalog),
        feedback=feedback,
    )
