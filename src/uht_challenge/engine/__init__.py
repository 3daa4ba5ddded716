"""Challenge engine: layers, hex codes, scoring and sessions."""

from uht_challenge.engine.hexcode import decode_selection, encode_selection
from uht_challenge.engine.layers import (
    LAYER_ORDER,
    Layer,
    count_traits_in_layer,
    layer_counts,
    layer_of,
    traits_in_layer,
)
from uht_challenge.engine.scoring import ScoreResult, compare_selection, compute_score
from uht_challenge.engine.session import ChallengeSession, SessionState

__all__ = [
    "Layer",
    "LAYER_ORDER",
    "layer_of",
    "count_traits_in_layer",
    "layer_counts",
    "traits_in_layer",
    "encode_selection",
    "decode_selection",
    "ScoreResult",
    "compare_selection",
    "compute_score",
    "ChallengeSession",
    "SessionState",
]
