"""
UHT Trait Challenge - guess which Universal Hex Taxonomy traits apply to an entity.

This package provides:
- The 32-trait taxonomy and a catalog of entities with their true trait sets
- Layer classification and hex fingerprinting of trait selections
- A session engine that draws entities without repeats and scores guesses
- A terminal front end for playing the challenge
"""

__version__ = "0.1.0"

from uht_challenge.config import Settings, get_settings
from uht_challenge.engine import ChallengeSession, ScoreResult, SessionState
from uht_challenge.errors import (
    CatalogError,
    ChallengeError,
    EmptyCatalogError,
    NoActiveChallengeError,
)

__all__ = [
    "Settings",
    "get_settings",
    "ChallengeSession",
    "ScoreResult",
    "SessionState",
    "ChallengeError",
    "CatalogError",
    "EmptyCatalogError",
    "NoActiveChallengeError",
    "__version__",
]
