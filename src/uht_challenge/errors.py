"""Exceptions raised by the challenge engine and catalog loaders."""


class ChallengeError(Exception):
    """Base class for trait challenge errors."""


class EmptyCatalogError(ChallengeError):
    """No entities are available to draw a challenge from."""

    def __init__(self, message: str = "Entity catalog is empty"):
        super().__init__(message)


class NoActiveChallengeError(ChallengeError):
    """An operation needs a current entity but no challenge was started."""

    def __init__(self, operation: str):
        self.operation = operation
        super().__init__(f"Cannot {operation}: no active challenge, call start() first")


class CatalogError(ChallengeError):
    """Catalog data is inconsistent (duplicate names, unknown trait references)."""
