"""Exceptions raised by the catalog, navigator and loaders."""


class NotFound(LookupError):
    """Unknown track, module, lesson or page path."""

    def __init__(self, kind: str, key: str):
        self.kind = kind
        self.key = key
        super().__init__(f"{kind} not found: {key}")


class ContentValidationError(ValueError):
    """Authored content violates a catalog invariant and cannot be served."""


class BrokenAdjacency(ContentValidationError):
    """A navigation edge points to a module or lesson absent from the catalog."""
