"""Error taxonomy shared by the catalogue and ordering contexts.

Administrative operations raise these; the FastAPI app translates them to
``{"error": ...}`` responses. Order placement does not raise them: it
reports failures as ``OrderRejected`` values instead.
"""


class StorefrontError(Exception):
    """Base class for all storefront domain errors."""


class ValidationError(StorefrontError):
    """Input failed business validation.

    ``messages`` maps field names to a list of human-readable problems.
    """

    def __init__(self, messages: dict[str, list[str]]):
        self.messages = messages
        super().__init__(messages)


class ObjectNotFoundError(StorefrontError):
    """A requested record does not exist."""


class InvalidOperationError(StorefrontError):
    """The operation is not allowed in the record's current state."""
