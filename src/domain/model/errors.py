"""Domain-level exceptions.

Adapters raise these errors to express lookup failures.
The CLI catches them per word and reports them to the user.
"""


class DomainError(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainError):
    """Input violates a validation rule (e.g. blank word)."""


class TranslationLookupError(DomainError):
    """Lookup failed before a result could be produced.

    The underlying transport or parser exception is kept as ``__cause__``.
    """


class DecodeError(TranslationLookupError):
    """Response body is not valid JSON or does not match the expected shape."""
