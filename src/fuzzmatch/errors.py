class FuzzMatchError(Exception):
    """Base class for caller contract violations rejected by the public API."""


class InvalidInputError(FuzzMatchError, TypeError):
    """text or pattern is not a str."""


class InvalidTextError(FuzzMatchError, ValueError):
    """text or pattern is not valid Unicode text (e.g. lone surrogates)."""
