"""Error conditions raised by commitinfo."""


class InvalidArgumentError(ValueError):
    """Raised when commit metadata is built from a missing or invalid value.

    This is the only error the package raises. It is a ``ValueError`` so
    callers that already guard against bad input keep working.
    """
