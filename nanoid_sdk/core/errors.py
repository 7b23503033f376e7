"""Exception hierarchy for the NanoID SDK."""


class NanoIdError(Exception):
    """SDK base exception."""


class InvalidAlphabetError(NanoIdError, ValueError):
    """Alphabet is too short, too long, or repeats a symbol."""


class InvalidSizeError(NanoIdError, ValueError):
    """Requested identifier size is negative or not an integer."""


class InvalidProbabilityError(NanoIdError, ValueError):
    """Collision probability outside the open interval (0, 1)."""


class IdentifierDecodeError(NanoIdError, ValueError):
    """Identifier bytes are not valid UTF-8."""
