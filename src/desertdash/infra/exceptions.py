class LevelSourceError(Exception):
    """Raised when a level source cannot produce a level."""


class MissingCredentialsError(LevelSourceError):
    """Raised when the generator has no API key to call with."""


class LevelDecodeError(Exception):
    """Raised when level JSON does not match the expected shape."""
