"""
Errors raised for unsupported reference collection names.
"""

UNSUPPORTED_MESSAGE = "The provided reference collection name is not supported: {value}"


class InvalidCollectionKindError(ValueError):
    """Raised when a value does not name a supported collection kind."""

    def __init__(self, value):
        self.value = value
        super().__init__(UNSUPPORTED_MESSAGE.format(value=value))
