"""Exceptions raised while decoding NASADEM tiles."""


class NASADEMError(Exception):
    """Base class for NASADEM decoding errors."""


class TruncatedTileError(NASADEMError, OSError):
    """A sample stream ended before the full grid was read.

    Attributes:
        expected: Number of bytes the grid requires
        received: Number of bytes actually read
    """

    def __init__(self, what: str, expected: int, received: int):
        super().__init__(
            f"Truncated {what} stream: expected {expected} bytes, got {received}"
        )
        self.expected = expected
        self.received = received


class TileFormatError(NASADEMError, ValueError):
    """Tile content or naming does not match the NASADEM format."""


class InvalidWaterSampleError(TileFormatError):
    """A water byte was neither the land (0) nor the water (255) sentinel."""

    def __init__(self, index: int, value: int):
        super().__init__(
            f"Invalid water sample {value} at index {index} (expected 0 or 255)"
        )
        self.index = index
        self.value = value


class TileNameError(TileFormatError):
    """A tile name could not be parsed."""
