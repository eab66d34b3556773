class WindowSeatError(Exception):
    """Base exception for windowseat errors."""


class InvalidInputError(ValueError, WindowSeatError):
    """Raised for missing or malformed query fields."""


class AirportNotFoundError(InvalidInputError):
    """Raised when one or both airport codes are not in the airport table."""

    def __init__(self, *codes: str):
        self.codes = codes
        super().__init__(f"Airport not found: {' or '.join(codes)}")


class InsufficientPathError(WindowSeatError):
    """Raised when a flight bearing is requested from fewer than two path points."""


class BackendError(WindowSeatError):
    """Raised for solar backend failures or invalid backend state."""
