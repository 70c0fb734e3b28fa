"""Exception and warning types raised by the fars package."""


class FarsError(Exception):
    """Base class for fars-specific errors."""


class InvalidStateError(FarsError, ValueError):
    """A state code does not occur in the loaded year's ``STATE`` column."""

    def __init__(self, state: int) -> None:
        self.state = state
        super().__init__(f"invalid STATE number: {state}")


class InvalidYearWarning(UserWarning):
    """A year could not be loaded inside a multi-year request."""
