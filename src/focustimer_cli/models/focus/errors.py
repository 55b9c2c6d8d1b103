"""Errors raised by the focus timer core."""


class FocusTimerError(Exception):
    """Base class for focus timer errors."""


class ConfigurationError(FocusTimerError, ValueError):
    """Invalid technique catalog or unknown technique/session name."""


class InvalidTransitionError(FocusTimerError):
    """A command was issued in a state that does not accept it.

    Raised before anything is mutated, so the timer state is unchanged.
    """
