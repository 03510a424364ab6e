from __future__ import annotations


class TreeLogError(Exception):
    """Base exception for treelog errors."""


class InvalidLoggerNameError(TreeLogError, ValueError):
    """Raised when a dotted logger name has an empty segment."""


class UnsupportedMutationError(TreeLogError):
    """Raised when a level change is not allowed in the current mode."""


class ReentrantConfigurationError(TreeLogError, RuntimeError):
    """Raised when a channel is reconfigured while it is delivering."""
