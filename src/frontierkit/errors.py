from __future__ import annotations


class FrontierKitError(Exception):
    """Base class for errors raised by frontierkit."""


class EmptyContainerError(FrontierKitError, IndexError):
    """pop() or peek() on a container holding no entries."""


class InvalidWeightError(FrontierKitError, ValueError):
    """A sampling weight is negative or not finite."""


class DegenerateDistributionError(FrontierKitError, ValueError):
    """No candidate carries positive weight, so nothing can be drawn."""
