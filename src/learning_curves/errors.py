from __future__ import annotations


class LearningCurveError(Exception):
    """Base class for every error raised by learning_curves."""


class DomainError(LearningCurveError, TypeError, ValueError):
    """A required input is not numeric, or lies outside the domain of the formula.

    Wrong types (strings, booleans, objects) and out-of-domain values (r <= 0)
    both land here, so it can be caught as either TypeError or ValueError.
    """


class RangeError(LearningCurveError, ValueError):
    """Block bounds violate m <= n (or a horizon is too short to fit)."""


class ConfigError(LearningCurveError, ValueError):
    """An option is outside its closed set, or input shapes do not broadcast."""


class MissingValuesWarning(UserWarning):
    """Missing entries were dropped from an input before computing."""
