"""Exceptions and warnings raised by the GoalFut engine."""


class ConfigurationError(ValueError):
    """Scheduling configuration that cannot produce a calendar."""


class DegenerateGroupWarning(UserWarning):
    """A group with fewer than two teams; it yields no matches."""


class UnresolvedTieWarning(UserWarning):
    """A points tie that head-to-head could not break."""
