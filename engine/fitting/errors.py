class ColliderFitError(Exception):
    """Base class for collider fitting errors."""


class NoGeometryFound(ColliderFitError, LookupError):
    """
    The target has no measurable geometry.

    Batch operations treat this as "skip this target".
    """


class InvalidScale(ColliderFitError, ValueError):
    """A scale component is zero or not finite."""


class InvalidFitPolicy(ColliderFitError, RuntimeError):
    """An unknown fit mode reached the resolver."""
