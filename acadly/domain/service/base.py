"""Marker base for domain services."""


class Service:
    """Stateless domain logic that works across aggregates.

    Every subclass is registered in ``acadly.util.di.domain`` and resolved
    per request, together with the repositories it wraps.
    """
