"""Domain service base."""


class Service:
    """Marker base for domain services.

    Services coordinate aggregates with repositories; aggregates stay
    free of I/O.
    """
