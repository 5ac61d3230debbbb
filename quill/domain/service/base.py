"""Base service class for domain services."""


class Service:
    """Base class for all domain services.

    Domain services hold business logic that spans entities or needs a
    repository. They trust nothing about the caller: invariants are checked
    here even when a use case already checked them.
    """

    pass
