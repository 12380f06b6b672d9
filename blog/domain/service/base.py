"""Base service class for domain services."""


class Service:
    """Base class for all domain services.

    Domain services hold business logic that spans several entities or
    collaborators and has no natural home on a single model.
    """

    pass
