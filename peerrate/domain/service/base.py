"""Base service class for domain services."""


class Service:
    """Base class for all domain services.

    Domain services hold business rules spanning more than one aggregate
    or reaching into repositories.
    """

    pass
