"""Base service class for domain services."""


class Service:
    """Base class for all domain services.

    Domain services coordinate repositories for rules that span several
    entities, such as a vote and the counters of the post it targets.
    """

    pass
