"""Base service class for domain services."""


class Service:
    """Base class for all domain services.

    Domain services hold comment rules that span several entities or need
    a repository, such as thread assembly, moderation and lead capture.
    """

    pass
