"""Custom Dishka scopes for DataYoinker."""

from dishka import BaseScope, new_scope


class Scope(BaseScope):  # type: ignore[misc]  # BaseScope is designed to be subclassed
    """DataYoinker dependency injection scopes.

    Hierarchy: APP -> UOW

    - APP: Application lifetime (config, database engine)
    - UOW: Unit of Work (one HTTP request: session, repository, services)
    """

    APP = new_scope("APP")
    UOW = new_scope("UOW")
