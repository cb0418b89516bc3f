# Standard library imports
from typing import TYPE_CHECKING

# Local application imports
from .base_container import BaseContainer
from .providers import (
    AuthProvider,
    DatabaseProvider,
    PostProvider,
    RepositoryProvider,
)

if TYPE_CHECKING:
    from ..infrastructure.db.mongo_connection import MongoConnection


class DIContainer(BaseContainer):
    """
    Main dependency injection container.
    Composes all providers in the correct order.

    The container is built once per application in the lifespan handler,
    from an already connected MongoConnection, and stored on `app.state`.

    Registration order is important:
    1. Database collections (DatabaseProvider)
    2. Repositories (RepositoryProvider) - depends on collections
    3. Use cases (AuthProvider, PostProvider) - depend on repositories
    """

    def __init__(self, connection: "MongoConnection") -> None:
        super().__init__()
        self.connection = connection
        self.setup()

    def setup(self) -> None:
        """
        Setup dependency registrations by composing all providers.
        Order matters: database → repositories → use cases
        """
        DatabaseProvider.register(self, self.connection)
        RepositoryProvider.register(self)
        register_use_cases(self)


def register_use_cases(container: BaseContainer) -> None:
    """Register every use case on a container that already has repositories"""
    AuthProvider.register(container)
    PostProvider.register(container)
