from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..base_container import BaseContainer
    from ...infrastructure.db.mongo_connection import MongoConnection


class DatabaseProvider:
    """Centralized database connection provider - single source of truth for all DB connections"""

    @staticmethod
    def register(container: "BaseContainer", connection: "MongoConnection") -> None:
        """
        Register the database and its collections in the container.
        This is the ONLY place where collections are looked up by name.
        """
        container.register_singleton("database", connection.database)
        container.register_singleton("user_collection", connection.get_user_collection())
        container.register_singleton("post_collection", connection.get_post_collection())
