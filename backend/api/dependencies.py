"""
Dependency injection setup for FastAPI.

This module provides the "container" that wires together all module
implementations. Each module exposes its service through an interface,
and this file creates the concrete implementations.

Tests swap implementations with app.dependency_overrides on the
get_*_service functions below.
"""

from typing import TYPE_CHECKING

# Type checking imports for interfaces (avoids circular imports)
if TYPE_CHECKING:
    from supabase import Client
    from modules.auth.interfaces import ISessionService
    from modules.users.interfaces import IUserService
    from modules.catalog.interfaces import ICatalogService
    from modules.ratings.interfaces import IRatingService
    from modules.saved_list.interfaces import ISavedListService


class ServiceContainer:
    """
    Container for all service instances.

    This class manages the lifecycle of service instances and their
    dependencies. Services are created lazily on first access.

    All services are cached as singletons within the container.
    Use reset() to clear all cached services for testing.
    """

    def __init__(self) -> None:
        self._session_service: "ISessionService | None" = None
        self._user_service: "IUserService | None" = None
        self._catalog_service: "ICatalogService | None" = None
        self._rating_service: "IRatingService | None" = None
        self._saved_list_service: "ISavedListService | None" = None

    @property
    def db(self) -> "Client":
        """Get the shared Supabase client."""
        from shared.database import get_supabase_client
        return get_supabase_client()

    @property
    def sessions(self) -> "ISessionService":
        """Get the session service instance."""
        if self._session_service is None:
            from modules.auth.repository import SessionRepository
            from modules.auth.service import SessionService
            from shared.config import get_settings
            self._session_service = SessionService(
                repository=SessionRepository(self.db),
                ttl_seconds=get_settings().session_ttl_seconds,
            )
        return self._session_service

    @property
    def users(self) -> "IUserService":
        """Get the user service instance."""
        if self._user_service is None:
            from modules.users.repository import UserRepository
            from modules.users.service import UserService
            self._user_service = UserService(
                repository=UserRepository(self.db),
                sessions=self.sessions,
            )
        return self._user_service

    @property
    def catalog(self) -> "ICatalogService":
        """Get the catalog service instance."""
        if self._catalog_service is None:
            from modules.catalog.repository import CatalogRepository
            from modules.catalog.service import CatalogService
            self._catalog_service = CatalogService(CatalogRepository(self.db))
        return self._catalog_service

    @property
    def ratings(self) -> "IRatingService":
        """Get the rating service instance."""
        if self._rating_service is None:
            from modules.ratings.repository import RatingRepository
            from modules.ratings.service import RatingService
            self._rating_service = RatingService(
                repository=RatingRepository(self.db),
                catalog=self.catalog,
            )
        return self._rating_service

    @property
    def saved_list(self) -> "ISavedListService":
        """Get the saved-list service instance."""
        if self._saved_list_service is None:
            from modules.saved_list.repository import SavedListRepository
            from modules.saved_list.service import SavedListService
            self._saved_list_service = SavedListService(
                repository=SavedListRepository(self.db),
                catalog=self.catalog,
            )
        return self._saved_list_service

    def reset(self) -> None:
        """
        Reset all cached services.

        This is primarily for testing - allows tests to get fresh
        service instances with different mock dependencies.
        """
        self._session_service = None
        self._user_service = None
        self._catalog_service = None
        self._rating_service = None
        self._saved_list_service = None


# Module-level container singleton
_container: ServiceContainer | None = None


def get_container() -> ServiceContainer:
    """Get the singleton service container."""
    global _container
    if _container is None:
        _container = ServiceContainer()
    return _container


def reset_container() -> None:
    """
    Reset the service container.

    This clears the cached container, so the next call to get_container()
    will create a fresh container with new service instances.

    Primarily used for testing.
    """
    global _container
    _container = None


# FastAPI dependency functions
# These are the functions that should be used in route Depends() calls


def get_session_service() -> "ISessionService":
    """FastAPI dependency for session service."""
    return get_container().sessions


def get_user_service() -> "IUserService":
    """FastAPI dependency for user service."""
    return get_container().users


def get_catalog_service() -> "ICatalogService":
    """FastAPI dependency for catalog service."""
    return get_container().catalog


def get_rating_service() -> "IRatingService":
    """FastAPI dependency for rating service."""
    return get_container().ratings


def get_saved_list_service() -> "ISavedListService":
    """FastAPI dependency for saved-list service."""
    return get_container().saved_list
