"""Dependency injection factories for API v1."""

from typing import Callable

from fastapi import Depends

from api.dependencies.database import get_database
from domain.repositories.unit_of_work import IUnitOfWork
from domain.services.profile_service import ProfileService
from infrastructure.database.session import Database


def get_uow_factory(
    database: Database = Depends(get_database),
) -> Callable[[], IUnitOfWork]:
    """Factory for creating Unit of Work instances."""
    return database.uow_factory()


def get_profile_service(
    uow_factory: Callable[[], IUnitOfWork] = Depends(get_uow_factory),
) -> ProfileService:
    """Get Profile service instance."""
    return ProfileService(uow_factory)
