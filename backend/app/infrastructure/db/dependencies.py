"""
Dependency Injection Providers

Provides FastAPI dependencies for the Supabase client, repositories and the
cached university catalog.
Follows Dependency Inversion Principle - routes depend on these providers,
which tests replace through ``app.dependency_overrides``.
"""

from typing import Annotated, Optional

from fastapi import Depends
from supabase import Client

from app.config.settings import get_settings
from app.infrastructure.db.repositories import (
    FinancialProfileRepository,
    UniversityRepository,
)
from app.infrastructure.db.supabase_client import get_supabase_client
from app.infrastructure.services.university_catalog import UniversityCatalogService


# Type alias for client dependency
ClientDep = Annotated[Client, Depends(get_supabase_client)]


def get_university_repository(client: ClientDep) -> UniversityRepository:
    """Dependency provider for UniversityRepository."""
    return UniversityRepository(client)


def get_financial_profile_repository(client: ClientDep) -> FinancialProfileRepository:
    """Dependency provider for FinancialProfileRepository."""
    return FinancialProfileRepository(client)


_catalog_service: Optional[UniversityCatalogService] = None


def get_catalog_service() -> UniversityCatalogService:
    """
    Dependency provider for the shared catalog cache.

    One instance per process so the snapshot survives across requests.
    """
    global _catalog_service
    if _catalog_service is None:
        _catalog_service = UniversityCatalogService(
            UniversityRepository(get_supabase_client()),
            ttl_seconds=get_settings().catalog_cache_ttl_seconds,
        )
    return _catalog_service


# Type aliases for repository dependencies
UniversityRepoDep = Annotated[
    UniversityRepository,
    Depends(get_university_repository)
]
FinancialProfileRepoDep = Annotated[
    FinancialProfileRepository,
    Depends(get_financial_profile_repository)
]
CatalogServiceDep = Annotated[
    UniversityCatalogService,
    Depends(get_catalog_service)
]
