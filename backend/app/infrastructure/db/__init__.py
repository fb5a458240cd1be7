"""
Database Infrastructure Package

Exports the Supabase client factory and repositories.
"""

from app.infrastructure.db.supabase_client import (
    get_supabase_client,
    reset_supabase_client,
)
from app.infrastructure.db.repositories import (
    UniversityRepository,
    FinancialProfileRepository,
)


__all__ = [
    # Client
    "get_supabase_client",
    "reset_supabase_client",
    # Repositories
    "UniversityRepository",
    "FinancialProfileRepository",
]
