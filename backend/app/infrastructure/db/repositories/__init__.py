"""
Repository Layer

Exports all repository classes for dependency injection.
"""

from app.infrastructure.db.repositories.university_repository import (
    UniversityRepository,
)
from app.infrastructure.db.repositories.financial_profile_repository import (
    FinancialProfileRepository,
)


__all__ = [
    "UniversityRepository",
    "FinancialProfileRepository",
]
