"""
Test configuration and fixtures for the University Discovery backend.

Provides shared fixtures for unit and integration tests. API tests run
against in-memory repositories wired in through ``app.dependency_overrides``,
so no Supabase project is needed.
"""

from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Sequence

import pytest
from fastapi.testclient import TestClient

from app.domain.models import FinancialProfile, FinancialProfileUpdate
from app.infrastructure.exceptions import NotFoundError
from app.infrastructure.services.university_catalog import UniversityCatalogService


# =============================================================================
# In-memory repositories
# =============================================================================

class InMemoryUniversityRepository:
    """Same interface as UniversityRepository, backed by a list."""

    def __init__(self, rows: List[Dict[str, Any]]):
        self.rows = list(rows)
        self.get_all_calls = 0

    async def get_all(self) -> List[Dict[str, Any]]:
        self.get_all_calls += 1
        return sorted(self.rows, key=lambda row: row.get("name") or "")

    async def get_by_id(self, university_id: str) -> Dict[str, Any]:
        for row in self.rows:
            if str(row.get("id")) == str(university_id):
                return row
        raise NotFoundError(
            f"University {university_id} not found",
            operation="select",
            table="universities",
        )

    async def get_by_ids(self, university_ids: Sequence[str]) -> List[Dict[str, Any]]:
        by_id = {str(row.get("id")): row for row in self.rows}
        missing = [uid for uid in university_ids if str(uid) not in by_id]
        if missing:
            raise NotFoundError(
                f"Universities not found: {', '.join(missing)}",
                operation="select",
                table="universities",
            )
        return [by_id[str(uid)] for uid in university_ids]


class InMemoryFinancialProfileRepository:
    """Same interface as FinancialProfileRepository, backed by a dict."""

    def __init__(self, profiles: Optional[Dict[str, FinancialProfile]] = None):
        self.profiles = dict(profiles or {})

    async def get(self, user_id: str) -> Optional[FinancialProfile]:
        return self.profiles.get(str(user_id))

    async def upsert(self, user_id: str, data: FinancialProfileUpdate) -> FinancialProfile:
        profile = FinancialProfile(
            user_id=str(user_id),
            **data.model_dump(),
            updated_at=datetime.now(timezone.utc).isoformat(),
        )
        self.profiles[str(user_id)] = profile
        return profile


# =============================================================================
# Sample Data Fixtures
# =============================================================================

@pytest.fixture
def sample_universities() -> List[Dict[str, Any]]:
    """Three universities with different data coverage."""
    return [
        {
            "id": "u-1",
            "name": "Northfield Institute",
            "country": "USA",
            "type": "private",
            "min_gpa": 3.5,
            "required_tests": ["SAT"],
            "avg_tuition_per_year": 40000,
            "tuition_international": 55000,
            "tuition_out_of_state": 55000,
            "cost_of_living_est": 18000,
            "avg_financial_aid_package": 45000,
            "percentage_receiving_aid": 60,
            "need_blind_admission": True,
            "scholarships_international": True,
            "post_grad_visa_strength": 36,
        },
        {
            "id": "u-2",
            "name": "Maple University",
            "country": "Canada",
            "type": "public",
            "min_gpa": 3.0,
            "required_tests": [],
            "avg_tuition_per_year": 25000,
            "tuition_international": 30000,
            "tuition_out_of_state": 30000,
            "tuition_in_state": 8000,
            "cost_of_living_est": 14000,
            "avg_financial_aid_package": 12000,
            "percentage_receiving_aid": 40,
            "need_blind_admission": False,
            "scholarships_international": False,
            "post_study_work_visa_months": 36,
        },
        {
            "id": "u-3",
            "name": "Thames College",
            "country": "UK",
            "min_gpa": 3.8,
            "required_tests": ["IELTS"],
            "avg_tuition_per_year": 32000,
            "post_grad_visa_strength": 24,
        },
    ]


@pytest.fixture
def domestic_profile() -> Dict[str, Any]:
    """Complete out-of-state domestic profile."""
    return {
        "student_id": "student-1",
        "gpa": 3.6,
        "sat_score": 1350,
        "act_score": None,
        "family_income": 60000,
        "international_student": False,
        "in_state": False,
        "first_generation": False,
        "special_talents": [],
    }


@pytest.fixture
def international_profile() -> Dict[str, Any]:
    """Strong international applicant with one talent."""
    return {
        "student_id": "student-2",
        "gpa": 3.9,
        "sat_score": 1520,
        "family_income": 40000,
        "international_student": True,
        "in_state": False,
        "first_generation": False,
        "special_talents": ["chess"],
    }


@pytest.fixture
def empty_profile() -> Dict[str, Any]:
    """Profile with no academic or financial signals."""
    return {
        "gpa": None,
        "sat_score": None,
        "act_score": None,
        "special_talents": [],
    }


# =============================================================================
# Repository Fixtures
# =============================================================================

@pytest.fixture
def university_repo(sample_universities):
    return InMemoryUniversityRepository(sample_universities)


@pytest.fixture
def profile_repo():
    """Profile store holding one complete profile for student-1."""
    return InMemoryFinancialProfileRepository({
        "student-1": FinancialProfile(
            user_id="student-1",
            gpa=3.6,
            sat_score=1350,
            family_income=60000,
            international_student=False,
            in_state=False,
            first_generation=False,
        ),
    })


@pytest.fixture
def catalog_service(university_repo):
    return UniversityCatalogService(university_repo, ttl_seconds=300)


# =============================================================================
# App Fixtures
# =============================================================================

@pytest.fixture
def app(university_repo, profile_repo, catalog_service):
    """FastAPI application with in-memory data access."""
    from app.api.dependencies import (
        get_catalog_service,
        get_financial_profile_repository,
        get_university_repository,
    )
    from app.main import app

    app.dependency_overrides[get_university_repository] = lambda: university_repo
    app.dependency_overrides[get_financial_profile_repository] = lambda: profile_repo
    app.dependency_overrides[get_catalog_service] = lambda: catalog_service
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
def client(app):
    """Get synchronous test client."""
    return TestClient(app)
