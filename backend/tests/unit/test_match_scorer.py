"""
Unit tests for the match scorer and its criteria modules.
"""

import pytest

from app.domain.models import UniversityRecord
from app.domain.scoring import (
    MatchScorer,
    MatchingCriteria,
    match_universities,
    score_university,
)
from app.domain.scoring.interfaces import BaseCriteriaModule, ModuleOutcome
from app.domain.scoring.modules import (
    AcademicsModule,
    FinancialsModule,
    FutureModule,
    LifestyleModule,
)


# ============== Test Fixtures ==============

@pytest.fixture
def scorer():
    """Scorer with the default module set."""
    return MatchScorer()


@pytest.fixture
def budget_criteria():
    """Minimum GPA 3.6 and a 30000 budget."""
    return {
        "academics": {"enabled": True, "filters": {"minGpa": 3.6}},
        "financials": {"enabled": True, "filters": {"maxBudget": 30000}},
    }


def criteria_with(**sections):
    return MatchingCriteria.from_dict(sections)


class AlwaysRejectModule(BaseCriteriaModule):
    """Test module that wipes out every score."""

    @property
    def name(self) -> str:
        return "reject"

    def evaluate(self, university, criteria) -> ModuleOutcome:
        return ModuleOutcome(penalty=150, explanations=["Reject: always"])


# ============== Scoring ==============

class TestScore:
    """Scoring a single university."""

    def test_budget_penalty_only(self, scorer):
        """GPA passes, tuition 40000 over a 30000 budget: 100 - 30."""
        university = {
            "min_gpa": 3.5,
            "avg_tuition_per_year": 40000,
            "country": "USA",
            "required_tests": [],
        }
        criteria = {
            "academics": {"enabled": True, "filters": {"minGpa": 3.0}},
            "financials": {"enabled": True, "filters": {"maxBudget": 30000}},
        }

        result = scorer.score(university, criteria)

        assert result.score == 70
        assert result.explanations[0] == "Academics: requirements match your profile"
        assert "exceeds your budget" in result.explanations[1]

    def test_no_criteria_is_perfect_score(self, scorer, sample_universities):
        result = scorer.score(sample_universities[0], None)

        assert result.score == 100
        assert result.explanations == [
            "Academics: not applied (module disabled)",
            "Financials: not applied (module disabled)",
            "Lifestyle: not applied (module disabled)",
            "Future: not applied (module disabled)",
        ]

    def test_all_penalties(self, scorer):
        """Every filter fails: 100 - 20 - 10 - 30 - 15 - 20."""
        university = {
            "min_gpa": 2.5,
            "required_tests": ["SAT"],
            "avg_tuition_per_year": 60000,
            "country": "USA",
            "post_grad_visa_strength": 6,
        }
        criteria = {
            "academics": {"enabled": True, "filters": {"minGpa": 3.0, "testPolicy": "no-test"}},
            "financials": {"enabled": True, "filters": {"maxBudget": 20000}},
            "lifestyle": {"enabled": True, "filters": {"countries": ["Canada"]}},
            "future": {"enabled": True, "filters": {"minVisaMonths": 24}},
        }

        result = scorer.score(university, criteria)

        assert result.score == 5
        assert len(result.explanations) == 5

    def test_enabled_must_be_true(self, scorer):
        """A truthy non-boolean does not switch a module on."""
        criteria = {"financials": {"enabled": "yes", "filters": {"maxBudget": 1}}}
        result = scorer.score({"avg_tuition_per_year": 50000}, criteria)
        assert result.score == 100

    def test_wrong_typed_filters_are_ignored(self, scorer):
        criteria = {"academics": {"enabled": True, "filters": {"minGpa": "3.9"}}}
        result = scorer.score({"min_gpa": 2.0}, criteria)

        assert result.score == 100
        assert result.explanations[0] == "Academics: requirements match your profile"

    def test_wrong_typed_university_fields_are_ignored(self, scorer):
        criteria = {"financials": {"enabled": True, "filters": {"maxBudget": 10000}}}
        result = scorer.score({"avg_tuition_per_year": "90000"}, criteria)

        assert result.score == 100
        assert result.explanations[1] == "Financials: no budget comparison available"

    def test_score_is_bounded(self):
        scorer = MatchScorer(modules=[AlwaysRejectModule()])
        assert scorer.score({}, None).score == 0

    def test_module_level_helper(self, sample_universities, budget_criteria):
        assert score_university(sample_universities[1], budget_criteria).score == 80


class TestAcademicsModule:
    """GPA and test policy checks."""

    @pytest.fixture
    def module(self):
        return AcademicsModule()

    @pytest.mark.parametrize("policy,tests,penalty", [
        ("no-test", ["SAT"], 10),
        ("no-test", [], 0),
        ("requires-test", [], 10),
        ("requires-test", ["ACT"], 0),
        ("SAT", ["sat", "act"], 0),
        ("ielts", ["SAT"], 10),
    ])
    def test_test_policy(self, module, policy, tests, penalty):
        criteria = criteria_with(academics={"enabled": True, "filters": {"testPolicy": policy}})
        university = UniversityRecord.from_record({"required_tests": tests})

        assert module.evaluate(university, criteria).penalty == penalty

    def test_missing_test_list_counts_as_no_tests(self, module):
        criteria = criteria_with(academics={"enabled": True, "filters": {"testPolicy": "requires-test"}})
        outcome = module.evaluate(UniversityRecord(), criteria)

        assert outcome.penalty == 10
        assert outcome.explanations == [
            "Academics: does not require a standardized test (-10)"
        ]

    def test_gpa_and_policy_both_fail(self, module):
        criteria = criteria_with(academics={
            "enabled": True,
            "filters": {"minGpa": 3.5, "testPolicy": "no-test"},
        })
        university = UniversityRecord(min_gpa=3.0, required_tests=("SAT",))
        outcome = module.evaluate(university, criteria)

        assert outcome.penalty == 30
        assert outcome.explanations == [
            "Academics: minimum GPA 3 is below your target of 3.5 (-20)",
            "Academics: requires SAT but you prefer no tests (-10)",
        ]

    def test_equal_gpa_passes(self, module):
        criteria = criteria_with(academics={"enabled": True, "filters": {"minGpa": 3.5}})
        assert module.evaluate(UniversityRecord(min_gpa=3.5), criteria).penalty == 0


class TestOtherModules:
    """Financials, lifestyle and future."""

    def test_tuition_equal_to_budget_passes(self):
        criteria = criteria_with(financials={"enabled": True, "filters": {"maxBudget": 30000}})
        outcome = FinancialsModule().evaluate(UniversityRecord(avg_tuition_per_year=30000), criteria)

        assert outcome.penalty == 0
        assert outcome.explanations == ["Financials: tuition $30,000 is within your budget"]

    def test_country_match_is_case_insensitive(self):
        criteria = criteria_with(lifestyle={"enabled": True, "filters": {"countries": ["canada"]}})
        outcome = LifestyleModule().evaluate(UniversityRecord(country="Canada"), criteria)
        assert outcome.penalty == 0

    def test_country_outside_preferences(self):
        criteria = criteria_with(lifestyle={"enabled": True, "filters": {"countries": ["Canada", "UK"]}})
        outcome = LifestyleModule().evaluate(UniversityRecord(country="USA"), criteria)

        assert outcome.penalty == 15
        assert outcome.explanations == [
            "Lifestyle: USA is not one of your preferred countries (-15)"
        ]

    def test_empty_country_list_accepts_all(self):
        criteria = criteria_with(lifestyle={"enabled": True, "filters": {"countries": []}})
        outcome = LifestyleModule().evaluate(UniversityRecord(country="USA"), criteria)

        assert outcome.penalty == 0
        assert outcome.explanations == ["Lifestyle: no country preference applied"]

    def test_unknown_country_is_neutral(self):
        criteria = criteria_with(lifestyle={"enabled": True, "filters": {"countries": ["Canada"]}})
        outcome = LifestyleModule().evaluate(UniversityRecord(), criteria)

        assert outcome.penalty == 0
        assert outcome.explanations == ["Lifestyle: university country unknown"]

    def test_visa_below_minimum(self):
        criteria = criteria_with(future={"enabled": True, "filters": {"minVisaMonths": 36}})
        outcome = FutureModule().evaluate(UniversityRecord(post_grad_visa_strength=24), criteria)
        assert outcome.penalty == 20

    def test_visa_falls_back_to_work_visa_months(self):
        criteria = criteria_with(future={"enabled": True, "filters": {"minVisaMonths": 24}})
        outcome = FutureModule().evaluate(UniversityRecord(post_study_work_visa_months=36), criteria)

        assert outcome.penalty == 0
        assert outcome.explanations == ["Future: post-study visa of 36 months meets your minimum"]


# ============== Ranking ==============

class TestMatchUniversities:
    """Ranking the catalog."""

    def test_empty_catalog(self, scorer, budget_criteria):
        assert scorer.match_universities(budget_criteria, [], 10) == []
        assert scorer.match_universities(None, [], 0) == []

    def test_sorted_by_score(self, scorer, sample_universities, budget_criteria):
        matches = scorer.match_universities(budget_criteria, sample_universities, 10)

        assert [m.university.id for m in matches] == ["u-2", "u-3", "u-1"]
        assert [m.score for m in matches] == [80, 70, 50]

    def test_ties_broken_by_tuition(self, scorer):
        catalog = [
            {"id": "pricey", "avg_tuition_per_year": 50000},
            {"id": "unknown"},
            {"id": "cheap", "avg_tuition_per_year": 10000},
        ]
        matches = scorer.match_universities(None, catalog, 10)
        assert [m.university.id for m in matches] == ["cheap", "pricey", "unknown"]

    def test_top_n_limits_results(self, scorer, sample_universities, budget_criteria):
        matches = scorer.match_universities(budget_criteria, sample_universities, 2)
        assert [m.university.id for m in matches] == ["u-2", "u-3"]

    @pytest.mark.parametrize("top_n", [0, -3])
    def test_non_positive_top_n(self, scorer, sample_universities, top_n):
        assert scorer.match_universities(None, sample_universities, top_n) == []

    def test_zero_scores_are_excluded(self, sample_universities):
        scorer = MatchScorer(modules=[AlwaysRejectModule()])
        assert scorer.match_universities(None, sample_universities, 10) == []

    def test_ranked_dict_keeps_row_fields(self, scorer, sample_universities, budget_criteria):
        top = scorer.match_universities(budget_criteria, sample_universities, 1)[0].to_dict()

        assert top["id"] == "u-2"
        assert top["name"] == "Maple University"
        assert top["score"] == 80
        assert len(top["explanations"]) == 4

    def test_module_level_helper(self, sample_universities, budget_criteria):
        matches = match_universities(budget_criteria, sample_universities)
        assert len(matches) == 3
