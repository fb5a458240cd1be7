"""
Academics Module

Checks the university's minimum GPA and standardized test policy against the
student's academic filters.
"""

from typing import Optional, Tuple

from app.domain.models import UniversityRecord
from app.domain.scoring.criteria import MatchingCriteria
from app.domain.scoring.interfaces import BaseCriteriaModule, ModuleOutcome


NO_TEST_POLICY = "no-test"
REQUIRES_TEST_POLICY = "requires-test"


class AcademicsModule(BaseCriteriaModule):
    """
    Academics criteria.

    Penalties:
    - min_gpa below the requested minimum: -20
    - test policy mismatch: -10

    Emits one line per fired penalty, or a single line when both pass.
    """

    GPA_PENALTY = 20
    TEST_POLICY_PENALTY = 10

    @property
    def name(self) -> str:
        return "academics"

    def evaluate(
        self,
        university: UniversityRecord,
        criteria: MatchingCriteria
    ) -> ModuleOutcome:
        academics = criteria.academics
        if not academics.enabled:
            return self.disabled_outcome()

        penalty = 0
        explanations = []

        if (
            academics.min_gpa is not None
            and university.min_gpa is not None
            and university.min_gpa < academics.min_gpa
        ):
            penalty += self.GPA_PENALTY
            explanations.append(
                f"Academics: minimum GPA {university.min_gpa:g} is below "
                f"your target of {academics.min_gpa:g} (-{self.GPA_PENALTY})"
            )

        mismatch = self._test_policy_mismatch(academics.test_policy, university.required_tests)
        if mismatch:
            penalty += self.TEST_POLICY_PENALTY
            explanations.append(f"Academics: {mismatch} (-{self.TEST_POLICY_PENALTY})")

        if not explanations:
            explanations.append("Academics: requirements match your profile")

        return ModuleOutcome(penalty=penalty, explanations=explanations)

    def _test_policy_mismatch(
        self,
        policy: Optional[str],
        required_tests: Optional[Tuple[str, ...]],
    ) -> Optional[str]:
        """Return a reason when the policy does not fit, None otherwise."""
        if policy is None:
            return None

        # A missing or malformed test list counts as no required tests
        tests = {test.strip().lower() for test in required_tests or () if test.strip()}

        if policy == NO_TEST_POLICY:
            if tests:
                return f"requires {', '.join(sorted(tests)).upper()} but you prefer no tests"
            return None

        if policy == REQUIRES_TEST_POLICY:
            if not tests:
                return "does not require a standardized test"
            return None

        if policy not in tests:
            return f"{policy.upper()} is not among the required tests"
        return None
