"""
Future Module

Compares post-study work visa length with the student's minimum.
"""

from typing import Optional

from app.domain.models import UniversityRecord
from app.domain.scoring.criteria import MatchingCriteria
from app.domain.scoring.interfaces import BaseCriteriaModule, ModuleOutcome


class FutureModule(BaseCriteriaModule):
    """Visa months below the requested minimum: -20."""

    VISA_PENALTY = 20

    @property
    def name(self) -> str:
        return "future"

    def evaluate(
        self,
        university: UniversityRecord,
        criteria: MatchingCriteria
    ) -> ModuleOutcome:
        future = criteria.future
        if not future.enabled:
            return self.disabled_outcome()

        minimum = future.min_visa_months
        months = self._visa_months(university)

        if minimum is None or months is None:
            return ModuleOutcome(explanations=["Future: no visa comparison available"])

        if months < minimum:
            return ModuleOutcome(
                penalty=self.VISA_PENALTY,
                explanations=[
                    f"Future: post-study visa of {months:g} months is below "
                    f"your minimum of {minimum:g} (-{self.VISA_PENALTY})"
                ],
            )

        return ModuleOutcome(
            explanations=[f"Future: post-study visa of {months:g} months meets your minimum"]
        )

    def _visa_months(self, university: UniversityRecord) -> Optional[float]:
        if university.post_grad_visa_strength is not None:
            return university.post_grad_visa_strength
        return university.post_study_work_visa_months
