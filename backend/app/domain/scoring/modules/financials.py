"""
Financials Module

Compares yearly tuition with the student's budget.
"""

from app.domain.models import UniversityRecord
from app.domain.scoring.criteria import MatchingCriteria
from app.domain.scoring.interfaces import BaseCriteriaModule, ModuleOutcome


class FinancialsModule(BaseCriteriaModule):
    """Tuition above max budget: -30."""

    BUDGET_PENALTY = 30

    @property
    def name(self) -> str:
        return "financials"

    def evaluate(
        self,
        university: UniversityRecord,
        criteria: MatchingCriteria
    ) -> ModuleOutcome:
        financials = criteria.financials
        if not financials.enabled:
            return self.disabled_outcome()

        budget = financials.max_budget
        tuition = university.avg_tuition_per_year

        if budget is None or tuition is None:
            return ModuleOutcome(explanations=["Financials: no budget comparison available"])

        if tuition > budget:
            return ModuleOutcome(
                penalty=self.BUDGET_PENALTY,
                explanations=[
                    f"Financials: tuition ${tuition:,.0f} exceeds your budget "
                    f"of ${budget:,.0f} (-{self.BUDGET_PENALTY})"
                ],
            )

        return ModuleOutcome(
            explanations=[f"Financials: tuition ${tuition:,.0f} is within your budget"]
        )
