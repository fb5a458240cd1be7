"""
Lifestyle Module

Matches the university's country against the student's preferred countries.
"""

from app.domain.models import UniversityRecord
from app.domain.scoring.criteria import MatchingCriteria
from app.domain.scoring.interfaces import BaseCriteriaModule, ModuleOutcome


class LifestyleModule(BaseCriteriaModule):
    """
    Country outside the preferred list: -15.

    Case-insensitive; an empty preference list accepts every country.
    """

    COUNTRY_PENALTY = 15

    @property
    def name(self) -> str:
        return "lifestyle"

    def evaluate(
        self,
        university: UniversityRecord,
        criteria: MatchingCriteria
    ) -> ModuleOutcome:
        lifestyle = criteria.lifestyle
        if not lifestyle.enabled:
            return self.disabled_outcome()

        preferred = {country.strip().lower() for country in lifestyle.countries}
        preferred.discard("")

        if not preferred:
            return ModuleOutcome(explanations=["Lifestyle: no country preference applied"])

        if university.country is None:
            return ModuleOutcome(explanations=["Lifestyle: university country unknown"])

        if university.country.strip().lower() not in preferred:
            return ModuleOutcome(
                penalty=self.COUNTRY_PENALTY,
                explanations=[
                    f"Lifestyle: {university.country} is not one of your "
                    f"preferred countries (-{self.COUNTRY_PENALTY})"
                ],
            )

        return ModuleOutcome(
            explanations=[f"Lifestyle: {university.country} is a preferred country"]
        )
