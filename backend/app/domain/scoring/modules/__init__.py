# Criteria modules submodule
from app.domain.scoring.modules.academics import AcademicsModule
from app.domain.scoring.modules.financials import FinancialsModule
from app.domain.scoring.modules.lifestyle import LifestyleModule
from app.domain.scoring.modules.future import FutureModule

__all__ = [
    "AcademicsModule",
    "FinancialsModule",
    "LifestyleModule",
    "FutureModule",
]
