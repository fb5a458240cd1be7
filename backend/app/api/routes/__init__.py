# API Routes Module
from app.api.routes import (
    compare,
    financial_aid,
    financial_profile,
    matching,
)

__all__ = [
    "compare",
    "financial_aid",
    "financial_profile",
    "matching",
]
