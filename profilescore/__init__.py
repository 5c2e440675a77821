"""Profile completeness scoring."""

__version__ = "0.1.0"

from .criteria import (  # noqa: E402
    SCORING_CRITERIA,
    ConfigurationError,
    CriterionKind,
    CriterionParams,
    ScoringCriterion,
)
from .evaluators import CriterionResult, UnhandledCriterionKind, evaluate  # noqa: E402
from .resolver import ABSENT, resolve  # noqa: E402
from .scoring import (  # noqa: E402
    ProfileScore,
    SectionScore,
    aggregate_section,
    calculate_grade,
    score,
)

__all__ = [
    "ABSENT",
    "SCORING_CRITERIA",
    "ConfigurationError",
    "CriterionKind",
    "CriterionParams",
    "CriterionResult",
    "ProfileScore",
    "ScoringCriterion",
    "SectionScore",
    "UnhandledCriterionKind",
    "aggregate_section",
    "calculate_grade",
    "evaluate",
    "resolve",
    "score",
]
