"""
Profile score aggregation.

Responsibilities:
- Group criteria by section and sum each section's points.
- Sum sections into a total, a percentage and a letter grade.
- Emit an explainable, immutable ProfileScore.

Non-Responsibilities:
- No I/O, no caching, no persistence.
- No decisions about how a score is displayed.

Invariant:
Given identical inputs, score() always returns an identical ProfileScore.
Sections appear in registry order.
"""

from collections import OrderedDict
from dataclasses import dataclass
from fractions import Fraction
from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple

from .criteria import SCORING_CRITERIA, ScoringCriterion
from .evaluators import CriterionResult, evaluate
from .logger import get_logger
from .normalize import round_half_up
from .resolver import resolve

# Inclusive lower bounds, checked from the top; first match wins.
GRADE_THRESHOLDS: Tuple[Tuple[int, str], ...] = (
    (90, "A+"),
    (85, "A"),
    (80, "A-"),
    (75, "B+"),
    (70, "B"),
    (65, "B-"),
    (60, "C+"),
    (55, "C"),
    (50, "C-"),
    (45, "D+"),
    (40, "D"),
    (35, "D-"),
)
FAILING_GRADE = "F"


@dataclass(frozen=True)
class SectionScore:
    section: str
    score: int
    max_possible_points: int
    criteria: Tuple[CriterionResult, ...]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "section": self.section,
            "score": self.score,
            "maxPossiblePoints": self.max_possible_points,
            "criteria": [c.to_dict() for c in self.criteria],
        }


@dataclass(frozen=True)
class ProfileScore:
    total_score: int
    max_total_score: int
    percentage: int
    grade: str
    section_scores: Tuple[SectionScore, ...]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "totalScore": self.total_score,
            "maxTotalScore": self.max_total_score,
            "percentage": self.percentage,
            "grade": self.grade,
            "sectionScores": [s.to_dict() for s in self.section_scores],
        }


def calculate_grade(percentage: int) -> str:
    for lower_bound, grade in GRADE_THRESHOLDS:
        if percentage >= lower_bound:
            return grade
    return FAILING_GRADE


def calculate_percentage(total: int, maximum: int) -> int:
    if maximum <= 0:
        return 0
    return round_half_up(Fraction(total, maximum) * 100)


def group_by_section(criteria: Iterable[ScoringCriterion]) -> "OrderedDict[str, List[ScoringCriterion]]":
    grouped: "OrderedDict[str, List[ScoringCriterion]]" = OrderedDict()
    for criterion in criteria:
        grouped.setdefault(criterion.section, []).append(criterion)
    return grouped


def aggregate_section(
    section: str,
    criteria_for_section: Sequence[ScoringCriterion],
    profile_data: Any,
) -> Optional[SectionScore]:
    """Evaluate every criterion of one section.

    Returns None when the section has no criteria, so callers leave it out of
    the report.
    """
    if not criteria_for_section:
        return None
    value = resolve(section, profile_data)
    results = tuple(evaluate(criterion, value) for criterion in criteria_for_section)
    return SectionScore(
        section=section,
        score=sum(r.point for r in results),
        max_possible_points=sum(r.max_possible_points for r in results),
        criteria=results,
    )


def score(profile_data: Any, criteria: Sequence[ScoringCriterion] = SCORING_CRITERIA) -> ProfileScore:
    """Score a profile against a criteria registry.

    ``profile_data`` may be a raw scraper payload or an AI-normalized one; any
    mapping (or object) exposing the expected field names works. Missing or
    malformed fields score 0; this never raises on data.
    """
    section_scores = []
    for section, section_criteria in group_by_section(criteria).items():
        section_score = aggregate_section(section, section_criteria, profile_data)
        if section_score is not None:
            section_scores.append(section_score)

    total = sum(s.score for s in section_scores)
    maximum = sum(s.max_possible_points for s in section_scores)
    percentage = calculate_percentage(total, maximum)
    grade = calculate_grade(percentage)

    get_logger().debug("Profile scored", total=total, max=maximum, percentage=percentage, grade=grade)
    return ProfileScore(
        total_score=total,
        max_total_score=maximum,
        percentage=percentage,
        grade=grade,
        section_scores=tuple(section_scores),
    )
