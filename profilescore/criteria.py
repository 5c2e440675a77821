"""
Scoring rubric for profile completeness.

The registry is an ordered, frozen tuple of rules. Order matters: it fixes the
order of sections in every score report. Every rule is validated when the
module is imported, so a malformed rubric fails at process start rather than
in the middle of scoring.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, List, Optional, Tuple


class ConfigurationError(ValueError):
    """Raised when a criterion or the registry itself is malformed."""
    pass


class CriterionKind(Enum):
    PRESENCE = "presence"
    URL_CUSTOMIZATION = "urlCustomization"
    WORD_COUNT_MIN = "wordCountMin"
    ARRAY_LENGTH_MIN = "arrayLengthMin"
    KEYWORD_MATCH = "keywordMatch"
    EMAIL_PRESENCE = "emailPresence"


# Kinds that compare a measured value against params.min
THRESHOLD_KINDS = (CriterionKind.WORD_COUNT_MIN, CriterionKind.ARRAY_LENGTH_MIN)

HEADLINE_KEYWORDS = (
    "developer",
    "engineer",
    "specialist",
    "manager",
    "lead",
    "senior",
    "junior",
    "full-stack",
    "frontend",
    "backend",
)


@dataclass(frozen=True)
class CriterionParams:
    min: Optional[int] = None
    keywords: Tuple[str, ...] = ()
    field: Optional[str] = None


@dataclass(frozen=True)
class ScoringCriterion:
    section: str
    kind: CriterionKind
    max_score: int
    params: CriterionParams = field(default_factory=CriterionParams)

    def __post_init__(self):
        if not isinstance(self.section, str) or not self.section:
            raise ConfigurationError("Criterion section must be a non-empty string")
        if not isinstance(self.kind, CriterionKind):
            raise ConfigurationError(f"Criterion '{self.section}' has unknown kind: {self.kind!r}")
        if isinstance(self.max_score, bool) or not isinstance(self.max_score, int) or self.max_score <= 0:
            raise ConfigurationError(
                f"Criterion '{self.key}' must have a positive integer max_score, got {self.max_score!r}"
            )
        if self.kind in THRESHOLD_KINDS:
            minimum = self.params.min
            if isinstance(minimum, bool) or not isinstance(minimum, int) or minimum <= 0:
                raise ConfigurationError(f"Criterion '{self.key}' requires a positive params.min")
        if self.kind is CriterionKind.KEYWORD_MATCH and not self.params.keywords:
            raise ConfigurationError(f"Criterion '{self.key}' requires params.keywords")

    @property
    def key(self) -> str:
        """Stable identifier, e.g. ``headline.wordCountMin``."""
        kind = self.kind.value if isinstance(self.kind, CriterionKind) else str(self.kind)
        return f"{self.section}.{kind}"

    def to_dict(self) -> dict:
        params = {}
        if self.params.min is not None:
            params["min"] = self.params.min
        if self.params.keywords:
            params["keywords"] = list(self.params.keywords)
        if self.params.field is not None:
            params["field"] = self.params.field
        return {
            "key": self.key,
            "section": self.section,
            "kind": self.kind.value,
            "maxScore": self.max_score,
            "params": params,
        }


def build_registry(entries: Iterable[ScoringCriterion]) -> Tuple[ScoringCriterion, ...]:
    """Freeze a list of criteria into a registry.

    Raises ConfigurationError for an empty registry or a rule that appears twice.
    """
    registry = tuple(entries)
    if not registry:
        raise ConfigurationError("Scoring registry must contain at least one criterion")
    seen = set()
    for criterion in registry:
        if not isinstance(criterion, ScoringCriterion):
            raise ConfigurationError(f"Not a ScoringCriterion: {criterion!r}")
        ident = (criterion.section, criterion.kind, criterion.params.field)
        if ident in seen:
            raise ConfigurationError(f"Duplicate criterion: {criterion.key}")
        seen.add(ident)
    return registry


def _count_rule(section: str, minimum: int, max_score: int) -> ScoringCriterion:
    return ScoringCriterion(section, CriterionKind.ARRAY_LENGTH_MIN, max_score, CriterionParams(min=minimum))


SCORING_CRITERIA: Tuple[ScoringCriterion, ...] = build_registry([
    ScoringCriterion("linkedInUrl", CriterionKind.URL_CUSTOMIZATION, 5),
    ScoringCriterion("country", CriterionKind.PRESENCE, 5),
    ScoringCriterion("headline", CriterionKind.WORD_COUNT_MIN, 10, CriterionParams(min=10)),
    ScoringCriterion("headline", CriterionKind.KEYWORD_MATCH, 10, CriterionParams(keywords=HEADLINE_KEYWORDS)),
    ScoringCriterion("summary", CriterionKind.WORD_COUNT_MIN, 20, CriterionParams(min=200)),
    ScoringCriterion("summary", CriterionKind.EMAIL_PRESENCE, 10),
    ScoringCriterion("experiences", CriterionKind.PRESENCE, 10, CriterionParams(field="description")),
    _count_rule("experiences", 3, 10),
    ScoringCriterion("education", CriterionKind.PRESENCE, 10),
    _count_rule("skills", 3, 15),
    _count_rule("publications", 1, 1),
    _count_rule("languages", 1, 1),
    _count_rule("certificates", 1, 1),
    _count_rule("honorsAwards", 1, 1),
    _count_rule("volunteer", 1, 1),
    _count_rule("patents", 1, 1),
    _count_rule("testScores", 1, 1),
    _count_rule("organizations", 1, 1),
    _count_rule("featured", 1, 1),
    ScoringCriterion("projects", CriterionKind.PRESENCE, 1),
    _count_rule("recommendations", 1, 1),
    _count_rule("causes", 1, 1),
    ScoringCriterion("contactInfo", CriterionKind.PRESENCE, 1),
])


def sections(criteria: Iterable[ScoringCriterion] = SCORING_CRITERIA) -> List[str]:
    """Distinct section names in registry order."""
    ordered: List[str] = []
    for criterion in criteria:
        if criterion.section not in ordered:
            ordered.append(criterion.section)
    return ordered


def criteria_for(section: str, criteria: Iterable[ScoringCriterion] = SCORING_CRITERIA) -> List[ScoringCriterion]:
    return [c for c in criteria if c.section == section]
