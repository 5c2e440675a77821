"""
Criterion evaluators.

One pure function per CriterionKind, each taking the criterion and the value
the resolver found for its section, and returning a CriterionResult. Malformed
or missing values score 0; evaluators never raise on data.
"""

import re
from collections.abc import Mapping
from dataclasses import dataclass, replace
from typing import Any, Callable, Dict, Optional, Union

from .criteria import CriterionKind, ScoringCriterion
from .normalize import as_count, is_finite_number, normalize_text, partial_credit, profile_handle, word_count
from .resolver import ABSENT
from .translations import render_title

EMAIL_RE = re.compile(r"\b[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}\b")
TRAILING_DIGITS_RE = re.compile(r"\d+$")
POINTS_PER_KEYWORD = 2


class UnhandledCriterionKind(LookupError):
    """Raised when no evaluator is registered for a criterion kind."""
    pass


@dataclass(frozen=True)
class CriterionResult:
    key: str
    section: str
    kind: CriterionKind
    title: str
    point: int
    max_possible_points: int
    # Measured value; None when the section's field was absent
    value: Union[int, bool, str, None] = None
    threshold: Optional[int] = None
    field: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "key": self.key,
            "kind": self.kind.value,
            "title": self.title,
            "point": self.point,
            "maxPossiblePoints": self.max_possible_points,
            "value": self.value,
            "threshold": self.threshold,
        }


def _result(criterion: ScoringCriterion, point: int, value: Any) -> CriterionResult:
    point = max(0, min(point, criterion.max_score))
    result = CriterionResult(
        key=criterion.key,
        section=criterion.section,
        kind=criterion.kind,
        title="",
        point=point,
        max_possible_points=criterion.max_score,
        value=value,
        threshold=criterion.params.min,
        field=criterion.params.field,
    )
    return replace(result, title=render_title(result))


def _text(value: Any) -> Optional[str]:
    return value if isinstance(value, str) else None


def _is_present(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip() != ""
    if isinstance(value, bool):
        return value
    if is_finite_number(value):
        return value > 0
    if isinstance(value, (list, tuple)):
        return len(value) > 0
    if isinstance(value, Mapping):
        if "content" in value:
            return _is_present(value["content"])
        return len(value) > 0
    return False


def evaluate_presence(criterion: ScoringCriterion, value: Any) -> CriterionResult:
    field = criterion.params.field
    if field:
        if not isinstance(value, (list, tuple)):
            return _result(criterion, 0, None)
        with_field = sum(
            1 for item in value
            if isinstance(item, Mapping) and isinstance(item.get(field), str) and item[field].strip()
        )
        return _result(criterion, criterion.max_score if with_field else 0, with_field)

    if value is ABSENT:
        return _result(criterion, 0, None)
    present = _is_present(value)
    return _result(criterion, criterion.max_score if present else 0, present)


def evaluate_url_customization(criterion: ScoringCriterion, value: Any) -> CriterionResult:
    url = _text(value)
    handle = profile_handle(url) if url else None
    if handle is None:
        return _result(criterion, 0, None)
    customized = TRAILING_DIGITS_RE.search(handle) is None
    return _result(criterion, criterion.max_score if customized else 0, handle)


def evaluate_word_count_min(criterion: ScoringCriterion, value: Any) -> CriterionResult:
    text = _text(value)
    if text is None:
        return _result(criterion, 0, None)
    count = word_count(text)
    return _result(criterion, partial_credit(count, criterion.params.min, criterion.max_score), count)


def evaluate_array_length_min(criterion: ScoringCriterion, value: Any) -> CriterionResult:
    count = as_count(value)
    if count is None:
        return _result(criterion, 0, None)
    return _result(criterion, partial_credit(count, criterion.params.min, criterion.max_score), count)


def evaluate_keyword_match(criterion: ScoringCriterion, value: Any) -> CriterionResult:
    text = _text(value)
    if text is None:
        return _result(criterion, 0, None)
    lowered = normalize_text(text)
    found = sum(1 for keyword in criterion.params.keywords if keyword.lower() in lowered)
    return _result(criterion, min(found * POINTS_PER_KEYWORD, criterion.max_score), found)


def evaluate_email_presence(criterion: ScoringCriterion, value: Any) -> CriterionResult:
    text = _text(value)
    if text is None:
        return _result(criterion, 0, None)
    has_email = EMAIL_RE.search(text) is not None
    return _result(criterion, criterion.max_score if has_email else 0, has_email)


EVALUATORS: Dict[CriterionKind, Callable[[ScoringCriterion, Any], CriterionResult]] = {
    CriterionKind.PRESENCE: evaluate_presence,
    CriterionKind.URL_CUSTOMIZATION: evaluate_url_customization,
    CriterionKind.WORD_COUNT_MIN: evaluate_word_count_min,
    CriterionKind.ARRAY_LENGTH_MIN: evaluate_array_length_min,
    CriterionKind.KEYWORD_MATCH: evaluate_keyword_match,
    CriterionKind.EMAIL_PRESENCE: evaluate_email_presence,
}


def evaluate(criterion: ScoringCriterion, value: Any) -> CriterionResult:
    """Score one criterion against its resolved value.

    Raises UnhandledCriterionKind if the evaluator table has no entry for the
    criterion's kind.
    """
    evaluator = EVALUATORS.get(criterion.kind)
    if evaluator is None:
        raise UnhandledCriterionKind(f"Unhandled criterion kind: {criterion.kind!r} ({criterion.key})")
    return evaluator(criterion, value)
