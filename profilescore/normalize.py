import math
from fractions import Fraction
from typing import Any, Optional
from urllib.parse import urlparse


def normalize_text(s: str) -> str:
    return " ".join(s.strip().lower().split())


def word_count(text: str) -> int:
    return len(text.split())


def canonical_url(url: str) -> str:
    parsed = urlparse(url.strip())
    path = parsed.path.rstrip("/")
    # Drop query and fragment; share links carry tracking parameters
    return f"{parsed.scheme}://{parsed.netloc}{path}" if parsed.scheme and parsed.netloc else path


def profile_handle(url: str) -> Optional[str]:
    """Return the trailing path segment of a profile URL.

    A bare handle such as ``jane-doe-123`` is its own segment. Returns None
    when nothing is left after stripping or the URL cannot be parsed.
    """
    try:
        path = canonical_url(url)
        if "://" in path:
            path = urlparse(path).path
    except ValueError:
        # urlparse rejects unbalanced IPv6 brackets
        return None
    segment = path.rstrip("/").rsplit("/", 1)[-1].strip()
    return segment or None


def is_finite_number(v: Any) -> bool:
    # bool is an int subclass but never a count
    if isinstance(v, bool) or not isinstance(v, (int, float)):
        return False
    if isinstance(v, int):
        return True
    return math.isfinite(v)


def as_count(v: Any) -> Optional[int]:
    """Coerce a count-like value to a non-negative int, or None if malformed."""
    if isinstance(v, (list, tuple)):
        return len(v)
    if is_finite_number(v):
        if v < 0 or v != int(v):
            return None
        return int(v)
    if isinstance(v, str) and v.strip().isdecimal():
        return int(v.strip())
    if isinstance(v, dict) and "content" in v:
        return 1 if v["content"] else 0
    return None


def round_half_up(value: Fraction) -> int:
    return math.floor(value + Fraction(1, 2))


def partial_credit(measured: int, minimum: int, max_score: int) -> int:
    """Points for a measured value against a minimum threshold.

    Full marks at or above the threshold, otherwise a proportional share
    rounded half up and clamped to ``[0, max_score]``.
    """
    if measured >= minimum:
        return max_score
    points = round_half_up(Fraction(measured, minimum) * max_score)
    return max(0, min(points, max_score))
