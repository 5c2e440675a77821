"""
Field resolution across profile payload shapes.

Responsibilities:
- Map a logical section name to a value in profile data.
- Reconcile the raw scraper payload (positions, educations, geoCountryName, ...)
  with the AI-normalized payload (experience, about, skillsCount, country, ...).

Non-Responsibilities:
- No scoring and no type coercion; evaluators decide what a value is worth.

Invariant:
Resolution never raises. A section with no resolvable candidate yields ABSENT,
which is distinct from None, 0, "" and [].
"""

from collections.abc import Mapping
from typing import Any, Dict, Optional, Tuple


class _Absent:
    """Marker for a section whose field is not present in the profile."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "ABSENT"

    def __reduce__(self):
        return (_Absent, ())


ABSENT = _Absent()


# Candidate paths per section, tried in order; the first defined value wins.
# AI-normalized field names come first, raw scraper names after.
SECTION_FIELDS: Dict[str, Tuple[str, ...]] = {
    "linkedInUrl": ("linkedInUrl", "profileUrl", "url", "inputUrl", "publicIdentifier"),
    "country": ("country", "location", "geoCountryName", "countryCode"),
    "headline": ("headline", "occupation"),
    "summary": ("about", "summary"),
    "experiences": ("experience", "experiences", "positions"),
    "education": ("education", "educations"),
    "skills": ("skillsCount", "skills"),
    "publications": ("publications",),
    "languages": ("languages",),
    "certificates": ("certificates", "certifications"),
    "honorsAwards": ("honorsAwards", "honors"),
    "volunteer": ("volunteering", "volunteer", "volunteerExperiences"),
    "patents": ("patents",),
    "testScores": ("testScores",),
    "organizations": ("organizations",),
    "featured": ("featured",),
    "projects": ("projects",),
    "recommendations": ("recommendationsCount", "recommendations"),
    "causes": ("causes",),
    "contactInfo": ("contactInfo",),
}


def lookup(data: Any, path: str) -> Any:
    """Follow a dotted path through mappings or attributes."""
    current = data
    for part in path.split("."):
        if isinstance(current, Mapping):
            if part not in current:
                return ABSENT
            current = current[part]
        elif current is None or isinstance(current, (str, bytes, int, float, list, tuple)):
            return ABSENT
        else:
            current = getattr(current, part, ABSENT)
        if current is ABSENT:
            return ABSENT
    return current


def resolve(section: str, profile_data: Any) -> Any:
    """Return the first defined candidate value for ``section``, or ABSENT."""
    for path in SECTION_FIELDS.get(section, ()):
        value = lookup(profile_data, path)
        if value is not ABSENT and value is not None:
            return value
    return ABSENT


def resolved_path(section: str, profile_data: Any) -> Optional[str]:
    """Return which candidate path resolved ``section``, or None."""
    for path in SECTION_FIELDS.get(section, ()):
        value = lookup(profile_data, path)
        if value is not ABSENT and value is not None:
            return path
    return None
