from collections.abc import Mapping
from typing import Any, Dict, List, TypedDict

from .normalize import as_count


class RawProfile(TypedDict, total=False):
    """Profile as returned by the scraper (one element of its ``data`` list)."""
    publicIdentifier: str
    inputUrl: str
    firstName: str
    lastName: str
    headline: str
    occupation: str
    summary: str
    geoCountryName: str
    countryCode: str
    positions: List[Dict[str, Any]]
    educations: List[Dict[str, Any]]
    skills: List[str]
    certifications: List[Dict[str, Any]]
    honors: List[Dict[str, Any]]
    languages: List[Dict[str, Any]]
    volunteerExperiences: List[Dict[str, Any]]
    followersCount: int
    connectionsCount: int


class NormalizedProfile(TypedDict, total=False):
    """Profile after AI normalization, as consumed by the extension UI."""
    linkedInUrl: str
    headline: str
    about: str
    country: str
    location: str
    experience: List[Dict[str, Any]]
    education: List[Dict[str, Any]]
    skills: List[str]
    skillsCount: int
    publications: int
    languages: int
    certificates: int
    honorsAwards: int
    volunteering: int
    patents: int
    testScores: int
    organizations: int
    featured: int
    projects: List[Dict[str, Any]]
    recommendationsCount: int
    causes: int
    contactInfo: Dict[str, Any]


RAW_MARKERS = ("positions", "educations", "geoCountryName", "publicIdentifier", "followersCount", "volunteerExperiences")
NORMALIZED_MARKERS = ("experience", "about", "skillsCount", "recommendationsCount", "volunteering", "linkedInUrl")

TEXT_FIELDS = ("headline", "occupation", "summary", "about", "country", "geoCountryName",
               "countryCode", "linkedInUrl", "inputUrl", "publicIdentifier")
LIST_FIELDS = ("positions", "experience", "educations", "education")
COUNT_FIELDS = ("skills", "skillsCount", "publications", "languages", "certificates", "certifications",
                "honorsAwards", "honors", "volunteering", "volunteerExperiences", "patents", "testScores",
                "organizations", "featured", "recommendationsCount", "causes")


def detect_schema(data: Any) -> str:
    """Return "raw", "normalized" or "unknown" from marker fields."""
    if not isinstance(data, Mapping):
        return "unknown"
    raw = sum(1 for f in RAW_MARKERS if f in data)
    normalized = sum(1 for f in NORMALIZED_MARKERS if f in data)
    if raw == normalized == 0:
        return "unknown"
    return "raw" if raw > normalized else "normalized"


def unwrap_payload(payload: Any) -> Any:
    """Return the profile inside a scraper envelope.

    Accepts ``{"success": ..., "data": [profile, ...]}`` or ``{"data": profile}``;
    anything else is returned unchanged. Only the first profile of a list is used.
    """
    if isinstance(payload, Mapping) and "data" in payload and (
        "success" in payload or len(payload) == 1
    ):
        data = payload["data"]
        if isinstance(data, list):
            return data[0] if data else {}
        if isinstance(data, Mapping):
            return data
    return payload


def validate_profile(data: Any) -> List[str]:
    """
    Returns a list of warnings about a profile payload. Empty list means clean.
    Warnings never block scoring; affected fields simply score 0.
    """
    if not isinstance(data, Mapping):
        return [f"Profile must be a JSON object, got {type(data).__name__}"]

    warnings: List[str] = []
    if detect_schema(data) == "unknown":
        warnings.append("Unrecognized profile shape: no raw scraper or normalized fields found")

    for f in TEXT_FIELDS:
        if f in data and data[f] is not None and not isinstance(data[f], str):
            warnings.append(f"Field '{f}' should be a string")

    for f in LIST_FIELDS:
        if f in data and data[f] is not None and not isinstance(data[f], list):
            warnings.append(f"Field '{f}' should be a list")

    for f in COUNT_FIELDS:
        if f in data and data[f] is not None and as_count(data[f]) is None:
            warnings.append(f"Field '{f}' should be a list or a non-negative count")

    return warnings
