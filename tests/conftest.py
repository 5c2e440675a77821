"""
Pytest configuration and shared fixtures.
"""

import pytest
import json
from pathlib import Path
from typing import Dict, Any

from profilescore.logger import reset_logger

ENV_VARS = ("PROFILESCORE_LOG_LEVEL", "PROFILESCORE_LOG_DIR", "PROFILESCORE_LANGUAGE")


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Undo PROFILESCORE_* values a test loads from a .env file."""
    for name in ENV_VARS:
        # setenv first so teardown restores the original state
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    yield
    reset_logger()


@pytest.fixture
def raw_profile() -> Dict[str, Any]:
    """Profile in the raw scraper shape."""
    return {
        "publicIdentifier": "mohammad-omari-620959152",
        "firstName": "mohammad",
        "lastName": "omari",
        "occupation": "Mid-Senior Frontend developer",
        "countryCode": "jo",
        "geoCountryName": "Jordan",
        "headline": "Mid-Senior Frontend developer ",
        "summary": (
            "As a Mid-Senior Frontend Developer at Classera, I've translated complex "
            "concepts into user-friendly applications."
        ),
        "positions": [
            {"title": "Frontend Developer", "companyName": "CR2"},
            {"title": "Mid-Senior frontend developer", "companyName": "Classera"},
            {"title": "Frontend Developer", "companyName": "Classera"},
            {"title": "Full-stack Developer", "companyName": "Classera"},
        ],
        "educations": [{"schoolName": "Yarmouk University"}],
        "certifications": [],
        "honors": [],
        "languages": [],
        "skills": ["Ionic Framework", "Angular Material", "Angular CLI", "Bitbucket"],
        "volunteerExperiences": [],
        "followersCount": 815,
        "connectionsCount": 500,
    }


@pytest.fixture
def normalized_profile() -> Dict[str, Any]:
    """Profile in the AI-normalized shape."""
    return {
        "linkedInUrl": "https://www.linkedin.com/in/jane-doe/",
        "country": "Germany",
        "headline": "Senior Backend Engineer and Tech Lead building payment platforms at scale",
        "about": " ".join(["word"] * 210) + " contact: jane.doe@example.com",
        "experience": [
            {"title": "Tech Lead", "description": "Led the payments team."},
            {"title": "Backend Engineer", "description": ""},
            {"title": "Engineer", "description": "Built APIs."},
        ],
        "education": [{"school": "TU Berlin"}],
        "skillsCount": 12,
        "publications": 2,
        "languages": 3,
        "certificates": 1,
        "honorsAwards": 1,
        "volunteering": 1,
        "patents": 1,
        "testScores": 1,
        "organizations": 1,
        "featured": 1,
        "projects": [{"name": "payments-sdk"}],
        "recommendationsCount": 4,
        "causes": 1,
        "contactInfo": {"content": "jane.doe@example.com"},
    }


@pytest.fixture
def empty_profile() -> Dict[str, Any]:
    return {}


@pytest.fixture
def profile_file(tmp_path, raw_profile) -> Path:
    """Raw profile wrapped in the scraper envelope, written to disk."""
    path = tmp_path / "profile.json"
    path.write_text(json.dumps({"success": True, "data": [raw_profile]}), encoding="utf-8")
    return path


@pytest.fixture
def normalized_file(tmp_path, normalized_profile) -> Path:
    path = tmp_path / "normalized.json"
    path.write_text(json.dumps(normalized_profile), encoding="utf-8")
    return path
