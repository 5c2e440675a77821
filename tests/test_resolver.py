"""
Tests for field resolution across payload shapes.
"""

import pickle
from types import SimpleNamespace

from profilescore.resolver import ABSENT, SECTION_FIELDS, lookup, resolve, resolved_path
from profilescore.criteria import sections


class TestAbsentMarker:
    """ABSENT is falsy but distinct from empty values."""

    def test_falsy(self):
        assert not ABSENT

    def test_distinct_from_empty_values(self):
        for empty in (None, 0, "", [], {}):
            assert ABSENT is not empty
            assert ABSENT != empty

    def test_singleton_survives_pickle(self):
        assert pickle.loads(pickle.dumps(ABSENT)) is ABSENT


class TestResolve:
    """Test candidate path resolution."""

    def test_every_registry_section_has_candidates(self):
        for section in sections():
            assert SECTION_FIELDS.get(section), section

    def test_normalized_name_wins(self):
        """AI-normalized names are tried before raw ones."""
        data = {"about": "normalized", "summary": "raw"}
        assert resolve("summary", data) == "normalized"

    def test_raw_fallback(self, raw_profile):
        assert resolve("experiences", raw_profile) == raw_profile["positions"]
        assert resolve("education", raw_profile) == raw_profile["educations"]
        assert resolve("country", raw_profile) == "Jordan"
        assert resolve("linkedInUrl", raw_profile) == "mohammad-omari-620959152"

    def test_none_falls_through(self):
        """None is not a defined value; the next candidate is tried."""
        data = {"skillsCount": None, "skills": ["a", "b"]}
        assert resolve("skills", data) == ["a", "b"]

    def test_empty_values_are_defined(self):
        """Zero items is a resolved value, not ABSENT."""
        assert resolve("languages", {"languages": []}) == []
        assert resolve("skills", {"skillsCount": 0}) == 0

    def test_missing_section_is_absent(self, empty_profile):
        assert resolve("summary", empty_profile) is ABSENT

    def test_unknown_section_is_absent(self, raw_profile):
        assert resolve("favouriteColour", raw_profile) is ABSENT

    def test_non_mapping_input(self):
        """Junk input never raises."""
        for junk in (None, 42, "profile", ["a"]):
            assert resolve("headline", junk) is ABSENT

    def test_attribute_access(self):
        """Any object exposing the field names works."""
        profile = SimpleNamespace(headline="Staff Engineer", about=None, summary="Hello")
        assert resolve("headline", profile) == "Staff Engineer"
        assert resolve("summary", profile) == "Hello"
        assert resolve("skills", profile) is ABSENT

    def test_resolved_path(self, normalized_profile, raw_profile):
        assert resolved_path("skills", normalized_profile) == "skillsCount"
        assert resolved_path("skills", raw_profile) == "skills"
        assert resolved_path("patents", raw_profile) is None


class TestLookup:
    def test_dotted_path(self):
        data = {"contactInfo": {"content": "me@example.com"}}
        assert lookup(data, "contactInfo.content") == "me@example.com"

    def test_dotted_path_through_scalar(self):
        assert lookup({"contactInfo": "text"}, "contactInfo.content") is ABSENT

    def test_missing_key(self):
        assert lookup({}, "headline") is ABSENT
