"""
Tests for the command line interface.
"""

import json
import logging

import pytest
from profilescore import __version__
from profilescore.app import load_profile, main, score_file
from profilescore.logger import get_logger


class TestLoadProfile:
    def test_unwraps_envelope(self, profile_file, raw_profile):
        assert load_profile(profile_file) == raw_profile

    def test_missing_file(self, tmp_path):
        with pytest.raises(SystemExit) as exc:
            load_profile(tmp_path / "missing.json")
        assert "not found" in str(exc.value)

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(SystemExit) as exc:
            load_profile(path)
        assert "Invalid JSON" in str(exc.value)

    def test_not_utf8(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_bytes(b"\xff\xfe{")
        with pytest.raises(SystemExit) as exc:
            load_profile(path)
        assert "not UTF-8" in str(exc.value)

    def test_directory(self, tmp_path):
        with pytest.raises(SystemExit) as exc:
            load_profile(tmp_path)
        assert "Could not read" in str(exc.value)


class TestScoreCommand:
    def test_score_json(self, profile_file, capsys):
        main(["score", "--input", str(profile_file)])
        report = json.loads(capsys.readouterr().out)
        assert report["totalScore"] == 50
        assert report["grade"] == "D"
        assert report["sectionScores"][0]["section"] == "linkedInUrl"

    def test_score_summary(self, profile_file, normalized_file, capsys):
        main(["score", "--input", str(profile_file), "--input", str(normalized_file), "--summary"])
        lines = capsys.readouterr().out.strip().splitlines()
        assert len(lines) == 2
        assert lines[0].endswith("50/118 (42%) grade D")
        assert lines[1].endswith("116/118 (98%) grade A+")

    def test_env_file_configures_logging(self, tmp_path, normalized_file, monkeypatch, capsys):
        """Log settings in .env apply to the run."""
        workdir = tmp_path / "work"
        workdir.mkdir()
        (workdir / ".env").write_text(
            "PROFILESCORE_LOG_LEVEL=DEBUG\nPROFILESCORE_LOG_DIR=logs\n", encoding="utf-8"
        )
        monkeypatch.chdir(workdir)

        main(["score", "--input", str(normalized_file), "--summary"])

        assert get_logger().logger.handlers[0].level == logging.DEBUG
        log_content = next((workdir / "logs").glob("*.log")).read_text(encoding="utf-8")
        assert "Profile scored" in log_content
        assert '"grade": "A+"' in log_content

    def test_score_arabic(self, normalized_file):
        report = score_file(normalized_file, "ar")
        skills = next(s for s in report["sectionScores"] if s["section"] == "skills")
        assert "المهارات" in skills["criteria"][0]["title"]

    def test_batch_continues_after_bad_file(self, tmp_path, normalized_file, capsys):
        missing = tmp_path / "missing.json"
        with pytest.raises(SystemExit) as exc:
            main(["score", "--input", str(missing), "--input", str(normalized_file), "--summary"])
        assert exc.value.code == 1
        assert "116/118" in capsys.readouterr().out

    def test_batch_continues_after_unreadable_file(self, tmp_path, normalized_file, capsys):
        bad = tmp_path / "bad.json"
        bad.write_bytes(b"\xff\xfe{")
        with pytest.raises(SystemExit) as exc:
            main(["score", "--input", str(bad), "--input", str(normalized_file), "--summary"])
        assert exc.value.code == 1
        assert "116/118" in capsys.readouterr().out


class TestOtherCommands:
    def test_validate_clean(self, normalized_file, capsys):
        main(["validate", "--input", str(normalized_file)])
        out = capsys.readouterr().out
        assert "Schema: normalized" in out
        assert "skills: skillsCount" in out
        assert out.strip().endswith("Valid")

    def test_validate_warnings(self, tmp_path, capsys):
        path = tmp_path / "odd.json"
        path.write_text(json.dumps({"headline": 42}), encoding="utf-8")
        with pytest.raises(SystemExit) as exc:
            main(["validate", "--input", str(path)])
        assert exc.value.code == 2
        assert "headline" in capsys.readouterr().out

    def test_criteria(self, capsys):
        main(["criteria"])
        rules = json.loads(capsys.readouterr().out)
        assert len(rules) == 23
        assert rules[0]["key"] == "linkedInUrl.urlCustomization"

    def test_version(self, capsys):
        main(["--version"])
        assert capsys.readouterr().out.strip() == __version__
