import argparse
import json
from pathlib import Path
from typing import Any, List

from .env import Settings, load_env

from . import __version__
from .criteria import SCORING_CRITERIA, sections
from .logger import get_logger, reset_logger
from .resolver import resolved_path
from .schema import detect_schema, unwrap_payload, validate_profile
from .scoring import score
from .translations import localize, supported_languages


def load_profile(input_path: Path) -> Any:
    """Read a profile JSON file, unwrapping a scraper envelope if present."""
    if not input_path.exists():
        raise SystemExit(f"Input file not found: {input_path}")
    try:
        with input_path.open("r", encoding="utf-8") as f:
            payload = json.load(f)
    except json.JSONDecodeError as e:
        raise SystemExit(f"Invalid JSON in {input_path}: {e}")
    except UnicodeDecodeError as e:
        raise SystemExit(f"Input file is not UTF-8: {input_path}: {e}")
    except OSError as e:
        raise SystemExit(f"Could not read {input_path}: {e}")
    return unwrap_payload(payload)


def score_file(input_path: Path, language: str = "en") -> dict:
    profile = load_profile(input_path)
    result = score(profile)
    if language != "en":
        result = localize(result, language)
    return result.to_dict()


def cmd_score(args: argparse.Namespace) -> None:
    logger = get_logger()
    failed = 0
    for raw_path in args.input:
        input_path = Path(raw_path)
        logger.record_profile_attempt()
        try:
            report = score_file(input_path, args.language)
        except SystemExit as e:
            # Keep going in batch mode; one bad file should not stop the run
            logger.record_profile_failure("InputError")
            logger.error("Could not score profile", path=str(input_path), error=str(e.code))
            failed += 1
            continue
        logger.record_profile_scored(report["grade"])
        if args.summary:
            print(f"{input_path}: {report['totalScore']}/{report['maxTotalScore']} "
                  f"({report['percentage']}%) grade {report['grade']}")
        else:
            print(json.dumps(report, indent=2, ensure_ascii=False))
    if len(args.input) > 1:
        logger.log_metrics_summary()
    if failed:
        raise SystemExit(1)


def cmd_validate(args: argparse.Namespace) -> None:
    input_path = Path(args.input)
    profile = load_profile(input_path)
    print(f"Schema: {detect_schema(profile)}")
    for section in sections(SCORING_CRITERIA):
        path = resolved_path(section, profile)
        print(f"  {section}: {path or '-'}")
    warnings = validate_profile(profile)
    if warnings:
        print("Warnings:")
        for w in warnings:
            print(f" - {w}")
        raise SystemExit(2)
    print("Valid")


def cmd_criteria(args: argparse.Namespace) -> None:
    rules: List[dict] = [c.to_dict() for c in SCORING_CRITERIA]
    print(json.dumps(rules, indent=2))


def main(argv=None):
    # Load .env if present (PROFILESCORE_LOG_LEVEL, PROFILESCORE_LANGUAGE, etc.)
    load_env()
    # Rebuild the logger so .env log settings apply
    reset_logger()
    settings = Settings.from_env()
    parser = argparse.ArgumentParser(prog="profilescore", description="Profile completeness scoring")
    parser.add_argument("--version", action="store_true", help="Show version")

    subparsers = parser.add_subparsers(dest="command")
    sc = subparsers.add_parser("score", help="Score one or more profile JSON files")
    sc.add_argument("--input", required=True, action="append", help="Path to profile JSON (repeatable)")
    sc.add_argument("--language", default=settings.language, choices=supported_languages(),
                    help="Language for criterion titles (default: PROFILESCORE_LANGUAGE or en)")
    sc.add_argument("--summary", action="store_true", help="Print one line per profile instead of JSON")
    sc.set_defaults(func=cmd_score)

    val = subparsers.add_parser("validate", help="Check a profile JSON and show which fields each section uses")
    val.add_argument("--input", required=True, help="Path to profile JSON")
    val.set_defaults(func=cmd_validate)

    crit = subparsers.add_parser("criteria", help="Print the scoring rubric as JSON")
    crit.set_defaults(func=cmd_criteria)

    args = parser.parse_args(argv)

    if args.version:
        print(__version__)
        return

    if hasattr(args, "func"):
        args.func(args)
        return

    parser.print_help()


if __name__ == "__main__":
    main()
