import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def load_env() -> bool:
    """Load .env from the working directory if present.

    Existing environment variables win over values in the file.
    Returns True when a file was loaded.
    """
    env_path = Path.cwd() / ".env"
    if not env_path.exists():
        return False
    return load_dotenv(dotenv_path=env_path, override=False)


@dataclass(frozen=True)
class Settings:
    log_level: str = "INFO"
    log_dir: Optional[Path] = None
    language: str = "en"

    @classmethod
    def from_env(cls) -> "Settings":
        level = os.getenv("PROFILESCORE_LOG_LEVEL", "INFO").strip().upper()
        if level not in LOG_LEVELS:
            level = "INFO"
        log_dir = os.getenv("PROFILESCORE_LOG_DIR", "").strip()
        language = os.getenv("PROFILESCORE_LANGUAGE", "en").strip().lower() or "en"
        return cls(
            log_level=level,
            log_dir=Path(log_dir) if log_dir else None,
            language=language,
        )
