"""Runtime configuration and logging setup."""

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

DEFAULT_MODEL = "gemini-2.0-flash"
DEFAULT_ADMIN_PASSPHRASE = "admin123"
DEFAULT_TIMEOUT = 60.0
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

logger = logging.getLogger(__name__)


@dataclass
class Settings:
    """Process-wide settings, built once by the CLI or the web app."""

    data_dir: Path
    gemini_api_key: str | None = None
    model: str = DEFAULT_MODEL
    timeout: float = DEFAULT_TIMEOUT
    max_records: int = 0  # 0 keeps history unbounded
    admin_passphrase: str = DEFAULT_ADMIN_PASSPHRASE
    log_level: str = "INFO"

    @property
    def db_path(self) -> Path:
        return self.data_dir / "fitplan.db"

    @property
    def uses_default_admin_passphrase(self) -> bool:
        return self.admin_passphrase == DEFAULT_ADMIN_PASSPHRASE

    @classmethod
    def from_env(cls) -> "Settings":
        """Read settings from environment variables (and a .env file if present)."""
        return cls(
            data_dir=Path(os.getenv("FITPLAN_DATA_DIR", "data")),
            gemini_api_key=os.getenv("GEMINI_API_KEY") or None,
            model=os.getenv("FITPLAN_MODEL", DEFAULT_MODEL),
            timeout=_float_env("FITPLAN_TIMEOUT", DEFAULT_TIMEOUT),
            max_records=int(_float_env("FITPLAN_MAX_RECORDS", 0)),
            admin_passphrase=os.getenv("FITPLAN_ADMIN_PASSPHRASE", DEFAULT_ADMIN_PASSPHRASE),
            log_level=os.getenv("FITPLAN_LOG_LEVEL", "INFO").upper(),
        )


def _float_env(name: str, default: float) -> float:
    value = os.getenv(name)
    if not value:
        return default
    try:
        return float(value)
    except ValueError:
        logger.warning("Ignoring non-numeric %s=%r", name, value)
        return default


def setup_logging(level: str = "INFO") -> None:
    """Configure root logging once per process."""
    logging.basicConfig(level=getattr(logging, level.upper(), logging.INFO), format=LOG_FORMAT)
