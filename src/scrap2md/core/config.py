"""
Purpose: Load environment configuration for the exporter.
Constraints: Pure config I/O only; no network or automation side effects.
"""

# Imports
import os
import logging
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv
from pydantic import ValidationError

from scrap2md.core.config_models import ExportSettings, SeleniumSettings, ZennSettings
from scrap2md.core.errors import ConfigError

logger = logging.getLogger(__name__)

_TRUE_VALUES = ("1", "true", "yes", "on")


def _env_flag(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() in _TRUE_VALUES


# Public API
class ConfigManager:
    """Environment-backed settings for the fetch, login and render stages"""

    def __init__(self, env_files: Optional[List[Path]] = None):
        self.env_files = env_files if env_files is not None else [
            Path.cwd() / ".env",
            Path.home() / ".scrap2md.env",
        ]
        self.loaded_env_file: Optional[Path] = None
        self.zenn = ZennSettings()
        self.selenium = SeleniumSettings()
        self.export = ExportSettings()

    def load_all(self):
        """Load all configurations"""
        self.load_env()
        self.load_settings()
        return self

    def load_env(self):
        """Load the first env file found; real environment variables win."""
        for env_file in self.env_files:
            if env_file.exists():
                load_dotenv(env_file, override=False)
                self.loaded_env_file = env_file
                break

        if self.loaded_env_file:
            logger.debug("Loaded environment from: %s", self.loaded_env_file)
        else:
            logger.debug("No .env file found")
        return self

    def load_settings(self):
        try:
            self.zenn = ZennSettings(
                base_url=os.getenv("ZENN_BASE_URL", "https://zenn.dev"),
                signin_path=os.getenv("ZENN_SIGNIN_PATH", "/enter"),
                session_cookie_name=os.getenv("ZENN_SESSION_COOKIE_NAME", "_zenn_session"),
                cookie_env=os.getenv("ZENN_COOKIE_ENV", "ZENN_COOKIE"),
                http_timeout=os.getenv("HTTP_TIMEOUT", "30"),
            )
            self.selenium = SeleniumSettings(
                webdriver_url=os.getenv("WEBDRIVER_URL", "http://localhost:9515"),
                headless=_env_flag("WEBDRIVER_HEADLESS", False),
                settle_seconds=os.getenv("LOGIN_SETTLE_SECONDS", "2.0"),
            )
            self.export = ExportSettings(
                skip_header=_env_flag("SKIP_HEADER", False),
                style=os.getenv("RENDER_STYLE", "flat").strip().lower(),
                interactive_login=_env_flag("INTERACTIVE_LOGIN", True),
            )
        except ValidationError as exc:
            raise ConfigError(f"Invalid configuration: {exc}") from exc
        return self

    def cookie_from_env(self, env_name: Optional[str] = None) -> Optional[str]:
        """Credential held in the named environment variable, if set."""
        value = os.getenv(env_name or self.zenn.cookie_env, "").strip()
        return value or None
