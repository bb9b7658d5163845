"""
Purpose: Run slug -> credential -> fetch -> render and write the result.
Constraints: Sequential; nothing is written unless rendering succeeded.
"""

# Imports
import logging
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from scrap2md.core.config import ConfigManager
from scrap2md.core.credentials import CredentialSource, resolve_credential
from scrap2md.core.markdown import render_markdown
from scrap2md.core.models import Scrap
from scrap2md.core.slug import extract_slug
from scrap2md.zenn_api.client import fetch_scrap
from scrap2md.zenn_selenium.login import LoginManager

logger = logging.getLogger(__name__)

_UNSAFE_FILENAME = re.compile(r'[\\/:*?"<>|\x00-\x1f]+')
MAX_TITLE_LENGTH = 100


@dataclass
class ExportRequest:
    url: str
    cookie: Optional[str] = None
    cookie_env: Optional[str] = None
    skip_header: Optional[bool] = None
    style: Optional[str] = None
    interactive_login: Optional[bool] = None


@dataclass
class ExportResult:
    slug: str
    scrap: Scrap
    markdown: str


def output_filename(title: str, slug: str) -> str:
    """``{title}_{slug}.md`` with characters unsafe in file names replaced."""
    safe = _UNSAFE_FILENAME.sub("_", title)
    safe = re.sub(r"\s+", " ", safe).strip(" ._")[:MAX_TITLE_LENGTH].rstrip(" ._")
    return f"{safe or 'scrap'}_{slug}.md"


def write_markdown(markdown: str, path: Path) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(markdown, encoding="utf-8")
    logger.info(f"Wrote {len(markdown)} characters to {path}")
    return path


# Public API
class ScrapExporter:
    def __init__(self, config: Optional[ConfigManager] = None, login_manager: Optional[LoginManager] = None):
        self.config = config or ConfigManager().load_all()
        self._login_manager = login_manager

    @property
    def login_manager(self) -> LoginManager:
        if self._login_manager is None:
            self._login_manager = LoginManager(self.config.zenn, self.config.selenium)
        return self._login_manager

    def _interactive_source(self, enabled: bool) -> Optional[CredentialSource]:
        if not enabled:
            return None
        return self.login_manager.acquire_cookie

    def export(self, request: ExportRequest) -> ExportResult:
        settings = self.config.export
        skip_header = settings.skip_header if request.skip_header is None else request.skip_header
        style = request.style or settings.style
        interactive = (
            settings.interactive_login if request.interactive_login is None else request.interactive_login
        )

        slug = extract_slug(request.url)
        credential = resolve_credential(
            explicit=request.cookie,
            env_value=self.config.cookie_from_env(request.cookie_env),
            interactive=self._interactive_source(interactive),
        )
        scrap = fetch_scrap(slug, credential, settings=self.config.zenn)
        markdown = render_markdown(scrap, url=request.url, skip_header=skip_header, style=style)
        return ExportResult(slug=slug, scrap=scrap, markdown=markdown)
