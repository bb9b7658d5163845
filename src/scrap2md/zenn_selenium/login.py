"""
Purpose: Manual login in a real browser, harvesting the Zenn session cookie.
Constraints: Operator completes authentication; nothing is typed or clicked for them.
"""

# Imports
import logging
import sys
import time
from typing import Callable, Dict, Iterable, Optional

from scrap2md.core.config_models import SeleniumSettings, ZennSettings
from scrap2md.core.errors import SessionCookieNotFound
from scrap2md.zenn_selenium.driver import BrowserManager, SessionFactory, browser_session

logger = logging.getLogger(__name__)

LOGIN_PROMPT = "Press Enter AFTER completing the login in the browser..."


def confirm_on_terminal(message: str) -> str:
    """Prompt on stderr and wait for a line on stdin; stdout may hold Markdown."""
    sys.stderr.write(message)
    sys.stderr.flush()
    return sys.stdin.readline()


def find_cookie(cookies: Iterable[Dict], name: str) -> Optional[Dict]:
    for cookie in cookies:
        if cookie.get("name") == name:
            return cookie
    return None


def format_cookie_header(cookie: Dict) -> str:
    return f"{cookie['name']}={cookie['value']}"


# Public API
class LoginManager:
    """Drives the sign-in page and waits for the operator to log in"""

    def __init__(
        self,
        zenn: Optional[ZennSettings] = None,
        selenium: Optional[SeleniumSettings] = None,
        session_factory: Optional[SessionFactory] = None,
        prompt: Callable[[str], str] = confirm_on_terminal,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self.zenn = zenn or ZennSettings()
        self.selenium = selenium or SeleniumSettings()
        self.session_factory = session_factory or BrowserManager(self.selenium).create_session
        self.prompt = prompt
        self.sleep = sleep

    def acquire_cookie(self) -> str:
        """Return ``name=value`` for the session cookie after manual login."""
        cookie_name = self.zenn.session_cookie_name
        with browser_session(self.session_factory) as session:
            session.navigate(self.zenn.signin_url)

            logger.info("=" * 60)
            logger.info("MANUAL LOGIN INSTRUCTIONS:")
            logger.info(f"1. In the browser window, sign in at {self.zenn.signin_url}")
            logger.info("2. Finish any Google/GitHub OAuth steps")
            logger.info("3. Return here and press Enter")
            logger.info("=" * 60)
            self.prompt(LOGIN_PROMPT)

            # cookie-setting scripts may still be running after redirect
            self.sleep(self.selenium.settle_seconds)

            cookies = session.get_cookies()
            cookie = find_cookie(cookies, cookie_name)
            if cookie is None:
                logger.error(f"Login cookie '{cookie_name}' missing among {len(cookies)} cookies")
                raise SessionCookieNotFound(cookie_name)

        logger.info(f"✓ Captured '{cookie_name}' cookie")
        return format_cookie_header(cookie)
