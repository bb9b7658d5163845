"""
Purpose: Remote WebDriver session exposed through a narrow browser capability.
Constraints: Only navigate/read cookies/close; callers never touch the driver.
"""

# Imports
import logging
from contextlib import contextmanager
from typing import Callable, Dict, Iterator, List, Optional, Protocol

from selenium import webdriver
from selenium.common.exceptions import WebDriverException
from selenium.webdriver.chrome.options import Options
from urllib3.exceptions import HTTPError as Urllib3HTTPError

from scrap2md.core.config_models import SeleniumSettings
from scrap2md.core.errors import AutomationUnavailable

logger = logging.getLogger(__name__)


class BrowserSession(Protocol):
    def navigate(self, url: str) -> None: ...

    def get_cookies(self) -> List[Dict]: ...

    def close(self) -> None: ...


SessionFactory = Callable[[], BrowserSession]


# Public API
class RemoteBrowserSession:
    """A chromedriver-style session reached over the WebDriver protocol"""

    def __init__(self, driver):
        self.driver = driver

    def navigate(self, url: str) -> None:
        try:
            self.driver.get(url)
        except (WebDriverException, Urllib3HTTPError) as e:
            raise AutomationUnavailable(f"Browser could not open {url}: {e}") from e

    def get_cookies(self) -> List[Dict]:
        # NoSuchWindowException lands here when the operator closed the window
        try:
            return self.driver.get_cookies()
        except (WebDriverException, Urllib3HTTPError) as e:
            raise AutomationUnavailable(f"Browser session lost before cookies were read: {e}") from e

    def close(self) -> None:
        try:
            self.driver.quit()
        except (WebDriverException, Urllib3HTTPError, OSError) as e:
            logger.warning(f"Browser session did not close cleanly: {e}")


class BrowserManager:
    def __init__(self, settings: Optional[SeleniumSettings] = None):
        self.settings = settings or SeleniumSettings()

    def _options(self) -> Options:
        options = Options()
        if self.settings.headless:
            options.add_argument("--headless=new")
        options.add_argument("--window-size=1200,900")
        return options

    def create_session(self) -> RemoteBrowserSession:
        """Open a new session on the automation endpoint."""
        endpoint = self.settings.webdriver_url
        logger.info(f"Connecting to WebDriver at {endpoint}")
        try:
            driver = webdriver.Remote(command_executor=endpoint, options=self._options())
        except (WebDriverException, Urllib3HTTPError, OSError) as e:
            raise AutomationUnavailable(
                f"Cannot start a browser session at {endpoint}: {e}. "
                "Is chromedriver running (e.g. `chromedriver --port=9515`)?"
            ) from e
        return RemoteBrowserSession(driver)


@contextmanager
def browser_session(factory: SessionFactory) -> Iterator[BrowserSession]:
    """Yield a session from ``factory`` and close it on every exit path."""
    session = factory()
    try:
        yield session
    finally:
        session.close()
        logger.info("Browser session closed")
