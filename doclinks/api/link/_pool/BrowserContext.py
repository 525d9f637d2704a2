"""Selenium Chrome context that reports the HTTP status of a loaded page."""

import asyncio
import json
import logging
from collections.abc import Iterable
from typing import Any
from urllib.parse import urldefrag

from selenium import webdriver
from selenium.common.exceptions import InvalidSessionIdException, TimeoutException, WebDriverException
from selenium.webdriver.chrome.options import Options
from selenium.webdriver.remote.webdriver import WebDriver

from ...config.BrowserConfig import BrowserConfig
from .RenderingContext import ContextCrashed, NavigationError, RenderingContext

logger = logging.getLogger(__name__)

# WebDriverException messages that mean the browser process is gone
_CRASH_MARKERS = ("chrome not reachable", "disconnected", "session deleted", "target crashed")


def document_status(entries: Iterable[dict[str, Any]], final_url: str) -> int | None:
    """Pick the main document's status out of Chrome performance log entries.

    Only responses in the main frame count, taken to be the frame of the
    first document response; iframes and embeds are ignored. Prefers the
    last main-frame response whose URL is the page's final URL (fragments
    ignored), falling back to the last main-frame response seen.
    """
    target, _ = urldefrag(final_url)
    main_frame: Any = None
    seen_document = False
    last: int | None = None
    matched: int | None = None
    for entry in entries:
        try:
            message = json.loads(entry["message"]).get("message", {})
        except (KeyError, TypeError, ValueError):
            continue
        if message.get("method") != "Network.responseReceived":
            continue
        params = message.get("params", {})
        if params.get("type") != "Document":
            continue
        if not seen_document:
            seen_document = True
            main_frame = params.get("frameId")
        elif params.get("frameId") != main_frame:
            continue
        response = params.get("response", {})
        status = response.get("status")
        if status is None:
            continue
        last = int(status)
        if urldefrag(response.get("url", ""))[0] == target:
            matched = last
    return matched if matched is not None else last


def _start_driver(config: BrowserConfig, timeout: float) -> WebDriver:
    options = Options()
    if config.headless:
        options.add_argument("--headless=new")
    options.add_argument("--no-sandbox")
    options.add_argument("--disable-dev-shm-usage")
    options.add_argument("--disable-gpu")
    options.add_argument("--lang=en-US,en")
    options.add_argument(f"--user-agent={config.user_agent}")
    options.set_capability("goog:loggingPrefs", {"performance": "ALL"})

    if config.remote_url:
        driver = webdriver.Remote(command_executor=config.remote_url, options=options)
    else:
        driver = webdriver.Chrome(options=options)
    driver.set_page_load_timeout(timeout)
    return driver


class BrowserContext(RenderingContext):
    """One Chrome session; blocking driver calls run in worker threads."""

    def __init__(self, driver: WebDriver):
        self.driver = driver

    @classmethod
    async def create(cls, config: BrowserConfig, timeout: float) -> "BrowserContext":
        driver = await asyncio.to_thread(_start_driver, config, timeout)
        logger.debug("Created browser session %s", driver.session_id)
        return cls(driver)

    async def navigate(self, url: str) -> int:
        return await asyncio.to_thread(self._navigate, url)

    async def close(self) -> None:
        await asyncio.to_thread(self.driver.quit)

    def _navigate(self, url: str) -> int:
        try:
            # Drain entries left over from the previous page
            self.driver.get_log("performance")
            self.driver.get(url)
            entries = self.driver.get_log("performance")
            final_url = self.driver.current_url
        except InvalidSessionIdException as exc:
            raise ContextCrashed(exc.msg or str(exc)) from exc
        except TimeoutException as exc:
            raise NavigationError(f"page load timed out: {exc.msg or exc}") from exc
        except WebDriverException as exc:
            message = exc.msg or str(exc)
            if any(marker in message.lower() for marker in _CRASH_MARKERS):
                raise ContextCrashed(message) from exc
            raise NavigationError(message) from exc

        status = document_status(entries, final_url)
        if status is None:
            raise NavigationError(f"no document response recorded for {url}")
        return status
