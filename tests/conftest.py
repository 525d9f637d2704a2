"""Shared pytest configuration and fixtures for all tests."""

import asyncio
import os
import tempfile
from pathlib import Path

import pytest

# Keep the rotating log file out of the real home directory
os.environ.setdefault("DOCLINKS_HOME", tempfile.mkdtemp(prefix="doclinks-test-home-"))

from doclinks.api.config.CheckConfig import CheckConfig  # noqa: E402
from doclinks.api.config.RepositoryConfig import RepositoryConfig  # noqa: E402
from doclinks.api.link._pool.RenderingContext import RenderingContext  # noqa: E402


def pytest_collection_modifyitems(config, items):
    """Automatically apply markers based on test file location."""
    for item in items:
        path_str = str(item.fspath)
        if "/unit/" in path_str:
            item.add_marker(pytest.mark.unit)


def run_cmd(cmd_func, *args, **kwargs):
    """Execute a cmd function and return the result with progress_callback executed."""
    result = cmd_func(*args, **kwargs)
    list(result.progress_callback(result))
    return result


# =============================================================================
# Fake collaborators
# =============================================================================


class InFlightTracker:
    """Counts concurrent navigations across every fake context."""

    def __init__(self) -> None:
        self.current = 0
        self.peak = 0
        self.urls: list[str] = []

    def enter(self, url: str) -> None:
        self.current += 1
        self.peak = max(self.peak, self.current)
        self.urls.append(url)

    def exit(self) -> None:
        self.current -= 1


class FakeContext(RenderingContext):
    """Rendering context answering from a url -> status (or exception) map."""

    def __init__(self, statuses=None, default=200, delay=0.0, tracker=None):
        self.statuses = statuses or {}
        self.default = default
        self.delay = delay
        self.tracker = tracker
        self.closed = False
        self.navigations = 0

    async def navigate(self, url: str) -> int:
        self.navigations += 1
        if self.tracker is not None:
            self.tracker.enter(url)
        try:
            await asyncio.sleep(self.delay)
            value = self.statuses.get(url, self.default)
            if isinstance(value, BaseException):
                raise value
            return value
        finally:
            if self.tracker is not None:
                self.tracker.exit()

    async def close(self) -> None:
        self.closed = True


class FakeContextFactory:
    """Async factory producing FakeContexts; records every context it creates."""

    def __init__(self, fail_after=None, create_delay=0.0, **context_kwargs):
        self.context_kwargs = context_kwargs
        self.fail_after = fail_after
        self.create_delay = create_delay
        self.created: list[FakeContext] = []

    async def __call__(self) -> FakeContext:
        if self.create_delay:
            await asyncio.sleep(self.create_delay)
        if self.fail_after is not None and len(self.created) >= self.fail_after:
            raise RuntimeError("browser failed to start")
        context = FakeContext(**self.context_kwargs)
        self.created.append(context)
        return context


class FakeResponse:
    def __init__(self, status: int):
        self.status = status


class _FakeRequest:
    def __init__(self, value):
        self.value = value

    async def __aenter__(self):
        if isinstance(self.value, BaseException):
            raise self.value
        return FakeResponse(self.value)

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        return False


class FakeSession:
    """Stand-in for aiohttp.ClientSession supporting ``async with session.head(...)``."""

    def __init__(self, statuses=None, default=200):
        self.statuses = statuses or {}
        self.default = default
        self.calls: list[tuple[str, dict]] = []
        self.closed = False

    def head(self, url, **kwargs):
        self.calls.append((url, kwargs))
        return _FakeRequest(self.statuses.get(url, self.default))

    async def close(self) -> None:
        self.closed = True


# =============================================================================
# Configuration Helpers
# =============================================================================


@pytest.fixture
def repository() -> RepositoryConfig:
    return RepositoryConfig(owner="acme", name="docs", commit="abc123")


@pytest.fixture
def docs_root(tmp_path: Path) -> Path:
    root = tmp_path / "docs"
    root.mkdir()
    return root


@pytest.fixture
def check_config(docs_root: Path, repository: RepositoryConfig) -> CheckConfig:
    return CheckConfig(root=docs_root, repository=repository, pool_size=2, timeout=5.0)
