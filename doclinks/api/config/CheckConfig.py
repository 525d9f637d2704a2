"""Top-level configuration for one link check run."""

import json
import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .BrowserConfig import BrowserConfig
from .LogConfig import LogConfig
from .RepositoryConfig import RepositoryConfig


class CheckConfig(BaseModel):
    """Everything the pipeline needs, constructed once at startup."""

    model_config = ConfigDict(extra="forbid")

    root: Path = Field(..., description="Root directory scanned for markdown files")
    pattern: str = Field("**/*.md", description="Root-relative glob for markdown files")
    exclude_dirnames: list[str] = Field(
        default_factory=lambda: [".git", "node_modules"],
        description="Directory names whose contents are never scanned",
    )
    pool_size: int = Field(4, ge=1, le=32, description="Number of pooled browser contexts")
    timeout: float = Field(30.0, gt=0, description="Per-request timeout in seconds")
    repository: RepositoryConfig
    browser: BrowserConfig = Field(default_factory=BrowserConfig)
    log: LogConfig = Field(default_factory=LogConfig)

    @classmethod
    def read_file(cls, path: Path) -> dict[str, Any]:
        """Read a JSON config file without validating it, so it may be partial.

        Raises:
            ValueError: If config file not found, invalid JSON, or not a JSON object
        """
        if not path.exists():
            raise ValueError(f"Configuration file not found at {path}")

        try:
            with path.open() as fh:
                raw = json.load(fh)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in config file {path}: {e}") from e

        if not isinstance(raw, dict):
            raise ValueError(f"Config file {path} must contain a JSON object")
        return raw

    @classmethod
    def load(cls, path: Path) -> "CheckConfig":
        """Load and validate a complete config from a JSON file.

        Raises:
            ValueError: If config file not found, invalid JSON, or validation error
        """
        return cls.from_dict(cls.read_file(path))

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> "CheckConfig":
        """Validate a config dict, flattening pydantic errors into a ValueError."""
        try:
            return cls(**raw)
        except ValidationError as e:
            error_list = e.errors() or [{"msg": str(e), "loc": (), "type": "value_error", "input": None}]
            first = error_list[0]
            error_msg = first.get("msg", str(e))
            loc = first.get("loc", ())
            field = ".".join(str(x) for x in loc) if isinstance(loc, (list, tuple)) else ""
            detail = f"{field}: {error_msg}" if field else error_msg
            raise ValueError(f"Configuration validation error: {detail}") from e

    @classmethod
    def from_env(
        cls,
        slug: str | None = None,
        commit: str | None = None,
        host: str | None = None,
        **overrides: Any,
    ) -> "CheckConfig":
        """Build config from the GitHub Actions environment.

        Reads GITHUB_WORKSPACE, GITHUB_REPOSITORY and GITHUB_SHA. Explicit
        arguments win over the environment; ``None`` values are ignored.

        Raises:
            ValueError: If a required value is missing from both arguments and environment.
        """
        values = {key: value for key, value in overrides.items() if value is not None}

        if "repository" not in values:
            slug = slug or os.environ.get("GITHUB_REPOSITORY", "")
            commit = commit or os.environ.get("GITHUB_SHA", "")
            if not slug or not commit:
                raise ValueError("Repository identity required: pass it explicitly or set GITHUB_REPOSITORY and GITHUB_SHA")
            values["repository"] = RepositoryConfig.parse(slug, commit, host or "github.com")

        if "root" not in values:
            workspace = os.environ.get("GITHUB_WORKSPACE")
            values["root"] = Path(workspace) if workspace else Path.cwd()

        return cls.from_dict(values)
