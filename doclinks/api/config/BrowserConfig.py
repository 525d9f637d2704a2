"""Browser (rendering client) configuration."""

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
    "AppleWebKit/537.36 (KHTML, like Gecko) "
    "Chrome/122.0.0.0 Safari/537.36"
)


class BrowserConfig(BaseModel):
    """How browser contexts for rendered navigation are started."""

    model_config = ConfigDict(extra="forbid")

    headless: bool = Field(True, description="Run Chrome without a visible window")
    remote_url: str | None = Field(None, description="Selenium Grid URL; local Chrome when unset")
    user_agent: str = Field(DEFAULT_USER_AGENT, description="User-Agent sent by browser and HEAD probe")
