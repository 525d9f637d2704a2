"""Repository identity used to compose URLs for relative links."""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class RepositoryConfig(BaseModel):
    """Repository host, owner/name and the commit being validated."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    host: str = Field("github.com", description="Source hosting platform host")
    owner: str = Field(..., min_length=1, description="Repository owner")
    name: str = Field(..., min_length=1, description="Repository name")
    commit: str = Field(..., min_length=1, description="Commit SHA relative links are checked against")

    @field_validator("host")
    @classmethod
    def _strip_host(cls, value: str) -> str:
        value = value.strip().rstrip("/")
        if not value:
            raise ValueError("host must not be empty")
        return value

    @classmethod
    def parse(cls, slug: str, commit: str, host: str = "github.com") -> "RepositoryConfig":
        """Build from an ``owner/name`` slug (the GITHUB_REPOSITORY format).

        Raises:
            ValueError: If slug is not exactly ``owner/name``.
        """
        parts = slug.strip().split("/")
        if len(parts) != 2 or not all(parts):
            raise ValueError(f"Repository must be 'owner/name', got {slug!r}")
        return cls(host=host, owner=parts[0], name=parts[1], commit=commit)

    @property
    def slug(self) -> str:
        return f"{self.owner}/{self.name}"

    def blob_url(self, path: str) -> str:
        """Fully qualified URL of ``path`` at this commit."""
        return f"https://{self.host}/{self.owner}/{self.name}/blob/{self.commit}/{path.lstrip('/')}"
