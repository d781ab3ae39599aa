"""Settings resolution from environment variables and an optional .env file."""

import typer
from pydantic import SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

ASANA_BASE_URL = "https://app.asana.com/api/1.0"


class PrsyncSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="PRSYNC_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Asana
    asana_token: SecretStr | None = None
    asana_base_url: str = ASANA_BASE_URL
    request_timeout: float = 30

    # GitHub users whose pull requests always go to READY FOR QA
    whitelist_github_users: str = ""  # comma-separated

    @property
    def allow_list(self) -> frozenset[str]:
        return frozenset(name.strip() for name in self.whitelist_github_users.split(",") if name.strip())


def get_settings(require_token: bool = True) -> PrsyncSettings:
    """Build settings from the environment, exiting if the Asana token is required but missing."""
    settings = PrsyncSettings()
    if require_token and not settings.asana_token:
        typer.echo("::error::Missing Asana credentials. Set the asana-token input or PRSYNC_ASANA_TOKEN.")
        raise typer.Exit(1)
    return settings
