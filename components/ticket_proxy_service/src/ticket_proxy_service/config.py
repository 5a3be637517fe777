"""Process-wide settings, read once at startup."""

from pydantic import AliasChoices, Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ticket_tracker_interface.ticket import DescriptionFormat


class ProxySettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
        populate_by_name=True,
    )

    # Jira (both the short names and the JIRA_*_URL style names are accepted)
    jira_base: str = Field(validation_alias=AliasChoices("JIRA_BASE", "JIRA_BASE_URL"))
    jira_email: str = Field(validation_alias=AliasChoices("JIRA_EMAIL", "JIRA_USER_EMAIL"))
    jira_api_token: SecretStr = Field(validation_alias=AliasChoices("JIRA_API_TOKEN"))
    project_key: str = Field(validation_alias=AliasChoices("PROJECT_KEY", "JIRA_PROJECT_KEY"))
    description_format: DescriptionFormat = Field(
        DescriptionFormat.ADF, validation_alias=AliasChoices("DESCRIPTION_FORMAT")
    )
    upstream_timeout: float = Field(10.0, gt=0, validation_alias=AliasChoices("UPSTREAM_TIMEOUT"))

    # Server
    host: str = Field("0.0.0.0", validation_alias=AliasChoices("HOST"))
    port: int = Field(3000, validation_alias=AliasChoices("PORT"))
    log_level: str = Field("INFO", validation_alias=AliasChoices("LOG_LEVEL"))
    cors_origins: str = Field("*", validation_alias=AliasChoices("CORS_ORIGINS"))  # comma separated

    @field_validator("jira_base")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")

    @property
    def cors_origin_list(self) -> list[str]:
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]
