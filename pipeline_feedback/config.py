from pydantic import AnyUrl, Field, SecretStr, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from pipeline_feedback.errors import ConfigurationError

REQUIRED_SETTINGS = ("GITLAB_API_TOKEN", "CI_API_V4_URL", "CI_PROJECT_ID", "OPENAI_API_KEY")


def _is_blank(value) -> bool:
    if value is None:
        return True
    if isinstance(value, SecretStr):
        value = value.get_secret_value()
    return not str(value).strip()


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", case_sensitive=False, extra="ignore")

    # App
    APP_DEBUG: bool = False

    # GitLab CI (predefined variables inside a GitLab job, except the token)
    GITLAB_API_TOKEN: SecretStr | None = None
    CI_API_V4_URL: str | None = None
    CI_PROJECT_ID: str | None = None

    # LLM
    OPENAI_API_KEY: SecretStr | None = None
    OPENAI_API_URL: AnyUrl = "https://api.openai.com/v1/chat/completions"
    OPENAI_MODEL: str = "gpt-4o-mini"

    # Analysis
    LOG_TAIL_LINES: int = Field(100, gt=0)

    def missing_required(self) -> list[str]:
        return [name for name in REQUIRED_SETTINGS if _is_blank(getattr(self, name))]

    def ensure_required(self) -> None:
        """Raise ConfigurationError naming every required value that is unset or blank."""
        missing = self.missing_required()
        if missing:
            raise ConfigurationError(f"Missing environment variables: {', '.join(missing)}")

    @property
    def api_base_url(self) -> str:
        return (self.CI_API_V4_URL or "").rstrip("/")


def load_settings(**overrides) -> Settings:
    """Build Settings, turning pydantic validation failures into ConfigurationError."""
    try:
        return Settings(**overrides)
    except ValidationError as exc:
        names = sorted({str(err["loc"][0]) for err in exc.errors() if err.get("loc")})
        raise ConfigurationError(f"Invalid environment variables: {', '.join(names)}") from exc
