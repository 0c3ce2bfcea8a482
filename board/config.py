"""Application configuration."""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict


DEFAULT_PROMPT_TEMPLATE = (
    "You are moderating an anonymous opinion board. "
    "Answer with a single character: 1 if the following opinion contains hate "
    "speech, harassment, threats, sexual content, personal data or spam, "
    "otherwise 0.\n\nOpinion: "
)


class ModerationSettings(BaseModel):
    """Content moderation configuration."""

    # Hard length limit, checked before anything else
    max_length: int = 280

    # Lowercased substrings that reject content without asking the classifier
    denylist: list[str] = [
        "fuck",
        "shit",
        "bitch",
        "bastard",
        "asshole",
        "cunt",
        "slut",
        "whore",
        "retard",
    ]

    # Instruction prefix sent to the classifier, content is appended verbatim
    prompt_template: str = DEFAULT_PROMPT_TEMPLATE

    # Classifier responses containing this token are rejections
    flag_token: str = "1"


class ClassifierSettings(BaseModel):
    """External text classifier configuration (OpenAI-compatible API)."""

    base_url: str = "https://api.openai.com/v1"

    # Optional - local model servers usually don't need one
    api_key: str | None = None

    model: str = "gpt-4o-mini"
    timeout_seconds: float = 10.0


class PointsSettings(BaseModel):
    """Points economy configuration."""

    # Balance given to a user on first interaction (total and remaining)
    default_balance: int = 50

    # Cost of a top-level opinion
    post_cost: int = 10

    # Cost of a reply (replies are free by default)
    reply_cost: int = 0

    # Credited after a reply is stored
    reply_reward: int = 5


class OpinionSettings(BaseModel):
    """Opinion store configuration."""

    # Deepest allowed reply level (0 = top-level only, 1 = replies to top-level)
    max_reply_depth: int = 1


class PersistenceSettings(BaseModel):
    """Snapshot persistence configuration.

    When snapshot_path is set, state is imported from it on startup and
    exported to it on shutdown.
    """

    snapshot_path: Path | None = None


class APISettings(BaseModel):
    """API configuration."""

    host: str = "localhost"
    port: int = 8000
    protocol: Literal["http", "https"] = "http"

    @computed_field
    @property
    def base_url(self) -> str:
        """Construct base URL from host.

        In development: http://localhost:8000
        In production: https://<host>
        """
        if self.host == "localhost":
            return f"{self.protocol}://{self.host}:{self.port}"
        else:
            return f"{self.protocol}://{self.host}"


class ObservabilitySettings(BaseModel):
    """Observability configuration for Logfire."""

    # Logfire API token (optional - if not set, logs only go to console)
    # Can be set via OBSERVABILITY__LOGFIRE_TOKEN env var
    logfire_token: str | None = None

    # Whether to send telemetry to Logfire cloud
    # If None, will auto-determine: sends if token is present, otherwise console-only
    send_to_logfire: bool | None = None


class Settings(BaseSettings):
    """Application settings.

    Set environment variables to override, nested groups use a double
    underscore:

        ENVIRONMENT=production
        HOST=opinions.example.org
        CLASSIFIER__BASE_URL=http://localhost:11434/v1
        CLASSIFIER__MODEL=llama3.1
        POINTS__POST_COST=5
        PERSISTENCE__SNAPSHOT_PATH=/var/lib/board/snapshot.json
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",  # Allows CLASSIFIER__BASE_URL syntax
    )

    environment: Literal["test", "development", "staging", "production"] = "development"
    debug: bool = False

    host: str = "localhost"
    port: int = 8000

    # Nested settings
    moderation: ModerationSettings = ModerationSettings()
    classifier: ClassifierSettings = ClassifierSettings()
    points: PointsSettings = PointsSettings()
    opinions: OpinionSettings = OpinionSettings()
    persistence: PersistenceSettings = PersistenceSettings()
    observability: ObservabilitySettings = ObservabilitySettings()

    @computed_field
    @property
    def api(self) -> APISettings:
        """API settings derived from host and environment."""
        protocol: Literal["http", "https"] = (
            "http" if self.environment in ("test", "development") else "https"
        )
        return APISettings(host=self.host, port=self.port, protocol=protocol)
