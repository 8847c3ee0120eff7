"""Card library configuration using Pydantic Settings."""

import logging

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """Defaults applied when building Adaptive Cards"""

    # Card root defaults
    card_version: str = Field(
        default="1.6",
        description="Adaptive Card schema version written to the 'version' field",
    )
    card_schema_url: str = Field(
        default="http://adaptivecards.io/schemas/adaptive-card.json",
        description="Schema URL written to the '$schema' field",
    )

    # Teams mention entity appended by add_mentions_map
    team_mention_id: str = Field(
        default="19:general@thread.tacv2",
        description="Teams identifier of the mentioned channel/team",
    )
    team_mention_name: str = "Team"
    team_mention_text: str = "@Team"

    # Serialization
    json_ensure_ascii: bool = Field(
        default=False,
        description="Escape non-ASCII characters when encoding cards to JSON",
    )

    # Logging
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        logger.debug(
            f"🔧 SETTINGS - card_version='{self.card_version}', "
            f"card_schema_url='{self.card_schema_url}', "
            f"team_mention_id='{self.team_mention_id}'"
        )


# Global settings instance
settings = Settings()
