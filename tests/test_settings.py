"""
Tests for the pydantic-settings configuration.
"""

from adaptivecard import AdaptiveCard, new_card
from adaptivecard.config.settings import Settings, settings


class TestSettings:
    def test_defaults(self, monkeypatch):
        for name in ("CARD_VERSION", "CARD_SCHEMA_URL", "TEAM_MENTION_ID", "JSON_ENSURE_ASCII"):
            monkeypatch.delenv(name, raising=False)
        config = Settings(_env_file=None)

        assert config.card_version == "1.6"
        assert config.card_schema_url == "http://adaptivecards.io/schemas/adaptive-card.json"
        assert config.team_mention_id == "19:general@thread.tacv2"
        assert config.team_mention_name == "Team"
        assert config.team_mention_text == "@Team"
        assert config.json_ensure_ascii is False

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("CARD_VERSION", "1.5")
        monkeypatch.setenv("team_mention_name", "Platform")
        monkeypatch.setenv("JSON_ENSURE_ASCII", "true")
        config = Settings(_env_file=None)

        assert config.card_version == "1.5"
        assert config.team_mention_name == "Platform"
        assert config.json_ensure_ascii is True

    def test_dotenv_file(self, tmp_path, monkeypatch):
        monkeypatch.delenv("CARD_VERSION", raising=False)
        env_file = tmp_path / ".env"
        env_file.write_text("CARD_VERSION=1.4\nUNRELATED_KEY=ignored\n", encoding="utf-8")

        config = Settings(_env_file=str(env_file))

        assert config.card_version == "1.4"

    def test_cards_pick_up_runtime_settings(self, monkeypatch):
        monkeypatch.setattr(settings, "card_version", "1.2")
        monkeypatch.setattr(settings, "card_schema_url", "https://example.com/schema.json")

        assert AdaptiveCard().version == "1.2"
        assert new_card().schema_url == "https://example.com/schema.json"
        assert new_card(version="1.6").version == "1.6"
