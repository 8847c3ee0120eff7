"""
Microsoft Teams mention metadata.

Teams renders ``<at>Name</at>`` placeholders in card text as live mentions
when the card carries a matching entity under ``msteams.entities``.
"""

from typing import Iterable

from pydantic import BaseModel, Field
from typing_extensions import List, Literal, Optional

from adaptivecard.constants import MENTION_CLOSE, MENTION_OPEN, MENTION_TYPE
from adaptivecard.elements import flatten_elements
from adaptivecard.types import JsonDict
from adaptivecard.config.settings import settings


class Mention(BaseModel):
    """The user, channel or team being mentioned."""

    id: str = Field(..., description="Teams identifier (user AAD id or thread id)")
    name: str = Field(..., description="Display name")

    def flatten(self) -> JsonDict:
        return {"id": self.id, "name": self.name}


class MentionEntity(BaseModel):
    """Binds an <at> placeholder in card text to a Mention."""

    type: Literal["mention"] = MENTION_TYPE
    text: str = Field(..., description="Placeholder text as it appears in the card, e.g. '@Team'")
    mentioned: Mention

    def flatten(self) -> JsonDict:
        return {
            "type": self.type,
            "text": self.text,
            "mentioned": self.mentioned.flatten(),
        }


class MSTeamsInfo(BaseModel):
    """Teams-specific card metadata (the 'msteams' key)."""

    entities: List[MentionEntity] = Field(default_factory=list)

    def flatten(self) -> JsonDict:
        return {"entities": flatten_elements(self.entities)}


def format_mention(name: str) -> str:
    """Wrap a display name in Teams mention markup."""
    return f"{MENTION_OPEN}{name}{MENTION_CLOSE}"


def format_mention_text(text_prefix: str, names: Iterable[str]) -> str:
    """
    Append a mention placeholder for every name to the prefix.

    Each placeholder is preceded by a single space:
        format_mention_text("Hello", ["Alice", "Bob"])
        -> "Hello <at>Alice</at> <at>Bob</at>"
    """
    text = text_prefix
    for name in names:
        text += f" {format_mention(name)}"
    return text


def team_mention_entity(
    mention_id: Optional[str] = None,
    name: Optional[str] = None,
    text: Optional[str] = None,
) -> MentionEntity:
    """Build the team-wide mention entity, defaulting to the configured team."""
    return MentionEntity(
        text=text or settings.team_mention_text,
        mentioned=Mention(
            id=mention_id or settings.team_mention_id,
            name=name or settings.team_mention_name,
        ),
    )


__all__ = [
    "Mention",
    "MentionEntity",
    "MSTeamsInfo",
    "format_mention",
    "format_mention_text",
    "team_mention_entity",
]
