"""
Card-level actions (buttons rendered below the card body).
"""

from pydantic import BaseModel, Field
from typing_extensions import Optional

from adaptivecard.constants import ACTION_OPEN_URL
from adaptivecard.types import JsonDict


class Action(BaseModel):
    """An action button attached to the card root."""

    type: str = Field(..., description="Action kind, e.g. Action.OpenUrl")
    title: str = Field(..., description="Button label")
    url: Optional[str] = Field(None, description="Target URL for Action.OpenUrl")

    def flatten(self) -> JsonDict:
        raw: JsonDict = {"type": self.type, "title": self.title}
        if self.url:
            raw["url"] = self.url
        return raw


def open_url(title: str, url: str) -> Action:
    """Build an Action.OpenUrl button."""
    return Action(type=ACTION_OPEN_URL, title=title, url=url)


__all__ = ["Action", "open_url"]
