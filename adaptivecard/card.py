"""
AdaptiveCard root document.

The card owns its body elements, actions and Teams metadata. Turning it into
wire JSON is a two-step pipeline:

    card.flatten()    -> plain dict (every element recursively flattened,
                         empty optional keys left out)
    card.serialize()  -> JSON text via json.dumps

Usage:
    from adaptivecard import AdaptiveCard, TextBlock, open_url

    card = AdaptiveCard()
    card.add_body(TextBlock.create("Build finished").with_weight("Bolder"))
    card.add_action(open_url("Open pipeline", "https://ci.example.com/42"))
    payload = card.serialize(indent=2)
"""

import json
import logging
from typing import Iterable

from pydantic import BaseModel, ConfigDict, Field
from typing_extensions import List, Literal, Optional

from adaptivecard.actions import Action
from adaptivecard.constants import CARD_TYPE, SCHEMA_KEY
from adaptivecard.elements import Element, TextBlock, flatten_elements, is_element
from adaptivecard.mentions import MSTeamsInfo, format_mention_text, team_mention_entity
from adaptivecard.types import JsonDict
from adaptivecard.config.settings import settings

logger = logging.getLogger(__name__)


class AdaptiveCard(BaseModel):
    """Root of an Adaptive Card document."""

    model_config = ConfigDict(populate_by_name=True)

    type: Literal["AdaptiveCard"] = CARD_TYPE
    version: str = Field(default_factory=lambda: settings.card_version)
    body: List[Element] = Field(default_factory=list)
    schema_url: str = Field(
        default_factory=lambda: settings.card_schema_url,
        alias=SCHEMA_KEY,
    )
    actions: List[Action] = Field(default_factory=list)
    msteams: Optional[MSTeamsInfo] = None

    # -------------------------------------------------------------------------
    # Mutation
    # -------------------------------------------------------------------------

    def add_body(self, element: Element) -> "AdaptiveCard":
        if not is_element(element):
            raise TypeError(
                f"Card body only accepts card elements, got {type(element).__name__}"
            )
        self.body.append(element)
        return self

    def add_action(self, action: Action) -> "AdaptiveCard":
        if not isinstance(action, Action):
            raise TypeError(f"Expected an Action, got {type(action).__name__}")
        self.actions.append(action)
        return self

    def add_mentions_map(self, text_prefix: str, mentions: Iterable[str]) -> "AdaptiveCard":
        """
        Add a text block mentioning every name, plus the team mention entity.

        The text is the prefix followed by one ``<at>name</at>`` placeholder per
        name. Only a single team-wide entity is recorded, whatever the number
        of names.

        Args:
            text_prefix: Leading text of the block
            mentions: Display names to wrap in mention placeholders

        Returns:
            The card, for chaining

        Raises:
            TypeError: when mentions is a plain string
        """
        if isinstance(mentions, str):
            raise TypeError("mentions must be a sequence of names, not a single string")
        names = list(mentions)
        text = format_mention_text(text_prefix, names)
        self.add_body(TextBlock.create(text))

        if self.msteams is None:
            self.msteams = MSTeamsInfo()
        self.msteams.entities.append(team_mention_entity())

        logger.debug(
            f"Added mention text with {len(names)} placeholder(s); "
            f"{len(self.msteams.entities)} entity(ies) on card"
        )
        return self

    # -------------------------------------------------------------------------
    # Serialization
    # -------------------------------------------------------------------------

    def flatten(self) -> JsonDict:
        """Build the wire-shaped dict for this card."""
        raw: JsonDict = {
            "type": self.type,
            "version": self.version,
            "body": flatten_elements(self.body),
            SCHEMA_KEY: self.schema_url,
        }
        if self.actions:
            raw["actions"] = flatten_elements(self.actions)
        if self.msteams is not None:
            raw["msteams"] = self.msteams.flatten()
        return raw

    def serialize(self, indent: Optional[int] = None) -> str:
        """
        Encode the card as JSON text.

        Args:
            indent: Passed through to json.dumps for pretty output

        Returns:
            The JSON document

        Raises:
            TypeError, ValueError: when a value in the tree cannot be encoded
        """
        raw = self.flatten()
        try:
            encoded = json.dumps(
                raw,
                indent=indent,
                ensure_ascii=settings.json_ensure_ascii,
                allow_nan=False,
            )
        except (TypeError, ValueError) as e:
            logger.error(f"❌ Failed to encode card to JSON: {e}")
            raise

        logger.debug(
            f"Serialized card: {len(self.body)} body element(s), "
            f"{len(self.actions)} action(s), {len(encoded)} chars"
        )
        return encoded


def new_card(version: Optional[str] = None, schema_url: Optional[str] = None) -> AdaptiveCard:
    """Create an empty card, using configured defaults for unset root fields."""
    if version is None:
        version = settings.card_version
    if schema_url is None:
        schema_url = settings.card_schema_url
    return AdaptiveCard(version=version, schema_url=schema_url)


__all__ = ["AdaptiveCard", "new_card"]
