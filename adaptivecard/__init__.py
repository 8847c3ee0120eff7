"""
Adaptive Card builder for Microsoft Teams.

This package provides:
- Typed element tree: TextBlock, Container, FactSet, Table (+ rows/cells)
- AdaptiveCard root with actions and Teams mention metadata
- Recursive flattening to the Adaptive Card JSON wire shape

Usage:
    from adaptivecard import AdaptiveCard, Container, Fact, FactSet, TextBlock

    card = AdaptiveCard()
    card.add_body(TextBlock.create("ECR Vulnerability Report"))
    card.add_body(Container.create(FactSet.create(Fact(title="Critical", value="1"))))
    print(card.serialize(indent=2))
"""

from adaptivecard.actions import Action, open_url
from adaptivecard.card import AdaptiveCard, new_card
from adaptivecard.elements import (
    CardElement,
    Container,
    Element,
    Fact,
    FactSet,
    Table,
    TableCell,
    TableColumn,
    TableRow,
    TextBlock,
    flatten_elements,
    is_element,
)
from adaptivecard.mentions import (
    Mention,
    MentionEntity,
    MSTeamsInfo,
    format_mention,
    format_mention_text,
    team_mention_entity,
)

__all__ = [
    # Root
    "AdaptiveCard",
    "new_card",
    # Elements
    "CardElement",
    "Element",
    "TextBlock",
    "Container",
    "Fact",
    "FactSet",
    "Table",
    "TableColumn",
    "TableRow",
    "TableCell",
    "is_element",
    "flatten_elements",
    # Actions
    "Action",
    "open_url",
    # Mentions
    "Mention",
    "MentionEntity",
    "MSTeamsInfo",
    "format_mention",
    "format_mention_text",
    "team_mention_entity",
]
