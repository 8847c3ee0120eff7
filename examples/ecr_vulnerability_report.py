#!/usr/bin/env python3
"""
ECR Vulnerability Report Card Example

Builds the card a scan-notification job posts to a Teams channel: a title,
a fact set with the scan summary, a table of findings, a team mention and a
link to the registry console. The JSON is printed to stdout.
"""

import logging

from adaptivecard import (
    AdaptiveCard,
    Container,
    Fact,
    FactSet,
    Table,
    TableCell,
    TextBlock,
    open_url,
)
from adaptivecard.config.enhanced_logging import setup_logger
from adaptivecard.config.settings import settings

logger = logging.getLogger(__name__)


def build_report_card(findings=None) -> AdaptiveCard:
    """
    Build the vulnerability report card.

    Args:
        findings: Optional list of (cve, severity, package) tuples shown as a table

    Returns:
        AdaptiveCard ready to serialize
    """
    card = AdaptiveCard()

    card.add_body(TextBlock.create("🚨 ECR Vulnerability Report").with_weight("Bolder").with_size("Large"))

    facts = FactSet.create(
        Fact(title="Repo", value="notifications-lambda"),
        Fact(title="Image", value="1.0.0"),
        Fact(title="Critical", value="1"),
        Fact(title="High", value="2"),
    )
    card.add_body(Container.create(facts))

    if findings:
        table = Table.create().add_column("auto").add_column("auto").add_column("stretch")
        table.add_row(
            TableCell.create(TextBlock.create("CVE").with_weight("Bolder")),
            TableCell.create(TextBlock.create("Severity").with_weight("Bolder")),
            TableCell.create(TextBlock.create("Package").with_weight("Bolder")),
        )
        for cve, severity, package in findings:
            table.add_row(
                TableCell.create(TextBlock.create(cve)),
                TableCell.create(TextBlock.create(severity)),
                TableCell.create(TextBlock.create(package)),
            )
        card.add_body(table)

    card.add_mentions_map("Please review:", ["Team"])
    card.add_action(open_url("View in AWS Console", "https://console.aws.amazon.com/ecr"))

    logger.info(f"Built report card with {len(card.body)} body element(s)")
    return card


if __name__ == "__main__":
    setup_logger(settings.log_level)
    report = build_report_card(
        findings=[
            ("CVE-2024-3094", "CRITICAL", "xz-utils"),
            ("CVE-2023-4863", "HIGH", "libwebp"),
            ("CVE-2023-44487", "HIGH", "nghttp2"),
        ]
    )
    print(report.serialize(indent=2))
