"""
Reading action markup back into structured buttons.

The action fragment of a session row is raw HTML. For terminal output and
for checks that should not depend on the exact byte layout, we parse it
with BeautifulSoup into ActionButton records.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from bs4 import BeautifulSoup


@dataclass(frozen=True)
class ActionButton:
    label: str
    href: str
    element_id: Optional[str]
    tooltip: str
    enabled: bool


def parse_actions(markup: str) -> List[ActionButton]:
    """
    Extract every <a> button from an action fragment, in document order.
    """
    soup = BeautifulSoup(markup, "html.parser")

    buttons: List[ActionButton] = []
    for a in soup.find_all("a"):
        classes = a.get("class") or []
        buttons.append(
            ActionButton(
                label=a.get_text(strip=True),
                href=a.get("href", ""),
                element_id=a.get("id"),
                tooltip=a.get("title", ""),
                enabled="disabled" not in classes,
            )
        )
    return buttons


def describe_actions(markup: str) -> str:
    """
    One-line summary of the buttons, disabled ones in parentheses.
    """
    parts = []
    for button in parse_actions(markup):
        parts.append(button.label if button.enabled else f"({button.label})")
    return ", ".join(parts)
