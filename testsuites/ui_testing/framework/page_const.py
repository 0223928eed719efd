"""
================================================================================
Page Constants
================================================================================

HTML element, attribute and locator-strategy names used when generating page
objects from captured forms.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from enum import Enum
from typing import Optional, Type, TypeVar

from selenium.webdriver.common.by import By


_E = TypeVar("_E", bound="_NamedEnum")


class _NamedEnum(Enum):
    """Enum whose members resolve from their names, ignoring case."""

    @classmethod
    def lookup(cls: Type[_E], name: Optional[str]) -> Optional[_E]:
        """
        Resolve a member by name.

        Returns:
            The matching member, or None when nothing matches
        """
        if not name:
            return None
        wanted = name.lower()
        for member in cls:
            if member.name.lower() == wanted:
                return member
        return None


class Item(_NamedEnum):
    """Form element kinds."""
    text = "text"
    radio = "radio"
    checkbox = "checkbox"
    button = "button"
    select = "select"
    textarea = "textarea"
    anchor = "anchor"


class ItemAttr(_NamedEnum):
    """Element attributes read when generating page objects."""
    type = "type"
    id = "id"
    name = "name"
    value = "value"


class FindBy(_NamedEnum):
    """Locator strategies for generated element declarations."""
    id = "id"
    name = "name"
    css = "css"
    linkText = "linkText"
    partialLinkText = "partialLinkText"
    xpath = "xpath"

    @property
    def selenium_by(self) -> str:
        """Matching ``selenium.webdriver.common.by.By`` strategy."""
        return _SELENIUM_BY[self]


_SELENIUM_BY = {
    FindBy.id: By.ID,
    FindBy.name: By.NAME,
    FindBy.css: By.CSS_SELECTOR,
    FindBy.linkText: By.LINK_TEXT,
    FindBy.partialLinkText: By.PARTIAL_LINK_TEXT,
    FindBy.xpath: By.XPATH,
}


__all__ = [
    "Item",
    "ItemAttr",
    "FindBy",
]
