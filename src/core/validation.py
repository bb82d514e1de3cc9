"""
Widget attribute validation.
"""

from collections.abc import Mapping

from core.config import WIDGET_ATTRIBUTES
from core.errors import MissingRequiredAttribute

REQUIRED_ATTRIBUTES = ("title", "start")


def clean_attribute(value: str | None) -> str:
    """Trim an attribute value, treating None as empty."""
    if value is None:
        return ""
    return str(value).strip()


def require_attributes(title: str | None, start: str | None) -> tuple[str, str]:
    """
    Check that a widget has both title and start.

    Returns:
        Tuple of (title, start), start trimmed

    Raises:
        MissingRequiredAttribute: for the first missing attribute
    """
    if not title or not title.strip():
        raise MissingRequiredAttribute("title")
    if not start or not start.strip():
        raise MissingRequiredAttribute("start")
    return title, start.strip()


def extract_widget_attributes(attrs: Mapping[str, str], prefix: str = "") -> dict[str, str]:
    """
    Pick the known widget attributes out of an attribute mapping.

    With prefix="data-", reads HTML data attributes ('data-title') and
    returns them under their bare names ('title'). Unknown attributes are
    ignored.
    """
    extracted = {}
    for name in WIDGET_ATTRIBUTES:
        value = attrs.get(f"{prefix}{name}")
        if value is not None:
            extracted[name] = value
    return extracted
