"""
Todo Widget Resource

The HTML document a chat client loads in an iframe to render tool results.
It is read once at startup and served unchanged for every request.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Union
import logging

from todo_app.mcp.base_tool import OUTPUT_TEMPLATE_URI

logger = logging.getLogger(__name__)

WIDGET_NAME = "todo-widget"
WIDGET_MIME_TYPE = "text/html+skybridge"


class WidgetLoadError(RuntimeError):
    """Raised when the widget document cannot be read at startup."""


@dataclass(frozen=True)
class WidgetResource:
    """Widget document plus the descriptor fields served with it."""
    html: str
    name: str = WIDGET_NAME
    uri: str = OUTPUT_TEMPLATE_URI
    mime_type: str = WIDGET_MIME_TYPE
    meta: Dict[str, Any] = field(default_factory=lambda: {"openai/widgetPrefersBorder": True})


def load_widget(path: Union[str, Path]) -> WidgetResource:
    """
    Read the widget HTML from disk

    Args:
        path: Location of the widget document

    Returns:
        Loaded widget resource

    Raises:
        WidgetLoadError: If the file is missing or unreadable
    """
    path = Path(path)
    try:
        html = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise WidgetLoadError(f"Cannot load widget document {path}: {e}") from e

    logger.info(f"Loaded widget document from {path} ({len(html)} chars)")
    return WidgetResource(html=html)
