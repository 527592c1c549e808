"""
HTML Exporter
=============

Renders a document's elements as a standalone HTML page for publishing.
One-way: the markup is not meant to be parsed back into a document.
"""

import logging
from typing import Callable, Dict, Iterable

from ..models.element_models import Element, ElementKind

logger = logging.getLogger(__name__)


PAGE_CSS = """
    * { box-sizing: border-box; margin: 0; padding: 0; }
    body { font-family: 'DM Sans', sans-serif; background: #060a10; color: #e8edf5; }
    .page { max-width: 800px; margin: 0 auto; padding: 40px 24px; }
  """

FONTS_URL = "https://fonts.googleapis.com/css2?family=DM+Sans&family=Syne:wght@700&display=swap"


class HtmlExporter:
    """Generates publishable markup from page elements."""

    def __init__(self):
        self._renderers: Dict[ElementKind, Callable[[dict], str]] = {
            ElementKind.HEADING: self._render_heading,
            ElementKind.PARAGRAPH: self._render_paragraph,
            ElementKind.BUTTON: self._render_button,
            ElementKind.IMAGE: self._render_image,
            ElementKind.DIVIDER: self._render_divider,
            ElementKind.CARD: self._render_card,
            ElementKind.SECTION: self._render_section,
            ElementKind.BADGE: self._render_badge,
        }

    def render_element(self, element: Element) -> str:
        """Markup for one element from its current properties."""
        renderer = self._renderers.get(element.kind)
        if renderer is None:
            return ""
        return renderer(element.properties)

    def render_body(self, elements: Iterable[Element]) -> str:
        return "\n    ".join(self.render_element(element) for element in elements)

    def export(self, elements: Iterable[Element], title: str = "Exported Page") -> str:
        """
        Complete HTML document for the given elements.

        Args:
            elements: Elements in render order
            title: Contents of the <title> tag

        Returns:
            Standalone HTML string with minimal embedded styling
        """
        elements = list(elements)
        logger.info(f"[EXPORT] Rendering {len(elements)} elements to HTML")
        body = self.render_body(elements)
        return f"""<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8" />
  <meta name="viewport" content="width=device-width, initial-scale=1.0" />
  <title>{title}</title>
  <link href="{FONTS_URL}" rel="stylesheet">
  <style>{PAGE_CSS}</style>
</head>
<body>
  <div class="page">
    {body}
  </div>
</body>
</html>"""

    def _render_heading(self, p: dict) -> str:
        tag = p.get("level") or "h2"
        return (
            f'<{tag} style="font-size:{p.get("fontSize")}px;color:{p.get("color")};'
            f'font-weight:{p.get("fontWeight")};text-align:{p.get("textAlign")};'
            f'margin-bottom:16px;">{p.get("text", "")}</{tag}>'
        )

    def _render_paragraph(self, p: dict) -> str:
        return (
            f'<p style="font-size:{p.get("fontSize")}px;color:{p.get("color")};'
            f'text-align:{p.get("textAlign")};line-height:{p.get("lineHeight")};'
            f'margin-bottom:16px;">{p.get("text", "")}</p>'
        )

    def _render_button(self, p: dict) -> str:
        return (
            f'<a href="{p.get("href", "#")}" style="display:inline-block;background:{p.get("bg")};'
            f'color:{p.get("color")};font-size:{p.get("fontSize")}px;'
            f'border-radius:{p.get("borderRadius")}px;padding:{p.get("padding")};'
            f'text-decoration:none;margin-bottom:16px;">{p.get("text", "")}</a>'
        )

    def _render_image(self, p: dict) -> str:
        return (
            f'<img src="{p.get("src", "")}" alt="{p.get("alt", "")}" style="width:{p.get("width")};'
            f'height:{p.get("height")}px;border-radius:{p.get("borderRadius")}px;'
            f'object-fit:{p.get("objectFit")};display:block;margin-bottom:16px;" />'
        )

    def _render_divider(self, p: dict) -> str:
        return (
            f'<hr style="border-color:{p.get("color")};border-top-width:{p.get("thickness")}px;'
            f'margin:{p.get("margin")}px 0;" />'
        )

    def _render_card(self, p: dict) -> str:
        return (
            f'<div style="background:{p.get("bg")};border:1px solid {p.get("borderColor")};'
            f'border-radius:{p.get("borderRadius")}px;padding:{p.get("padding")}px;margin-bottom:16px;">'
            f'<h3 style="color:{p.get("titleColor")};margin-bottom:10px;">{p.get("title", "")}</h3>'
            f'<p style="color:{p.get("bodyColor")};line-height:1.6;font-size:14px;">{p.get("body", "")}</p>'
            f'</div>'
        )

    def _render_section(self, p: dict) -> str:
        # Children are never populated, only the container is published
        return (
            f'<div style="background:{p.get("bg")};padding:{p.get("padding")}px;'
            f'border-radius:{p.get("borderRadius")}px;margin-bottom:16px;"></div>'
        )

    def _render_badge(self, p: dict) -> str:
        return (
            f'<span style="background:{p.get("bg")};color:{p.get("color")};'
            f'border:1px solid {p.get("borderColor")};border-radius:{p.get("borderRadius")}px;'
            f'font-size:{p.get("fontSize")}px;padding:4px 12px;display:inline-block;'
            f'margin-bottom:8px;">{p.get("text", "")}</span>'
        )
