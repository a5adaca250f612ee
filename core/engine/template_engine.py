"""Template Engine: formats operation results into readable text.

Each vertical registers a renderer that turns the dicts its operations
return into lines for a console or a chat reply. The engine dispatches on
the vertical name; a generic fallback handles anything unregistered.
"""

from typing import Any, Callable, Dict, Optional


# ---------------------------------------------------------------------------
# Formatting helpers
# ---------------------------------------------------------------------------

def fmt_money(value: float | int | None, currency: str = "$") -> str:
    """Format a number as currency."""
    if value is None:
        return "N/A"
    return f"{currency}{value:,.2f}"


def fmt_int(value: int | None) -> str:
    """Format an integer with comma separators."""
    if value is None:
        return "N/A"
    return f"{value:,}"


# ---------------------------------------------------------------------------
# Generic fallback renderer
# ---------------------------------------------------------------------------

def render_generic(result_name: str, result: Dict) -> str:
    """Fallback renderer: the error detail, or one ``key=value`` line."""
    if "error" in result:
        return f"Error - {result.get('detail', result['error'])}"
    fields = ", ".join(f"{k}={v}" for k, v in result.items() if not k.startswith("_"))
    return f"{result_name}: {fields}"


# ---------------------------------------------------------------------------
# Renderer type and registry
# ---------------------------------------------------------------------------

VerticalRenderer = Callable[[str, Dict], str]

_VERTICAL_RENDERERS: Dict[str, VerticalRenderer] = {}


def register_renderer(vertical: str, renderer: VerticalRenderer) -> None:
    """Register a vertical-specific renderer.

    Example::

        def render_bookstore(result_name, result):
            if "receipt" in result:
                ...
            return render_generic(result_name, result)

        register_renderer("bookstore", render_bookstore)
    """
    _VERTICAL_RENDERERS[vertical] = renderer


# ---------------------------------------------------------------------------
# Engine
# ---------------------------------------------------------------------------

class TemplateEngine:
    """Formats operation results into text.

    Usage::

        engine = TemplateEngine()
        text = engine.render(
            result_name="purchase",
            result={"receipt": {...}},
            vertical="bookstore",
        )
    """

    @staticmethod
    def render(
        result_name: str,
        result: Dict[str, Any],
        vertical: str,
        prefix: Optional[str] = None,
    ) -> str:
        """Render a result dict for display.

        Args:
            result_name: Name of the operation that produced the result.
            result: Dict returned by the operation.
            vertical: The vertical whose renderer should be used.
            prefix: Prepended as ``"{prefix}: "`` to every non-blank line.
        """
        renderer = _VERTICAL_RENDERERS.get(vertical)
        if renderer is None:
            text = render_generic(result_name, result)
        else:
            text = renderer(result_name, result)

        if not prefix:
            return text
        return "\n".join(
            f"{prefix}: {line}" if line.strip() else line for line in text.split("\n")
        )

    @staticmethod
    def list_verticals() -> list[str]:
        """Return list of verticals with registered renderers."""
        return list(_VERTICAL_RENDERERS.keys())
