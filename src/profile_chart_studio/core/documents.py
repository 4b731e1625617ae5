from __future__ import annotations

import html
import json
from dataclasses import dataclass
from typing import Any, Optional

from liquid import Environment
from liquid.exceptions import LiquidError

from profile_chart_studio.core.builtins import BuiltinRegistry
from profile_chart_studio.core.state import DocumentState, select_sample, select_template

# Undefined variables render as empty text; HTML in data is passed through.
_ENGINE = Environment()

PRINT_STYLE = """
      @page { size: A4 portrait; margin: 12mm; }
      @media print {
        body      { zoom: 0.9; }
        img,svg   { max-width: 100%; height: auto; }
        table     { width: 100%; }
        .pagebreak{ page-break-before: always; }
      }
      @media print { body { margin: 20px; } }
"""


@dataclass(frozen=True)
class PreviewResult:
    html: str
    error: Optional[str] = None


def _template_context(data: Any) -> dict[str, Any]:
    if isinstance(data, dict):
        return data
    return {"data": data}


def render_preview(template_text: str, data_text: str) -> PreviewResult:
    """Evaluate ``template_text`` against the JSON in ``data_text``.

    Blank data counts as ``{}``. Any JSON or template failure yields empty
    output plus the error message.
    """
    try:
        data = json.loads(data_text or "{}")
        template = _ENGINE.from_string(template_text or "")
        return PreviewResult(html=template.render(_template_context(data)))
    except json.JSONDecodeError as exc:
        return PreviewResult(html="", error=f"Invalid JSON: {exc}")
    except LiquidError as exc:
        return PreviewResult(html="", error=str(exc) or type(exc).__name__)
    except Exception as exc:
        return PreviewResult(html="", error=f"{type(exc).__name__}: {exc}")


def build_print_document(title: str, body_html: str) -> str:
    return (
        "<!DOCTYPE html><html><head>"
        '<meta charset="utf-8">'
        f"<title>{html.escape(str(title or 'Document'))}</title>"
        f"<style>{PRINT_STYLE}</style>"
        "</head><body>"
        f'<div class="print-wrapper">{body_html}</div>'
        "</body></html>"
    )


def initial_document_state(templates: BuiltinRegistry, samples: BuiltinRegistry) -> DocumentState:
    state = DocumentState()
    if templates.default_name():
        select_template(state, templates.default_name(), templates.entries)
    if samples.default_name():
        select_sample(state, samples.default_name(), samples.entries)
    else:
        state.data_text = "{}"
    return state


def refresh_preview(state: DocumentState) -> PreviewResult:
    """Re-render the preview and record the outcome on ``state``."""
    result = render_preview(state.template_text, state.data_text)
    state.error = result.error
    return result
