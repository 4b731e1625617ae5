from __future__ import annotations

import argparse
import math
from pathlib import Path
from typing import Any, Optional

import dash_bootstrap_components as dbc
import plotly.graph_objects as go
from dash import Dash, Input, Output, State, dash_table, dcc, html, no_update
from dash.exceptions import PreventUpdate

from profile_chart_studio.core.builtins import (
    BuiltinRegistry,
    load_builtin_samples,
    load_builtin_templates,
)
from profile_chart_studio.core.documents import (
    build_print_document,
    initial_document_state,
    refresh_preview,
)
from profile_chart_studio.core.export import (
    PDF_FILENAME,
    PNG_FILENAME,
    render_chart_pdf,
    render_chart_png,
)
from profile_chart_studio.core.persistence import STORAGE_KEY, SlotStorage
from profile_chart_studio.core.plotting import prepare_profile_plot
from profile_chart_studio.core.profile import CHART_MARGIN, drag_target_from_event, handle_drag_event
from profile_chart_studio.core.rows import (
    add_row,
    apply_table_ops,
    diff_table_edit,
    table_records,
)
from profile_chart_studio.core.state import (
    ChartState,
    DocumentState,
    DragTarget,
    set_show_upper,
    set_total_distance,
)
from profile_chart_studio.data.loaders import (
    CSV_FILENAME,
    decode_upload_contents,
    samples_from_csv_text,
    samples_to_csv_text,
)
from profile_chart_studio.plotting.helpers import DEPTH_TICKFORMAT, DISTANCE_TICKFORMAT
from profile_chart_studio.utils.log import log_event, log_exception
from profile_chart_studio.version import APP_TITLE, BUILD_VERSION

ROUTES = {
    "/": "chart",
    "/documents": "documents",
}

SECTION_LABELS = {
    "chart": "Chart",
    "documents": "Documents",
}

CHART_HEIGHT_PX = 400
SHOW_UPPER_VALUE = "show"

GRAPH_CONFIG: dict[str, Any] = {
    "displaylogo": False,
    "scrollZoom": False,
    "doubleClick": False,
    "editable": False,
    "modeBarButtonsToRemove": ["zoom2d", "pan2d", "select2d", "lasso2d", "autoScale2d"],
}

PANEL_HELP_TEXT: dict[str, str] = {
    "chart_controls": (
        "Total distance stretches or condenses the x-axis so the last row lands on it.\n"
        "Leave it blank (or zero) to plot the distances as entered.\n"
        "Reset demo restores the built-in rows and clears the saved state."
    ),
    "chart_table": (
        "Edit cells directly; text that is not a number is kept as an empty point.\n"
        "Use x to delete a row, Add row to append one after the last distance.\n"
        "A CSV with distance, upper and lower columns replaces the table."
    ),
    "chart_output": (
        "Press on a point and drag vertically to change its value.\n"
        "Export PNG/PDF downloads the current chart.\n"
        "Changes are saved in this browser automatically."
    ),
    "document_inputs": (
        "Choosing a template or sample copies it into the editor below.\n"
        "Edits are yours; switching the selection overwrites them.\n"
        "Data must be valid JSON."
    ),
    "document_preview": (
        "Preview re-renders on every edit.\n"
        "Print / Save PDF opens the browser print dialog for the rendered document.\n"
        'Use <div class="pagebreak"></div> to force a new page.'
    ),
}

PRINT_CLIENTSIDE = """
function(n_clicks, doc) {
    if (!n_clicks || !doc || !doc.html) {
        return window.dash_clientside.no_update;
    }
    var win = window.open("", "_blank", "width=800,height=600");
    if (!win) {
        return window.dash_clientside.no_update;
    }
    var printed = false;
    function printAndClose() {
        if (printed) { return; }
        printed = true;
        win.focus();
        win.print();
        win.close();
    }
    win.document.open();
    win.document.write(doc.html);
    win.document.close();
    if (win.document.readyState === "complete") {
        printAndClose();
    } else {
        win.addEventListener("load", printAndClose, {once: true});
    }
    return "";
}
"""


def _dash_assets_dir() -> str:
    return str(Path(__file__).resolve().parents[1] / "assets" / "dash")


def _status_alert(message: str, kind: str = "info"):
    return html.Div(message, className=f"pcs-status {kind}")


def _help_icon(help_text: str) -> html.Span:
    lines = [ln.strip() for ln in str(help_text or "").splitlines() if ln.strip()]
    tooltip_lines = [html.Div(ln) for ln in lines] if lines else [html.Div("No additional help.")]
    return html.Span(
        className="pcs-help-wrap",
        children=[
            html.Span("?", className="pcs-help-icon", tabIndex=0, role="button", **{"aria-label": "Panel help"}),
            html.Span(className="pcs-help-tooltip", children=tooltip_lines),
        ],
    )


def _card_header_with_help(title: str, help_text: str) -> html.Div:
    return html.Div(
        className="pcs-card-header",
        children=[html.H3(title, className="pcs-card-title"), _help_icon(help_text)],
    )


def _error_card(title: str, exc: Exception) -> html.Div:
    return html.Div(
        className="pcs-card",
        children=[
            html.Div(
                className="pcs-card-header",
                children=[html.H3(title, className="pcs-card-title"), html.Span("Error", className="pcs-badge")],
            ),
            html.P(f"{type(exc).__name__}: {exc}", className="pcs-muted"),
            html.P(
                "This view failed to render, but navigation and the other view remain available.",
                className="pcs-muted",
            ),
        ],
    )


def _not_found_card(pathname: str) -> html.Div:
    return html.Div(
        className="pcs-card",
        children=[
            html.Div(
                className="pcs-card-header",
                children=[html.H3("Page not found", className="pcs-card-title"), html.Span("404", className="pcs-badge")],
            ),
            html.P(f"Nothing lives at {pathname}.", className="pcs-muted"),
            html.Div(
                className="pcs-button-row",
                children=[dcc.Link("Open the chart", href="/"), dcc.Link("Open documents", href="/documents")],
            ),
        ],
    )


# ---------------------------------------------------------------------------
# Chart view
# ---------------------------------------------------------------------------


def _drag_to_data(target: Optional[DragTarget]) -> Optional[dict[str, Any]]:
    if target is None:
        return None
    return {"curve": target.curve, "index": target.index}


def _slot(slot_data: Optional[str]) -> SlotStorage:
    """Wrap the browser slot's JSON text (None when unset) for load/save/clear."""
    return SlotStorage({} if slot_data is None else {STORAGE_KEY: slot_data})


def _state_from_slot(slot_data: Optional[str], drag_data: Any = None) -> ChartState:
    state = _slot(slot_data).load().state
    state.drag = drag_target_from_event(drag_data)
    return state


def build_profile_figure(state: ChartState) -> go.Figure:
    data = prepare_profile_plot(state)
    fig = go.Figure()
    for trace in data.traces:
        fig.add_scatter(
            x=trace.x,
            y=trace.y,
            mode="lines+markers",
            name=trace.label,
            meta=trace.curve,
            line=dict(color=trace.color, width=2, shape="spline", smoothing=0.6),
            marker=dict(size=9, color=trace.color, line=dict(color="white", width=1)),
            hovertemplate="%{y:.2f}<extra>" + trace.label + "</extra>",
        )
    fig.update_layout(
        template="plotly_white",
        height=CHART_HEIGHT_PX,
        margin=dict(l=CHART_MARGIN["l"], r=CHART_MARGIN["r"], t=CHART_MARGIN["t"], b=CHART_MARGIN["b"], pad=0),
        dragmode=False,
        hovermode="closest",
        uirevision="profile",
        legend=dict(orientation="h", x=1.0, xanchor="right", y=1.0, yanchor="top", bgcolor="rgba(255,255,255,0.7)"),
        xaxis=dict(
            title=dict(text=data.x_label, standoff=6),
            tickformat=DISTANCE_TICKFORMAT,
            automargin=False,
            gridcolor="rgba(0,0,0,0.08)",
            griddash="dash",
        ),
        yaxis=dict(
            title=dict(text=data.y_label, standoff=6),
            range=list(data.domain),
            tickformat=DEPTH_TICKFORMAT,
            automargin=False,
            gridcolor="rgba(0,0,0,0.08)",
            griddash="dash",
        ),
    )
    return fig


def _chart_outputs(state: ChartState) -> tuple[list[dict[str, Any]], dict[str, Any]]:
    return table_records(state.samples), build_profile_figure(state).to_dict()


def _total_input_value(state: ChartState) -> Any:
    text = state.total_distance.strip()
    if not text:
        return None
    try:
        value = float(text)
    except ValueError:
        return None
    if math.isfinite(value) and value.is_integer():
        return int(value)
    return value


def _show_upper_value(state: ChartState) -> list[str]:
    return [SHOW_UPPER_VALUE] if state.show_upper else []


def _chart_view() -> list[html.Div]:
    return [
        html.Div(
            className="pcs-card pcs-card--span-12",
            children=[
                _card_header_with_help("Controls", PANEL_HELP_TEXT["chart_controls"]),
                html.Div(
                    className="pcs-control-row",
                    children=[
                        html.Label(
                            className="pcs-field",
                            children=[
                                html.Span("Total distance (m)", className="pcs-field-label"),
                                dcc.Input(id="total-distance-input", type="number", min=1, placeholder="10", debounce=False),
                            ],
                        ),
                        dcc.Checklist(
                            id="show-upper-check",
                            options=[{"label": " Show upper", "value": SHOW_UPPER_VALUE}],
                            value=[SHOW_UPPER_VALUE],
                            className="pcs-check",
                        ),
                        html.Button("Reset demo", id="chart-reset-btn", n_clicks=0, className="pcs-btn"),
                        html.Button("Export PNG", id="export-png-btn", n_clicks=0, className="pcs-btn"),
                        html.Button("Export PDF", id="export-pdf-btn", n_clicks=0, className="pcs-btn"),
                    ],
                ),
            ],
        ),
        html.Div(id="chart-status-slot", className="pcs-status-wrap pcs-card--span-12"),
        html.Div(
            className="pcs-card pcs-card--span-12",
            children=[
                _card_header_with_help("Profile rows", PANEL_HELP_TEXT["chart_table"]),
                dash_table.DataTable(
                    id="profile-table",
                    columns=[
                        {"name": "#", "id": "order", "editable": False},
                        {"name": "Distance", "id": "distance"},
                        {"name": "Upper", "id": "upper"},
                        {"name": "Lower", "id": "lower"},
                    ],
                    data=[],
                    editable=True,
                    row_deletable=True,
                    style_table={"overflowX": "auto"},
                    style_cell={"textAlign": "left", "padding": "4px 8px", "minWidth": "80px"},
                    style_header={"fontWeight": "600"},
                ),
                html.Div(
                    className="pcs-button-row",
                    children=[
                        html.Button("+ Add row", id="add-row-btn", n_clicks=0, className="pcs-btn pcs-btn-primary"),
                        html.Button("Save CSV", id="export-csv-btn", n_clicks=0, className="pcs-btn"),
                        dcc.Upload(
                            id="csv-upload",
                            multiple=False,
                            accept=".csv,text/csv",
                            className="pcs-upload",
                            children=html.Div(["Drop a CSV here or ", html.Span("browse")]),
                        ),
                    ],
                ),
            ],
        ),
        html.Div(
            className="pcs-card pcs-card--span-12",
            children=[
                _card_header_with_help("Chart", PANEL_HELP_TEXT["chart_output"]),
                dcc.Graph(
                    id="profile-graph",
                    config=GRAPH_CONFIG,
                    style={"height": f"{CHART_HEIGHT_PX}px"},
                    className="pcs-profile-graph",
                ),
            ],
        ),
        dcc.Store(id="drag-target", storage_type="memory"),
        dcc.Store(id="drag-event", storage_type="memory"),
        dcc.Download(id="download-png"),
        dcc.Download(id="download-pdf"),
        dcc.Download(id="download-csv"),
    ]


# ---------------------------------------------------------------------------
# Document view
# ---------------------------------------------------------------------------


def _document_view(templates: BuiltinRegistry, samples: BuiltinRegistry) -> list[html.Div]:
    doc = initial_document_state(templates, samples)
    return [
        html.Div(
            className="pcs-card pcs-card--span-12",
            children=[
                _card_header_with_help("Template and data", PANEL_HELP_TEXT["document_inputs"]),
                html.Div(
                    className="pcs-control-row",
                    children=[
                        html.Label(
                            className="pcs-field",
                            children=[
                                html.Span("Choose Template", className="pcs-field-label"),
                                dcc.Dropdown(
                                    id="template-select",
                                    options=templates.options(),
                                    value=doc.template_name or None,
                                    clearable=False,
                                ),
                            ],
                        ),
                        html.Label(
                            className="pcs-field",
                            children=[
                                html.Span("Choose Sample Data", className="pcs-field-label"),
                                dcc.Dropdown(
                                    id="sample-select",
                                    options=samples.options(),
                                    value=doc.data_name or None,
                                    clearable=False,
                                ),
                            ],
                        ),
                    ],
                ),
                html.Div(
                    className="pcs-editor-grid",
                    children=[
                        html.Label(
                            className="pcs-field",
                            children=[
                                html.Span("Template Content (editable)", className="pcs-field-label"),
                                dcc.Textarea(id="template-text", value=doc.template_text, className="pcs-textarea"),
                            ],
                        ),
                        html.Label(
                            className="pcs-field",
                            children=[
                                html.Span("Data (JSON)", className="pcs-field-label"),
                                dcc.Textarea(id="data-text", value=doc.data_text, className="pcs-textarea"),
                            ],
                        ),
                    ],
                ),
            ],
        ),
        html.Div(id="document-error", className="pcs-status-wrap pcs-card--span-12"),
        html.Div(
            className="pcs-card pcs-card--span-12",
            children=[
                html.Div(
                    className="pcs-card-header",
                    children=[
                        html.H3("Preview", className="pcs-card-title"),
                        html.Div(
                            className="pcs-button-row",
                            children=[
                                _help_icon(PANEL_HELP_TEXT["document_preview"]),
                                html.Button("Print / Save PDF", id="print-btn", n_clicks=0, className="pcs-btn"),
                            ],
                        ),
                    ],
                ),
                html.Iframe(id="document-preview", className="pcs-preview-frame", srcDoc=""),
            ],
        ),
        dcc.Store(id="print-document", storage_type="memory"),
        html.Span(id="print-status", className="pcs-hidden"),
    ]


# ---------------------------------------------------------------------------
# Shell
# ---------------------------------------------------------------------------


def _section_intro(section_key: str) -> tuple[str, str]:
    if section_key == "chart":
        return (
            "Distance/Depth Profile Chart",
            "Edit the profile table or drag points on the chart; the x-axis stretches to the total distance.",
        )
    if section_key == "documents":
        return (
            "Document Generator",
            "Pick a template and sample data, edit either, and print the rendered document.",
        )
    return ("Not found", "Use the navigation to open a view.")


def _navbar() -> html.Header:
    return html.Header(
        className="pcs-navbar",
        children=[
            html.Div(
                className="pcs-brand",
                children=[
                    html.Div("PCS", className="pcs-brand-icon", title=APP_TITLE),
                    html.Div(APP_TITLE, className="pcs-brand-title"),
                    html.Small(f"v{BUILD_VERSION}", className="pcs-brand-subtitle"),
                ],
            ),
            html.Nav(
                className="pcs-nav",
                children=[
                    dcc.Link(SECTION_LABELS["chart"], href="/", id="nav-chart", className="pcs-nav-link"),
                    dcc.Link(SECTION_LABELS["documents"], href="/documents", id="nav-documents", className="pcs-nav-link"),
                ],
            ),
        ],
    )


def _main_content_for_path(
    pathname: Optional[str],
    templates: BuiltinRegistry,
    samples: BuiltinRegistry,
) -> html.Main:
    path = str(pathname or "/")
    section_key = ROUTES.get(path, "")
    title, subtitle = _section_intro(section_key)
    try:
        if section_key == "chart":
            groups = _chart_view()
        elif section_key == "documents":
            groups = _document_view(templates, samples)
        else:
            groups = [_not_found_card(path)]
    except Exception as exc:
        log_exception(f"render view {path}")
        groups = [_error_card(SECTION_LABELS.get(section_key, "View"), exc)]
    return html.Main(
        className="pcs-main",
        children=[
            html.Div(
                className="pcs-hero",
                children=[
                    html.H1(title, className="pcs-page-title"),
                    html.P(subtitle, className="pcs-page-subtitle"),
                ],
            ),
            html.Div(className="pcs-group-grid", children=groups),
        ],
    )


def _root_layout() -> html.Div:
    return html.Div(
        id="app-shell",
        className="pcs-app-shell",
        children=[
            dcc.Location(id="url", refresh=False),
            # Persisted slot holding JSON text; lives in the shell so it outlives view switches.
            dcc.Store(id=STORAGE_KEY, storage_type="local"),
            _navbar(),
            html.Div(id="main-content-slot"),
        ],
    )


def create_app(
    *,
    templates: Optional[BuiltinRegistry] = None,
    samples: Optional[BuiltinRegistry] = None,
) -> Dash:
    templates = templates if templates is not None else load_builtin_templates()
    samples = samples if samples is not None else load_builtin_samples()
    app = Dash(
        __name__,
        assets_folder=_dash_assets_dir(),
        external_stylesheets=[dbc.themes.LUX],
        suppress_callback_exceptions=True,
        title=APP_TITLE,
    )
    app.layout = _root_layout()
    _register_callbacks(app, templates, samples)
    return app


# ---------------------------------------------------------------------------
# Callback bodies (module level so they can be exercised without a server)
# ---------------------------------------------------------------------------


def chart_action(
    trigger: Optional[str],
    *,
    slot_data: Any,
    drag_data: Any = None,
    total_value: Any = None,
    show_upper_value: Optional[list[str]] = None,
    table_data: Optional[list[dict[str, Any]]] = None,
    csv_contents: Optional[str] = None,
    csv_filename: Optional[str] = None,
    drag_event: Optional[dict[str, Any]] = None,
) -> dict[str, Any]:
    """Apply one chart-view trigger and describe which outputs change.

    ``slot_data`` is the JSON text held in the browser slot. Returned keys:
    ``state`` (resulting ChartState), ``persist`` (write the slot), ``slot``
    (the JSON text to write), ``clear`` (erase the slot), ``sync_inputs``
    (push total/show-upper back into the controls) and ``status`` (alert
    component or None).
    """
    slot = _slot(slot_data)
    if trigger is None:
        result = slot.load()
        status = None
        if slot_data is not None and result.warnings:
            status = _status_alert("Saved chart state was partly unreadable; defaults were used.", "warning")
        return {
            "state": result.state,
            "persist": False,
            "slot": slot_data,
            "clear": False,
            "sync_inputs": True,
            "status": status,
        }

    state = slot.load().state
    state.drag = drag_target_from_event(drag_data)
    out: dict[str, Any] = {"state": state, "persist": True, "clear": False, "sync_inputs": False, "status": None}

    if trigger == "chart-reset-btn":
        state.reset()
        out.update(persist=False, clear=True, sync_inputs=True, status=_status_alert("Restored the demo profile.", "success"))
    elif trigger == "add-row-btn":
        state.samples = add_row(state.samples)
    elif trigger == "total-distance-input":
        set_total_distance(state, total_value)
    elif trigger == "show-upper-check":
        set_show_upper(state, SHOW_UPPER_VALUE in (show_upper_value or []))
    elif trigger == "profile-table":
        ops = diff_table_edit(state.samples, list(table_data or []))
        if ops:
            state.samples = apply_table_ops(state.samples, ops)
        else:
            out["persist"] = False
    elif trigger == "csv-upload":
        if not csv_contents:
            out.update(persist=False, status=_status_alert("Select a CSV file first.", "warning"))
        else:
            try:
                rows = samples_from_csv_text(decode_upload_contents(csv_contents))
            except Exception as exc:
                log_event("chart.csv_upload", f"{csv_filename or ''}: {exc}")
                out.update(persist=False, status=_status_alert(f"Could not read CSV: {exc}", "danger"))
            else:
                state.samples = rows
                label = f" from {csv_filename}" if csv_filename else ""
                out["status"] = _status_alert(f"Loaded {len(rows)} row(s){label}.", "success")
    elif trigger == "drag-event":
        changed = handle_drag_event(state, drag_event)
        out["persist"] = changed
    else:
        raise PreventUpdate

    if out["clear"]:
        slot.clear()
    elif out["persist"]:
        slot.save(state)
    out["slot"] = slot.backend.get(STORAGE_KEY)
    return out


def preview_outputs(template_text: Optional[str], data_text: Optional[str], title: Optional[str]):
    doc_state = DocumentState(template_name=title or "", template_text=template_text or "", data_text=data_text or "")
    result = refresh_preview(doc_state)
    doc = {"html": build_print_document(doc_state.template_name or "Document", result.html)}
    if doc_state.error:
        return "", _status_alert(f"Error: {doc_state.error}", "danger"), doc
    return result.html, None, doc


def _register_callbacks(app: Dash, templates: BuiltinRegistry, samples: BuiltinRegistry) -> None:
    @app.callback(
        Output("main-content-slot", "children"),
        Output("nav-chart", "className"),
        Output("nav-documents", "className"),
        Input("url", "pathname"),
    )
    def _render_route(pathname: Optional[str]):
        section = ROUTES.get(str(pathname or "/"), "")

        def nav_class(key: str) -> str:
            base = "pcs-nav-link"
            return f"{base} is-active" if key == section else base

        return _main_content_for_path(pathname, templates, samples), nav_class("chart"), nav_class("documents")

    @app.callback(
        Output(STORAGE_KEY, "data"),
        Output(STORAGE_KEY, "clear_data"),
        Output("drag-target", "data"),
        Output("profile-table", "data"),
        Output("profile-graph", "figure"),
        Output("total-distance-input", "value"),
        Output("show-upper-check", "value"),
        Output("chart-status-slot", "children"),
        Input("total-distance-input", "value"),
        Input("show-upper-check", "value"),
        Input("chart-reset-btn", "n_clicks"),
        Input("add-row-btn", "n_clicks"),
        Input("profile-table", "data_timestamp"),
        Input("csv-upload", "contents"),
        Input("drag-event", "data"),
        State("profile-table", "data"),
        State("csv-upload", "filename"),
        State(STORAGE_KEY, "data"),
        State("drag-target", "data"),
    )
    def _chart_actions(
        total_value,
        show_upper_value,
        _reset_clicks,
        _add_clicks,
        _table_ts,
        csv_contents,
        drag_event,
        table_data,
        csv_filename,
        slot_data,
        drag_data,
    ):
        from dash import ctx

        out = chart_action(
            ctx.triggered_id,
            slot_data=slot_data,
            drag_data=drag_data,
            total_value=total_value,
            show_upper_value=show_upper_value,
            table_data=table_data,
            csv_contents=csv_contents,
            csv_filename=csv_filename,
            drag_event=drag_event,
        )
        state: ChartState = out["state"]
        records, figure = _chart_outputs(state)
        return (
            out["slot"] if out["persist"] else no_update,
            True if out["clear"] else no_update,
            _drag_to_data(state.drag),
            records,
            figure,
            _total_input_value(state) if out["sync_inputs"] else no_update,
            _show_upper_value(state) if out["sync_inputs"] else no_update,
            out["status"] if out["status"] is not None else ([] if out["sync_inputs"] else no_update),
        )

    @app.callback(
        Output("download-png", "data"),
        Output("download-pdf", "data"),
        Output("download-csv", "data"),
        Input("export-png-btn", "n_clicks"),
        Input("export-pdf-btn", "n_clicks"),
        Input("export-csv-btn", "n_clicks"),
        State(STORAGE_KEY, "data"),
        prevent_initial_call=True,
    )
    def _chart_exports(_png_clicks, _pdf_clicks, _csv_clicks, slot_data):
        from dash import ctx

        trigger = ctx.triggered_id
        state = _state_from_slot(slot_data)
        if trigger == "export-png-btn":
            return dcc.send_bytes(render_chart_png(state), PNG_FILENAME), no_update, no_update
        if trigger == "export-pdf-btn":
            return no_update, dcc.send_bytes(render_chart_pdf(state), PDF_FILENAME), no_update
        if trigger == "export-csv-btn":
            return no_update, no_update, dcc.send_string(samples_to_csv_text(state.samples), CSV_FILENAME)
        raise PreventUpdate

    @app.callback(
        Output("template-text", "value"),
        Input("template-select", "value"),
        prevent_initial_call=True,
    )
    def _select_template(name: Optional[str]):
        if not name or name not in templates:
            raise PreventUpdate
        return templates.get(name)

    @app.callback(
        Output("data-text", "value"),
        Input("sample-select", "value"),
        prevent_initial_call=True,
    )
    def _select_sample(name: Optional[str]):
        if not name or name not in samples:
            raise PreventUpdate
        return samples.get(name)

    @app.callback(
        Output("document-preview", "srcDoc"),
        Output("document-error", "children"),
        Output("print-document", "data"),
        Input("template-text", "value"),
        Input("data-text", "value"),
        State("template-select", "value"),
    )
    def _render_preview(template_text, data_text, template_name):
        return preview_outputs(template_text, data_text, template_name)

    app.clientside_callback(
        PRINT_CLIENTSIDE,
        Output("print-status", "children"),
        Input("print-btn", "n_clicks"),
        State("print-document", "data"),
        prevent_initial_call=True,
    )


def main(**run_kwargs) -> None:
    app = create_app()
    app.run(**run_kwargs)


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description=f"{APP_TITLE} Dash UI")
    parser.add_argument("--host", default="127.0.0.1")
    parser.add_argument("--port", type=int, default=8050)
    parser.add_argument("--debug", dest="debug", action="store_true", default=False)
    parser.add_argument("--no-debug", dest="debug", action="store_false")
    parser.add_argument("--reloader", dest="use_reloader", action="store_true", default=False)
    parser.add_argument("--no-reloader", dest="use_reloader", action="store_false")
    args = parser.parse_args()
    main(host=args.host, port=args.port, debug=args.debug, use_reloader=args.use_reloader)
