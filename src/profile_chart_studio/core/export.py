from __future__ import annotations

import io

from matplotlib.backends.backend_agg import FigureCanvasAgg
from matplotlib.figure import Figure

from profile_chart_studio.core.plotting import prepare_profile_plot
from profile_chart_studio.core.state import ChartState
from profile_chart_studio.plotting.helpers import fmt_depth_ticks, fmt_distance_ticks

PNG_FILENAME = "grezimas.png"
PDF_FILENAME = "grezimas.pdf"

EXPORT_DPI = 100
EXPORT_SIZE_PX = (1200, 400)


def _chart_figure(state: ChartState) -> Figure:
    data = prepare_profile_plot(state)
    width_px, height_px = EXPORT_SIZE_PX
    fig = Figure(figsize=(width_px / EXPORT_DPI, height_px / EXPORT_DPI), dpi=EXPORT_DPI, facecolor="white")
    FigureCanvasAgg(fig)
    ax = fig.add_subplot(111)
    ax.grid(True, linestyle=(0, (3, 3)), alpha=0.3)
    for trace in data.traces:
        ax.plot(
            trace.x,
            trace.y,
            color=trace.color,
            label=trace.label,
            marker="o",
            markersize=5,
            markerfacecolor=trace.color,
            markeredgecolor="white",
            linewidth=1.5,
        )
    ax.set_ylim(*data.domain)
    ax.set_xlabel(data.x_label)
    ax.set_ylabel(data.y_label)
    fmt_distance_ticks(ax)
    fmt_depth_ticks(ax)
    fig.tight_layout()
    return fig


def render_chart_png(state: ChartState) -> bytes:
    """Rasterize the profile chart to PNG bytes on a white background."""
    fig = _chart_figure(state)
    buf = io.BytesIO()
    fig.savefig(buf, format="png", dpi=EXPORT_DPI, facecolor="white")
    return buf.getvalue()


def render_chart_pdf(state: ChartState) -> bytes:
    """Single-page PDF whose page matches the rasterized chart's pixel size."""
    from reportlab.lib.utils import ImageReader
    from reportlab.pdfgen import canvas

    png = render_chart_png(state)
    image = ImageReader(io.BytesIO(png))
    iw, ih = image.getSize()
    buf = io.BytesIO()
    pdf = canvas.Canvas(buf, pagesize=(iw, ih))
    pdf.setTitle("Distance/Depth Profile Chart")
    pdf.drawImage(image, 0, 0, width=iw, height=ih)
    pdf.showPage()
    pdf.save()
    return buf.getvalue()
