import logging
import os
import tempfile
from datetime import datetime
from xml.sax.saxutils import escape

import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt
import numpy as np
from PIL import Image
from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import getSampleStyleSheet
from reportlab.lib.units import mm
from reportlab.platypus import Image as RLImage
from reportlab.platypus import Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle

from .models import AnalysisSuccess

logger = logging.getLogger(__name__)


# -----------------------------
# Figures
# -----------------------------
def save_gradient_figure(edge_map: np.ndarray, path: str) -> str:
    fig, ax = plt.subplots()
    ax.imshow(edge_map, cmap="inferno")
    ax.axis("off")
    fig.savefig(path, bbox_inches="tight")
    plt.close(fig)
    return path


def result_rows(result: AnalysisSuccess) -> list[list[str]]:
    damage_type = result.damage_type
    return [
        ["Damage type", damage_type.display_name],
        ["Width class", damage_type.width_range],
        ["Estimated crack width (mm)", f"{result.crack_width_mm:.1f}"],
        ["Estimated crack length (cm)", f"{result.crack_length_cm:.1f}"],
        ["Crack area (cm²)", f"{result.crack_area_cm2:.2f}"],
        ["Severity", f"{result.severity_percent:.0f}%"],
        ["Symptoms", damage_type.symptoms],
    ]


# -----------------------------
# PDF generation
# -----------------------------
def generate_pdf(result, image=None, edge_map=None, path=None) -> str:
    """
    Write a one-document crack assessment report and return its path.

    ``image`` is the analysed photo (PIL image) and ``edge_map`` the
    gradient map from the complexity scan; both are optional. When ``path``
    is omitted the report goes to a temporary file.
    """
    if not isinstance(result, AnalysisSuccess):
        raise ValueError("Only successful analyses can be reported")

    if path is None:
        tmp = tempfile.NamedTemporaryFile(delete=False, suffix=".pdf")
        tmp.close()
        path = tmp.name

    doc = SimpleDocTemplate(path, pagesize=A4, leftMargin=20, rightMargin=20)
    styles = getSampleStyleSheet()
    elements = []

    elements.append(Paragraph("<b>Post-Earthquake Crack Assessment Report</b>", styles["Title"]))
    elements.append(Paragraph(datetime.now().strftime("%d.%m.%Y %H:%M"), styles["Normal"]))
    elements.append(Spacer(1, 12))

    cell_style = styles["BodyText"]
    table_data = [[label, Paragraph(escape(value), cell_style)] for label, value in result_rows(result)]
    table = Table(table_data, colWidths=[70 * mm, 100 * mm])
    table.setStyle(TableStyle([
        ("GRID", (0, 0), (-1, -1), 0.5, colors.lightgrey),
        ("BACKGROUND", (1, 0), (1, 0), colors.HexColor(result.damage_type.color)),
        ("VALIGN", (0, 0), (-1, -1), "MIDDLE"),
    ]))
    elements.append(table)
    elements.append(Spacer(1, 15))

    elements.append(Paragraph("<b>Assessment</b>", styles["Heading3"]))
    elements.append(Paragraph(escape(result.description), styles["Normal"]))
    elements.append(Spacer(1, 10))
    elements.append(Paragraph("<b>Recommendation</b>", styles["Heading3"]))
    elements.append(Paragraph(escape(result.recommendation), styles["Normal"]))
    elements.append(Spacer(1, 15))

    # figures are read from disk during build, so build inside the temp dir
    with tempfile.TemporaryDirectory() as tmpdir:
        figures = {}
        if image is not None:
            photo_path = os.path.join(tmpdir, "photo.png")
            Image.fromarray(np.asarray(image)).save(photo_path)
            figures["Analysed Photo"] = photo_path
        if edge_map is not None:
            figures["Gradient Map"] = save_gradient_figure(edge_map, os.path.join(tmpdir, "gradient.png"))

        for title, fig_path in figures.items():
            elements.append(Paragraph(f"<b>{title}</b>", styles["Heading3"]))
            elements.append(RLImage(fig_path, width=150 * mm, height=90 * mm))
            elements.append(Spacer(1, 10))

        doc.build(elements)
    logger.info("Report written to %s", path)
    return path
