import logging

import streamlit as st

from crack_triage import ImageLoadError, analyze_bitmap
from crack_triage.complexity import gradient_map
from crack_triage.imaging import load_image

# -----------------------------
# Optional PDF support
# -----------------------------
try:
    from crack_triage.report import generate_pdf
    PDF_ENABLED = True
except ModuleNotFoundError:
    PDF_ENABLED = False

logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")

st.set_page_config(page_title="Earthquake Crack Triage", layout="wide")

st.title("🏚️ Post-Earthquake Crack Triage")
st.caption("Heuristic crack severity screening | Not a substitute for an engineer's inspection")

DAMAGE_ICONS = {
    "TYPE_O": "✓",
    "TYPE_A": "⚠",
    "TYPE_B": "⚠⚠",
    "TYPE_C": "⚠⚠⚠",
    "TYPE_D": "🚨",
}

# -----------------------------
# Image upload
# -----------------------------
uploaded_file = st.file_uploader(
    "Upload a photo of the cracked wall or element",
    type=["jpg", "jpeg", "png"],
)

# -----------------------------
# Processing
# -----------------------------
if uploaded_file:
    try:
        img = load_image(uploaded_file.getvalue())
    except ImageLoadError as e:
        st.error(f"{e}. Upload a clear JPEG or PNG photo.")
        st.stop()

    result = analyze_bitmap(img)
    edges = gradient_map(img)
    damage_type = result.damage_type

    col1, col2 = st.columns(2)
    col1.image(img, "Uploaded Photo", use_container_width=True)
    col2.image(edges, "Gradient Map", use_container_width=True, clamp=True)

    st.markdown(
        f"## {DAMAGE_ICONS[damage_type.value]} "
        f"<span style='color:{damage_type.color}'>{damage_type.display_name}</span>",
        unsafe_allow_html=True,
    )
    st.write(f"**Width class:** {damage_type.width_range}")
    st.write(f"**Severity:** {result.severity_percent:.0f}%")
    st.progress(int(result.severity_percent))

    m1, m2, m3 = st.columns(3)
    m1.metric("Crack width", f"{result.crack_width_mm:.1f} mm")
    m2.metric("Crack length", f"{result.crack_length_cm:.1f} cm")
    m3.metric("Crack area", f"{result.crack_area_cm2:.2f} cm²")

    st.markdown("## 📋 Assessment")
    st.write(result.description)

    st.markdown("## 🛠️ Recommendation")
    st.write(result.recommendation)

    if PDF_ENABLED:
        if st.button("📄 Generate PDF Report"):
            pdf_path = generate_pdf(result, image=img, edge_map=edges)

            with open(pdf_path, "rb") as f:
                st.download_button(
                    "⬇️ Download Report",
                    f,
                    file_name="crack_assessment_report.pdf",
                    mime="application/pdf",
                )
    else:
        st.warning("PDF export disabled. Install with `pip install quake-crack-triage[pdf]` to enable it.")
