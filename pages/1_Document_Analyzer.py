import logging

import streamlit as st
st.set_page_config(page_title="Cyber Legal Experts - Document Analyzer", page_icon="📄", layout="wide")

from documents import ANALYZER_TYPES, extract_text
from gemini_service import DOCUMENT_ERROR, analyze_document
from pdf_export import build_report_pdf
from views import render_footer, render_shell

logger = logging.getLogger(__name__)


def read_upload(uploaded_file):
    try:
        return extract_text(uploaded_file.name, uploaded_file.getvalue())
    except Exception as e:
        logger.exception("Failed to read %s", uploaded_file.name)
        st.error(f"Failed to read file: {e}")
        return None


def main():
    t = render_shell("analyzer")
    st.title(f"📄 {t('analyzer.title')}")
    st.caption(t("analyzer.subtitle"))

    uploaded_file = st.file_uploader(t("analyzer.upload"), type=ANALYZER_TYPES)

    if st.button(t("analyzer.btn"), key="analyze_document"):
        if not uploaded_file:
            st.error("Please select a file first.")
        else:
            text = read_upload(uploaded_file)
            if text is not None and not text.strip():
                st.error("Could not read file content.")
            elif text:
                with st.spinner("Analyzing document..."):
                    st.session_state["analysis_result"] = analyze_document(text)
                    st.session_state["analysis_file"] = uploaded_file.name

    result = st.session_state.get("analysis_result")
    if result:
        if result == DOCUMENT_ERROR:
            st.error(result)
        else:
            st.subheader(f"{t('analyzer.results')}: {st.session_state.get('analysis_file', '')}")
            with st.container(border=True):
                st.markdown(result)
            st.download_button(
                t("common.download_pdf"),
                data=build_report_pdf(f"Document Analysis - {st.session_state.get('analysis_file', '')}", result),
                file_name="document-analysis.pdf",
                mime="application/pdf",
            )

    render_footer(t)


if __name__ == "__main__":
    main()
