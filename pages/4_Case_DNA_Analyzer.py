import streamlit as st
st.set_page_config(page_title="Cyber Legal Experts - Case DNA Analyzer", page_icon="🧬", layout="wide")

import pandas as pd

from documents import ANALYZER_TYPES, extract_text
from gemini_service import GatewayError, analyze_case_dna
from views import render_footer, render_shell

ENTITY_ICONS = {"Person": "👤", "Organization": "🏢", "Digital Asset": "💾", "Other": "📌"}


def group_entities(entities):
    grouped = {}
    for entity in entities:
        grouped.setdefault(entity.type, []).append(entity)
    return grouped


def load_upload_into_details():
    uploaded_file = st.session_state.get("casedna_upload")
    if uploaded_file is None:
        return
    try:
        st.session_state["casedna_details"] = extract_text(uploaded_file.name, uploaded_file.getvalue())
    except Exception as e:
        st.session_state["casedna_upload_error"] = f"Failed to read file: {e}"


def render_result(result, t):
    st.markdown(f"### {t('casedna.map')}")
    col1, col2 = st.columns(2)
    with col1:
        with st.container(border=True):
            st.markdown(f"#### 🕒 {t('casedna.timeline')}")
            if result.timeline:
                df = pd.DataFrame([event.model_dump() for event in result.timeline])
                st.dataframe(df.rename(columns={"date": "Date", "event": "Event"}),
                             hide_index=True, use_container_width=True)
                for event in result.timeline:
                    with st.expander(f"{event.date}: {event.event[:60]}"):
                        st.write(event.event)
        with st.container(border=True):
            st.markdown(f"#### 🔍 {t('casedna.evidence')}")
            for pattern in result.evidencePatterns:
                st.markdown(f"- {pattern}")
    with col2:
        with st.container(border=True):
            st.markdown(f"#### 🧩 {t('casedna.entities')}")
            for entity_type, entities in group_entities(result.entities).items():
                st.markdown(f"**{ENTITY_ICONS.get(entity_type, '📌')} {entity_type}**")
                for entity in entities:
                    with st.expander(entity.name):
                        st.write(entity.description)
        with st.container(border=True):
            st.markdown(f"#### ⚖️ {t('casedna.liabilities')}")
            for liability in result.legalLiabilities:
                st.markdown(f"- {liability}")


def main():
    t = render_shell("casedna")
    st.title(f"🧬 {t('casedna.title')}")
    st.caption(t("casedna.subtitle"))

    details = st.text_area(t("casedna.title"), placeholder=t("casedna.placeholder"), height=220,
                           label_visibility="collapsed", key="casedna_details")
    st.file_uploader(t("casedna.upload"), type=ANALYZER_TYPES, key="casedna_upload",
                     on_change=load_upload_into_details)
    st.caption(t("casedna.or"))
    upload_error = st.session_state.pop("casedna_upload_error", None)
    if upload_error:
        st.error(upload_error)

    if st.button(t("casedna.btn"), key="analyze_case"):
        if not details.strip():
            st.error("Please provide case details or upload a document.")
        else:
            with st.spinner("Sequencing the case DNA..."):
                try:
                    st.session_state["casedna_result"] = analyze_case_dna(details.strip())
                except GatewayError as e:
                    st.session_state.pop("casedna_result", None)
                    st.error(str(e))

    result = st.session_state.get("casedna_result")
    if result:
        render_result(result, t)

    render_footer(t)


if __name__ == "__main__":
    main()
