import streamlit as st
st.set_page_config(page_title="Cyber Legal Experts - Legal Copilot", page_icon="🧭", layout="wide")

from gemini_service import PLAN_ERROR, generate_legal_action_plan
from pdf_export import build_report_pdf
from views import render_footer, render_shell


def main():
    t = render_shell("copilot")
    st.title(f"🧭 {t('copilot.title')}")
    st.caption(t("copilot.subtitle"))

    details = st.text_area(t("copilot.title"), placeholder=t("copilot.placeholder"), height=200,
                           label_visibility="collapsed", key="copilot_details")

    if st.button(t("copilot.btn"), key="generate_plan"):
        if not details.strip():
            st.error("Please provide details about your situation.")
        else:
            with st.spinner("Drafting your action plan..."):
                st.session_state["copilot_plan"] = generate_legal_action_plan(details.strip())

    plan = st.session_state.get("copilot_plan")
    if plan:
        if plan == PLAN_ERROR:
            st.error(plan)
        else:
            st.markdown(f"### {t('copilot.results')}")
            with st.container(border=True):
                st.markdown(plan)
            st.download_button(
                t("common.download_pdf"),
                data=build_report_pdf("Legal Action Plan", plan),
                file_name="legal-action-plan.pdf",
                mime="application/pdf",
            )
            st.caption(t("copilot.disclaimer"))

    render_footer(t)


if __name__ == "__main__":
    main()
