import streamlit as st
st.set_page_config(page_title="Cyber Legal Experts - Cyber Risk Meter", page_icon="📟", layout="wide")

from charts import risk_gauge, risk_level_badge
from gemini_service import GatewayError, assess_cyber_risk
from localization import language_name
from views import current_language, render_footer, render_shell


def render_result(result, t):
    st.markdown(f"### {t('riskmeter.results')}")
    with st.container(border=True):
        col1, col2 = st.columns([1, 2])
        with col1:
            st.altair_chart(risk_gauge(result.riskScore), use_container_width=False)
        with col2:
            st.markdown(f"**{t('riskmeter.level')}**")
            st.markdown(risk_level_badge(result.riskLevel), unsafe_allow_html=True)
            st.write("")
            st.write(result.summary)

    for item in result.identifiedRisks:
        with st.container(border=True):
            col1, col2 = st.columns(2)
            with col1:
                st.markdown(f"**⚠️ {t('riskmeter.risk')}**")
                st.write(item.risk)
            with col2:
                st.markdown(f"**✅ {t('riskmeter.rec')}**")
                st.write(item.recommendation)


def main():
    t = render_shell("riskmeter")
    st.title(f"📟 {t('riskmeter.title')}")
    st.caption(t("riskmeter.subtitle"))

    text = st.text_area(t("riskmeter.title"), placeholder=t("riskmeter.placeholder"), height=220,
                        label_visibility="collapsed", key="riskmeter_text")

    if st.button(t("riskmeter.btn"), key="assess_risk"):
        if not text.strip():
            st.error("Please paste the text you want to analyze.")
        else:
            with st.spinner("Assessing cyber risk..."):
                try:
                    st.session_state["risk_result"] = assess_cyber_risk(
                        text.strip(), language_name(current_language())
                    )
                except GatewayError as e:
                    st.session_state.pop("risk_result", None)
                    st.error(str(e))

    result = st.session_state.get("risk_result")
    if result:
        render_result(result, t)

    render_footer(t)


if __name__ == "__main__":
    main()
