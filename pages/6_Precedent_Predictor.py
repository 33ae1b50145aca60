import streamlit as st
st.set_page_config(page_title="Cyber Legal Experts - Precedent Predictor", page_icon="⚖️", layout="wide")

from charts import confidence_badge, likelihood_chart
from gemini_service import GatewayError, predict_precedent
from views import render_footer, render_shell


def render_outcome(outcome, t):
    with st.container(border=True):
        col1, col2 = st.columns([3, 1])
        with col1:
            st.markdown(f"**{outcome.outcome}**")
        with col2:
            st.markdown(f"{confidence_badge(outcome.confidenceScore)} {t('predictor.confidence')}",
                        unsafe_allow_html=True)
        st.write(outcome.reasoning)
        st.caption(f"{t('predictor.likelihood')}: {round(outcome.likelihoodPercentage)}%")
        st.progress(int(round(outcome.likelihoodPercentage)))


def render_result(result, t):
    st.markdown(f"### {t('predictor.dashboard')}")
    col1, col2 = st.columns([3, 2])
    with col1:
        st.markdown(f"#### {t('predictor.outcomes')}")
        for outcome in result.predictedOutcomes:
            render_outcome(outcome, t)
        chart = likelihood_chart(result.predictedOutcomes)
        if chart is not None:
            st.altair_chart(chart, use_container_width=True)
    with col2:
        with st.container(border=True):
            st.markdown(f"#### 📚 {t('predictor.sections')}")
            for section in result.keyLegalSections:
                st.markdown(f"**{section.section}**")
                st.caption(section.relevance)
        with st.container(border=True):
            st.markdown(f"#### 🎯 {t('predictor.strategies')}")
            for strategy in result.suggestedStrategies:
                st.markdown(f"**{strategy.strategy}**")
                st.caption(strategy.description)
    st.caption(t("copilot.disclaimer"))


def main():
    t = render_shell("predictor")
    st.title(f"⚖️ {t('predictor.title')}")
    st.caption(t("predictor.subtitle"))

    details = st.text_area(t("predictor.title"), placeholder=t("predictor.placeholder"), height=200,
                           label_visibility="collapsed", key="predictor_details")

    if st.button(t("predictor.btn"), key="predict"):
        if not details.strip():
            st.error("Please provide case details to predict.")
        else:
            with st.spinner("Analyzing precedent..."):
                try:
                    st.session_state["prediction"] = predict_precedent(details.strip())
                except GatewayError as e:
                    st.session_state.pop("prediction", None)
                    st.error(str(e))

    result = st.session_state.get("prediction")
    if result:
        render_result(result, t)

    render_footer(t)


if __name__ == "__main__":
    main()
