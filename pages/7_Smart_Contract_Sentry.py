import streamlit as st
st.set_page_config(page_title="Cyber Legal Experts - Smart Contract Sentry", page_icon="🔐", layout="wide")

from charts import gauge_color, severity_badge
from gemini_service import GatewayError, audit_smart_contract
from localization import language_name
from views import current_language, render_footer, render_shell

SEVERITY_ORDER = {"Critical": 0, "High": 1, "Medium": 2, "Low": 3}


def sorted_vulnerabilities(vulnerabilities):
    return sorted(vulnerabilities, key=lambda v: SEVERITY_ORDER.get(v.severity, len(SEVERITY_ORDER)))


def render_result(result, t):
    score = round(result.securityScore)
    # inverted: a high security score is good
    color = gauge_color(100 - score)
    with st.container(border=True):
        st.markdown(f"**{t('sentry.score')}**")
        st.markdown(f'<span style="font-size: 40px; font-weight: bold; color: {color};">{score}</span> / 100',
                    unsafe_allow_html=True)
        st.write(result.summary)

    if result.legalRisks:
        with st.container(border=True):
            st.markdown(f"**{t('sentry.legal')}**")
            for risk in result.legalRisks:
                st.markdown(f"- {risk}")

    st.markdown(f"#### {t('sentry.vulns')}")
    for vuln in sorted_vulnerabilities(result.vulnerabilities):
        with st.container(border=True):
            line = f" (line {vuln.line})" if vuln.line is not None else ""
            st.markdown(f"{severity_badge(vuln.severity)} **{vuln.name}**{line}", unsafe_allow_html=True)
            st.write(vuln.description)


def main():
    t = render_shell("sentry")
    st.title(f"🔐 {t('sentry.title')}")
    st.caption(t("sentry.subtitle"))

    col1, col2 = st.columns(2)
    with col1:
        code = st.text_area(t("sentry.title"), placeholder=t("sentry.placeholder"), height=420,
                            label_visibility="collapsed", key="sentry_code")
        if st.button(f"🛡️ {t('sentry.btn')}", key="run_audit"):
            if not code.strip():
                st.error("Please paste the smart contract code.")
            else:
                with st.spinner("Auditing contract..."):
                    try:
                        st.session_state["audit_result"] = audit_smart_contract(
                            code, language_name(current_language())
                        )
                    except GatewayError as e:
                        st.session_state.pop("audit_result", None)
                        st.error(str(e))
    with col2:
        result = st.session_state.get("audit_result")
        if result:
            render_result(result, t)
        else:
            st.info(t("sentry.empty"))

    render_footer(t)


if __name__ == "__main__":
    main()
