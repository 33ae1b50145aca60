import streamlit as st
st.set_page_config(page_title="Cyber Legal Experts - AI Labs", page_icon="🧪", layout="wide")

from charts import badge_html
from content import EXPERIMENT_STATUS_KEYS, EXPERIMENTS
from views import render_footer, render_shell

STATUS_COLORS = {
    "Experimental": "#c084fc",
    "In Development": "#38bdf8",
    "Concept": "#94a3b8",
}


def main():
    t = render_shell("labs")
    st.title(f"🧪 {t('labs.title')}")
    st.caption(t("labs.subtitle"))

    cols = st.columns(2)
    for i, experiment in enumerate(EXPERIMENTS):
        status = experiment["status"]
        with cols[i % 2]:
            with st.container(border=True):
                st.markdown(badge_html(t(EXPERIMENT_STATUS_KEYS[status]), STATUS_COLORS[status]),
                            unsafe_allow_html=True)
                st.markdown(f"### {experiment['title']}")
                st.write(experiment["description"])
                st.button(t("labs.coming_soon"), key=f"lab_{experiment['id']}", disabled=True)

    render_footer(t)


if __name__ == "__main__":
    main()
