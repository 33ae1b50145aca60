import streamlit as st
st.set_page_config(page_title="Cyber Legal Experts - About", page_icon="ℹ️", layout="wide")

from content import TIMELINE
from views import render_footer, render_shell

MILESTONE_ICONS = {"law": "⚖️", "ai": "🤖"}


def main():
    t = render_shell("about")
    st.title(f"ℹ️ {t('about.title')}")
    st.markdown(t("about.desc"))

    st.header(t("about.timeline"))
    for milestone in TIMELINE:
        icon = MILESTONE_ICONS.get(milestone["type"], "📌")
        with st.expander(f"{icon} {milestone['year']}: {milestone['title']}"):
            st.write(milestone["description"])

    render_footer(t)


if __name__ == "__main__":
    main()
