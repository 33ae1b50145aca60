import streamlit as st
st.set_page_config(page_title="Cyber Legal Experts - Expert Directory", page_icon="📍", layout="wide")

from content import EXPERTS
from views import go_to, render_footer, render_shell


def filter_experts(experts, query):
    query = (query or "").strip().lower()
    if not query:
        return list(experts)
    return [
        expert for expert in experts
        if query in expert["location"].lower() or query in expert["specialization"].lower()
        or query in expert["name"].lower()
    ]


def main():
    t = render_shell("experts")
    st.title(f"📍 {t('experts.title')}")

    query = st.text_input(f"{t('experts.location')} / {t('experts.specialization')}",
                          placeholder="Enter location...")
    experts = filter_experts(EXPERTS, query)
    if not experts:
        st.info("No experts match your search.")

    cols = st.columns(2)
    for i, expert in enumerate(experts):
        with cols[i % 2]:
            with st.container(border=True):
                st.markdown(f"### {expert['name']}")
                st.caption(f"📍 {expert['location']}")
                st.write(expert["specialization"])
                st.markdown(f"⭐ {expert['rating']} ({expert['reviews']} {t('experts.reviews')})")
                if st.button(t("experts.contact"), key=f"contact_{expert['id']}"):
                    go_to("expert_chat")

    render_footer(t)


if __name__ == "__main__":
    main()
