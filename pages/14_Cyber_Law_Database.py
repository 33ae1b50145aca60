import streamlit as st
st.set_page_config(page_title="Cyber Legal Experts - Cyber Law Database", page_icon="📜", layout="wide")

from law_repository import (
    PAGE_SIZE,
    build_law_filters,
    count_laws,
    get_countries,
    get_laws_collection,
    load_law,
    query_laws,
    total_pages,
)
from views import render_footer, render_shell

st.markdown("""
    <style>
        .law-country {
            font-size: 14px;
            color: var(--primary-color);
            text-transform: uppercase;
        }
        .law-penalties {
            font-size: 14px;
            color: #f87171;
            margin-top: 8px;
        }
    </style>
""", unsafe_allow_html=True)


# Function to reset page to 1
def reset_page():
    st.session_state["law_page"] = 1


def render_law(law, collection, t):
    law_id = law.get("LawID")
    summary = (law.get("Summary") or "").strip() or "No summary available for this law."
    with st.container(border=True):
        st.markdown(f"""
            <div class="law-country">{law.get('Country', '')}</div>
            <div class="tool-title">{law.get('Title', '')} (ID: {law_id})</div>
            <div class="tool-description">{summary}</div>
        """, unsafe_allow_html=True)
        key_points = law.get("KeyPoints") or []
        if key_points:
            st.markdown(f"**{t('lawdb.key_points')}:**")
            for point in key_points:
                st.markdown(f"- {point}")
        if law.get("Penalties"):
            st.markdown(f'<div class="law-penalties">⚠️ {t("lawdb.penalties")}: {law["Penalties"]}</div>',
                        unsafe_allow_html=True)

        if st.button(f"View Full Details for {law_id}", key=f"details_{law_id}"):
            with st.spinner("Loading full details..."):
                full_law = load_law(collection, law_id)
                if full_law:
                    st.json(full_law)
                else:
                    st.error(f"Unable to load full details for law ID {law_id}")


def main():
    t = render_shell("lawdb")
    st.title(f"📜 {t('lawdb.title')}")

    if "law_page" not in st.session_state:
        st.session_state["law_page"] = 1

    collection = get_laws_collection()

    with st.expander("Filters", expanded=True):
        col1, col2, col3 = st.columns([2, 2, 1])
        with col1:
            title = st.text_input(t("lawdb.search"), key="law_title_filter", on_change=reset_page)
        with col2:
            country = st.selectbox(t("lawdb.country"), ["All"] + get_countries(collection),
                                   key="law_country_filter", on_change=reset_page)
        with col3:
            law_id = st.number_input(t("lawdb.law_id"), min_value=0, step=1, value=0,
                                     key="law_id_filter", on_change=reset_page)

    filters = build_law_filters(law_id=law_id, title=title, country=country)
    page = st.session_state["law_page"]
    skip = (page - 1) * PAGE_SIZE

    with st.spinner("Loading laws..."):
        laws = query_laws(collection, filters, skip, PAGE_SIZE)
        total = count_laws(collection, filters)

    if laws:
        st.markdown(f"### Page {page} (Showing {len(laws)} of {total} laws)")
        for law in laws:
            render_law(law, collection, t)

        pages = total_pages(total)
        col1, col2, col3 = st.columns(3)
        with col1:
            if st.button("Previous Page", disabled=page <= 1):
                st.session_state["law_page"] -= 1
                st.rerun()
        with col2:
            st.write(f"Page {page} of {pages}")
        with col3:
            if st.button("Next Page", disabled=page >= pages):
                st.session_state["law_page"] += 1
                st.rerun()
    else:
        st.warning(t("lawdb.empty"))

    render_footer(t)


if __name__ == "__main__":
    main()
