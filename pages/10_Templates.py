import streamlit as st
st.set_page_config(page_title="Cyber Legal Experts - Legal Templates", page_icon="✍️", layout="wide")

from content import TEMPLATE_CATEGORIES, TEMPLATES
from views import open_chat, render_footer, render_shell

CATEGORY_KEYS = {
    "Intellectual Property": "templates.cat.ip",
    "Data Privacy": "templates.cat.privacy",
    "Contracts & Agreements": "templates.cat.contracts",
}


def filter_templates(category):
    if category == "All":
        return list(TEMPLATES)
    return [template for template in TEMPLATES if template["category"] == category]


def customize_prompt(template):
    return ("Please help me customize the following legal template for my specific needs.\n\n---\n\n"
            f"{template['content']}")


def select_template(template_id):
    st.session_state["selected_template"] = template_id


def render_template_detail(template, t):
    st.button(f"← {t('common.back')}", key="template_back", on_click=select_template, args=(None,))
    st.subheader(template["title"])
    st.caption(t(CATEGORY_KEYS[template["category"]]))
    # st.code has a built-in copy button
    st.code(template["content"], language=None, wrap_lines=True)
    if st.button(f"✨ {t('templates.customize')}", key=f"customize_{template['id']}"):
        open_chat(customize_prompt(template))


def render_template_list(t):
    categories = ["All"] + TEMPLATE_CATEGORIES
    category = st.radio(
        t("templates.category"),
        categories,
        format_func=lambda c: t("templates.all") if c == "All" else t(CATEGORY_KEYS[c]),
        horizontal=True,
        key="template_category",
    )
    templates = filter_templates(category)
    cols = st.columns(2)
    for i, template in enumerate(templates):
        with cols[i % 2]:
            with st.container(border=True):
                st.markdown(f"**{template['title']}**")
                st.caption(t(CATEGORY_KEYS[template["category"]]))
                st.write(template["description"])
                st.button("View", key=f"view_template_{template['id']}", on_click=select_template,
                          args=(template["id"],))


def main():
    t = render_shell("templates")
    st.title(f"✍️ {t('templates.title')}")
    st.caption(t("templates.subtitle"))

    selected = st.session_state.get("selected_template")
    template = next((tpl for tpl in TEMPLATES if tpl["id"] == selected), None)
    if template:
        render_template_detail(template, t)
    else:
        render_template_list(t)

    render_footer(t)


if __name__ == "__main__":
    main()
