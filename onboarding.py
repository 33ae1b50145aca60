import streamlit as st

from browser_storage import get_localstorage_value, set_localstorage_value

TOUR_COMPLETED_KEY = "cylex_tour_completed"

TOUR_STEPS = [
    ("tour.welcome.title", "tour.welcome.desc"),
    ("tour.tools.title", "tour.tools.desc"),
    ("tour.settings.title", "tour.settings.desc"),
    ("tour.chat.title", "tour.chat.desc"),
]


def advance(step):
    """Next step index, or None when the tour is over."""
    step += 1
    return step if step < len(TOUR_STEPS) else None


def _finish():
    st.session_state["tour_step"] = None
    # localStorage is written on the next run
    st.session_state["tour_persist"] = True


def render_tour(t):
    if "tour_step" not in st.session_state:
        completed = get_localstorage_value(TOUR_COMPLETED_KEY)
        st.session_state["tour_step"] = None if completed == "true" else 0
    step = st.session_state["tour_step"]
    if step is None:
        if st.session_state.pop("tour_persist", False):
            set_localstorage_value(TOUR_COMPLETED_KEY, "true")
        return

    title_key, desc_key = TOUR_STEPS[step]
    last = step == len(TOUR_STEPS) - 1
    with st.container(border=True):
        st.caption(f"{step + 1} / {len(TOUR_STEPS)}")
        st.markdown(f"#### {t(title_key)}")
        st.write(t(desc_key))
        col1, col2 = st.columns(2)
        with col1:
            if st.button(t("tour.finish") if last else t("tour.next"), key="tour_next"):
                st.session_state["tour_step"] = advance(step)
                if st.session_state["tour_step"] is None:
                    _finish()
                st.rerun()
        with col2:
            if not last and st.button(t("tour.skip"), key="tour_skip"):
                _finish()
                st.rerun()
