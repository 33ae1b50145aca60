import random

import streamlit as st
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

st.set_page_config(page_title="Cyber Legal Experts", page_icon="🛡️", layout="wide")

from content import CASE_INSIGHTS_TICKER_ITEMS, FIXED_TAGLINES, THREAT_TICKER_ITEMS
from onboarding import render_tour
from views import HOME_FEATURES, open_chat, render_feature_card, render_footer, render_shell

TICKER_INTERVAL = 5

st.markdown("""
    <style>
        .hero-title {
            text-align: center;
            font-size: 52px;
            font-weight: bold;
            color: rgb(var(--slate-100));
        }
        .hero-subtitle {
            text-align: center;
            font-size: 22px;
            color: rgb(var(--slate-400));
            margin-bottom: 20px;
        }
        .ticker {
            border: 1px solid rgb(var(--slate-700));
            border-radius: 8px;
            padding: 8px 14px;
            background-color: rgb(var(--slate-800));
            color: rgb(var(--slate-300));
            animation: ticker-fade 0.3s ease-in;
        }
        @keyframes ticker-fade {
            from { opacity: 0; }
            to { opacity: 1; }
        }
        .section-label {
            text-align: center;
            text-transform: uppercase;
            letter-spacing: 2px;
            color: var(--primary-color);
            font-weight: bold;
        }
        .section-title {
            text-align: center;
            font-size: 34px;
            font-weight: bold;
            color: rgb(var(--slate-100));
        }
        .section-desc {
            text-align: center;
            color: rgb(var(--slate-400));
            margin-bottom: 30px;
        }
    </style>
""", unsafe_allow_html=True)


def hero_title_html(title):
    """Highlight every occurrence of the word Cyber in the hero title."""
    parts = title.split("Cyber")
    return '<span class="text-dynamic">Cyber</span>'.join(parts)


def pick_tagline(t):
    taglines = [t("hero.subtitle.1"), t("hero.subtitle.2")] + FIXED_TAGLINES
    if st.session_state.get("tagline_index") is None:
        st.session_state["tagline_index"] = random.randrange(len(taglines))
    return taglines[st.session_state["tagline_index"] % len(taglines)]


def ticker_item(items, tick):
    return items[tick % len(items)] if items else ""


@st.fragment(run_every=TICKER_INTERVAL)
def render_tickers():
    tick = st.session_state.get("ticker_tick", 0)
    col1, col2 = st.columns(2)
    with col1:
        st.markdown(f'<div class="ticker">🛡️ {ticker_item(THREAT_TICKER_ITEMS, tick)}</div>',
                    unsafe_allow_html=True)
    with col2:
        st.markdown(f'<div class="ticker">💼 {ticker_item(CASE_INSIGHTS_TICKER_ITEMS, tick)}</div>',
                    unsafe_allow_html=True)
    st.session_state["ticker_tick"] = tick + 1


def main():
    t = render_shell("home")
    render_tour(t)

    st.markdown(f'<div class="hero-title">{hero_title_html(t("hero.title"))}</div>', unsafe_allow_html=True)
    st.markdown(f'<div class="hero-subtitle">{pick_tagline(t)}</div>', unsafe_allow_html=True)
    render_tickers()

    st.markdown(f'<div class="section-label">{t("section.toolkit")}</div>', unsafe_allow_html=True)
    st.markdown(f'<div class="section-title">{t("section.toolkit.title")}</div>', unsafe_allow_html=True)
    st.markdown(f'<div class="section-desc">{t("section.toolkit.desc")}</div>', unsafe_allow_html=True)

    for row in range(0, len(HOME_FEATURES), 4):
        cols = st.columns(4)
        for col, view in zip(cols, HOME_FEATURES[row:row + 4]):
            with col:
                render_feature_card(view, t)

    st.divider()
    if st.button(f"💬 {t('tool.chat')}", key="open_cylex", use_container_width=True):
        open_chat()

    render_footer(t)


if __name__ == "__main__":
    main()
