import streamlit as st
st.set_page_config(page_title="Cyber Legal Experts - Finding Suitable Law", page_icon="🔎", layout="wide")

import os
import torch

torch.classes.__path__ = []

from app_resources import get_law_index, load_embedding_model
from gemini_service import explain_law_relevance
from law_repository import get_laws_collection, load_law
from views import render_footer, render_shell

# Disable parallelism in tokenizers to avoid warnings
os.environ["TOKENIZERS_PARALLELISM"] = "false"

TOP_K = 5


def embed_query(model, scenario):
    # e5 models expect the "query: " prefix on search text
    return model.encode([f"query: {scenario}"], normalize_embeddings=True)[0]


def matched_law_ids(query_response):
    ids = []
    for match in (query_response or {}).get("matches", []):
        law_id = (match.get("metadata") or {}).get("LawID")
        if law_id is not None:
            ids.append(int(law_id))
    return ids


def score_html(advice_label, advice, score):
    score_text = f"{score}/10" if score is not None else "N/A"
    return f"""
        <div style="display: flex; justify-content: space-between; align-items: center;">
            <span style="color: var(--primary-color);">{advice_label}: {advice}</span>
            <span style="font-size: 24px; font-weight: bold; color: var(--primary-color);">{score_text}</span>
        </div>
    """


def main():
    t = render_shell("suitable_law")
    st.title(f"🔎 {t('tool.suitable_law')}")
    scenario = st.text_area(t("suitable.prompt"))

    if st.button(t("suitable.btn")) and scenario:
        model = load_embedding_model()
        index = get_law_index()
        collection = get_laws_collection()
        with st.spinner("Generating query embedding..."):
            query_embedding = embed_query(model, scenario)
        with st.spinner("Querying Pinecone for similar laws..."):
            query_response = index.query(vector=query_embedding.tolist(), top_k=TOP_K, include_metadata=True)

        law_ids = matched_law_ids(query_response)
        if not law_ids:
            st.info("No similar laws found.")
        else:
            st.markdown("### Suitable Laws Found:")
        for law_id in law_ids:
            law = load_law(collection, law_id)
            if not law:
                st.warning(f"No document found for LawID: {law_id}")
                continue
            with st.container(border=True):
                st.markdown(f"""
                    <div class="tool-meta">{law.get('Country', '')}</div>
                    <div class="tool-title">{law.get('Title', 'No Title')} (ID: {law_id})</div>
                    <div class="tool-description">{law.get('Summary') or 'No summary available for this law.'}</div>
                """, unsafe_allow_html=True)
                with st.spinner("Getting site advice..."):
                    relevance = explain_law_relevance(scenario, law)
                st.markdown(score_html(t("suitable.advice"), relevance.advice, relevance.score),
                            unsafe_allow_html=True)
                with st.expander("Full details"):
                    st.json(law)

    render_footer(t)


if __name__ == "__main__":
    main()
