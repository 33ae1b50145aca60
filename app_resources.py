import os

import pinecone
import streamlit as st
from dotenv import load_dotenv
from pymongo import MongoClient
from sentence_transformers import SentenceTransformer

load_dotenv()

EMBEDDING_MODEL = "intfloat/multilingual-e5-large"
LAW_INDEX_NAME = os.getenv("PINECONE_LAW_INDEX", "cyber-laws")


@st.cache_resource
def load_embedding_model():
    return SentenceTransformer(EMBEDDING_MODEL)


@st.cache_resource
def init_pinecone_client():
    return pinecone.Pinecone(api_key=os.getenv("PINECONE_API_KEY"))


@st.cache_resource
def get_mongo_client():
    return MongoClient(os.getenv("MONGO_URI"))


def get_database():
    return get_mongo_client()[os.getenv("DATABASE_NAME")]


def get_law_index():
    return init_pinecone_client().Index(LAW_INDEX_NAME)
