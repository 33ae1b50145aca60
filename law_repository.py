import logging
import re

import streamlit as st
from pymongo.errors import PyMongoError

logger = logging.getLogger(__name__)

COLLECTION_NAME = "laws"
PAGE_SIZE = 10


def get_laws_collection():
    from app_resources import get_database
    return get_database()[COLLECTION_NAME]


def build_law_filters(law_id=0, title=None, country=None):
    filters = {}
    if law_id and law_id > 0:
        filters["LawID"] = int(law_id)
    if title:
        filters["Title"] = {"$regex": re.escape(title), "$options": "i"}
    if country and country != "All":
        filters["Country"] = country
    return filters


# Query laws with pagination and filtering
def query_laws(collection, filters=None, skip=0, limit=PAGE_SIZE):
    try:
        pipeline = []
        if filters:
            pipeline.append({"$match": filters})
        pipeline.append({"$sort": {"LawID": 1}})
        pipeline.append({"$skip": skip})
        pipeline.append({"$limit": limit})
        return list(collection.aggregate(pipeline))
    except PyMongoError as e:
        logger.exception("Error querying laws")
        st.error(f"Error querying laws: {str(e)}")
        return []


def count_laws(collection, filters=None):
    try:
        if filters:
            return collection.count_documents(filters)
        return collection.estimated_document_count()
    except PyMongoError as e:
        logger.exception("Error counting laws")
        st.error(f"Error counting laws: {str(e)}")
        return 0


def get_countries(collection):
    try:
        return sorted(c for c in collection.distinct("Country") if c)
    except PyMongoError as e:
        logger.exception("Error listing countries")
        st.error(f"Error listing countries: {str(e)}")
        return []


def load_law(collection, law_id):
    try:
        return collection.find_one({"LawID": law_id}, {"_id": 0})
    except PyMongoError as e:
        logger.exception("Error fetching law %s", law_id)
        st.error(f"Error fetching full details for law ID {law_id}: {str(e)}")
        return None


def total_pages(total, page_size=PAGE_SIZE):
    return max(1, (total + page_size - 1) // page_size)
