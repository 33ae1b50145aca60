"""
Offline batch job for the laws collection.

1. Upserts the seed cyber laws into MongoDB.
2. Writes an AI summary for every law that has none.
3. Embeds every law and upserts the vectors into the Pinecone index used by
   the Finding Suitable Law page.

Run from the repository root: python -m add_description.seed_cyber_laws
"""
import logging
import os
import time

from dotenv import load_dotenv
from pymongo import MongoClient, UpdateOne

from content import CYBER_LAWS

load_dotenv()

logger = logging.getLogger(__name__)

COLLECTION_NAME = "laws"
INDEX_NAME = os.getenv("PINECONE_LAW_INDEX", "cyber-laws")
EMBEDDING_DIMENSION = 1024
BATCH_SIZE = 5
SUMMARY_MODEL = os.getenv("OPENAI_SUMMARY_MODEL", "gpt-3.5-turbo")


def trim_to_word_limit(text, limit=300):
    words = text.split()
    return " ".join(words[:limit]) if len(words) > limit else text


def law_passage(law):
    """Text embedded for a law; e5 models expect the passage: prefix."""
    parts = [law.get("Title", ""), law.get("Summary", "")]
    key_points = law.get("KeyPoints") or []
    if key_points:
        parts.append("Key points: " + "; ".join(key_points))
    if law.get("Penalties"):
        parts.append(f"Penalties: {law['Penalties']}")
    text = ". ".join(part.strip().rstrip(".") for part in parts if part and part.strip())
    return f"passage: {trim_to_word_limit(text)}"


def upsert_seed_laws(collection, laws=CYBER_LAWS):
    ops = [UpdateOne({"LawID": law["LawID"]}, {"$setOnInsert": dict(law)}, upsert=True) for law in laws]
    if not ops:
        return 0
    result = collection.bulk_write(ops)
    return result.upserted_count


def summarize_law(openai_client, law):
    prompt = f"""Summarize the following cyber law in about 100 words of English.
Law: {law.get("Title", "")}
Jurisdiction: {law.get("Country", "")}

Information:
{trim_to_word_limit(" ".join(law.get("KeyPoints") or []) + " " + law.get("Penalties", ""))}

The answer should be concise and precise: include the main provisions, what the law requires, which rights it
concerns and whom it protects."""
    response = openai_client.chat.completions.create(
        model=SUMMARY_MODEL,
        messages=[{"role": "user", "content": prompt}],
        temperature=0.7,
    )
    return response.choices[0].message.content.strip()


def fill_missing_summaries(collection, openai_client, batch_size=BATCH_SIZE, pause=0.5):
    docs = list(collection.find(
        {"$or": [{"Summary": {"$exists": False}}, {"Summary": ""}]},
        {"LawID": 1, "Title": 1, "Country": 1, "KeyPoints": 1, "Penalties": 1},
    ))
    total = len(docs)
    logger.info("Total laws to summarize: %d", total)

    for i in range(0, total, batch_size):
        bulk_ops = []
        for doc in docs[i:i + batch_size]:
            summary = summarize_law(openai_client, doc)
            bulk_ops.append(UpdateOne({"LawID": doc["LawID"]}, {"$set": {"Summary": summary}}))
            logger.info("Updated law %s with summary.", doc["LawID"])
            time.sleep(pause)
        if bulk_ops:
            collection.bulk_write(bulk_ops)
            logger.info("Processed %d / %d", min(i + batch_size, total), total)
    return total


def ensure_index(pinecone_client, name=INDEX_NAME):
    from pinecone import ServerlessSpec

    if name not in pinecone_client.list_indexes().names():
        pinecone_client.create_index(
            name=name,
            dimension=EMBEDDING_DIMENSION,
            metric="cosine",
            spec=ServerlessSpec(cloud="aws", region="us-east-1"),
        )
    return pinecone_client.Index(name)


def upsert_embeddings(index, model, laws):
    laws = list(laws)
    if not laws:
        return 0
    embeddings = model.encode([law_passage(law) for law in laws], normalize_embeddings=True)
    vectors = [
        {
            "id": str(law["LawID"]),
            "values": embedding.tolist(),
            "metadata": {"LawID": law["LawID"], "Country": law.get("Country", ""), "Title": law.get("Title", "")},
        }
        for law, embedding in zip(laws, embeddings)
    ]
    index.upsert(vectors=vectors)
    return len(vectors)


def main():
    import pinecone
    from openai import OpenAI
    from sentence_transformers import SentenceTransformer

    from app_resources import EMBEDDING_MODEL

    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    mongo_client = MongoClient(os.getenv("MONGO_URI"))
    collection = mongo_client[os.getenv("DATABASE_NAME")][COLLECTION_NAME]

    inserted = upsert_seed_laws(collection)
    logger.info("Inserted %d new laws", inserted)

    fill_missing_summaries(collection, OpenAI(api_key=os.getenv("OPEN_AI")))

    index = ensure_index(pinecone.Pinecone(api_key=os.getenv("PINECONE_API_KEY")))
    model = SentenceTransformer(EMBEDDING_MODEL)
    count = upsert_embeddings(index, model, collection.find({}, {"_id": 0}))
    logger.info("Upserted %d law vectors into %s", count, INDEX_NAME)


if __name__ == "__main__":
    main()
