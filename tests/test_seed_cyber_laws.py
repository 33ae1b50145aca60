from types import SimpleNamespace

import numpy as np
from pymongo import UpdateOne

from add_description import seed_cyber_laws as seed

GDPR = {
    "LawID": 1,
    "Country": "European Union",
    "Title": "General Data Protection Regulation (GDPR)",
    "Summary": "Comprehensive data protection law.",
    "KeyPoints": ["Right to be forgotten", "Data portability"],
    "Penalties": "Up to 4% of global revenue",
}


class FakeLawCollection:
    def __init__(self, docs=()):
        self.docs = list(docs)
        self.bulk_calls = []

    def bulk_write(self, ops):
        self.bulk_calls.append(ops)
        return SimpleNamespace(upserted_count=len(ops))

    def find(self, query, projection=None):
        return [doc for doc in self.docs if not doc.get("Summary")]


class FakeOpenAI:
    def __init__(self):
        self.prompts = []
        self.chat = SimpleNamespace(completions=SimpleNamespace(create=self._create))

    def _create(self, model, messages, temperature):
        self.prompts.append(messages[0]["content"])
        message = SimpleNamespace(content="  A short summary.  ")
        return SimpleNamespace(choices=[SimpleNamespace(message=message)])


class FakeEncoder:
    def __init__(self):
        self.texts = None

    def encode(self, texts, normalize_embeddings=False):
        self.texts = texts
        return np.ones((len(texts), 3), dtype=np.float32)


class FakeIndex:
    def __init__(self):
        self.vectors = None

    def upsert(self, vectors):
        self.vectors = vectors


def test_trim_to_word_limit():
    assert seed.trim_to_word_limit("one two three", limit=2) == "one two"
    assert seed.trim_to_word_limit("one two", limit=5) == "one two"


def test_law_passage_has_prefix_and_details():
    passage = seed.law_passage(GDPR)
    assert passage.startswith("passage: General Data Protection Regulation (GDPR). Comprehensive data protection law")
    assert "Key points: Right to be forgotten; Data portability" in passage
    assert passage.endswith("Penalties: Up to 4% of global revenue")


def test_law_passage_skips_missing_summary():
    passage = seed.law_passage({"Title": "CFAA", "Summary": ""})
    assert passage == "passage: CFAA"


def test_upsert_seed_laws_only_inserts_new_documents():
    collection = FakeLawCollection()
    assert seed.upsert_seed_laws(collection, [GDPR]) == 1
    assert collection.bulk_calls[0] == [UpdateOne({"LawID": 1}, {"$setOnInsert": GDPR}, upsert=True)]


def test_upsert_seed_laws_without_laws():
    assert seed.upsert_seed_laws(FakeLawCollection(), []) == 0


def test_fill_missing_summaries_updates_in_batches():
    docs = [dict(GDPR, LawID=i, Summary="") for i in range(1, 8)] + [GDPR]
    collection = FakeLawCollection(docs)
    client = FakeOpenAI()

    assert seed.fill_missing_summaries(collection, client, batch_size=5, pause=0) == 7

    assert [len(ops) for ops in collection.bulk_calls] == [5, 2]
    assert collection.bulk_calls[0][0] == UpdateOne({"LawID": 1}, {"$set": {"Summary": "A short summary."}})
    assert "General Data Protection Regulation (GDPR)" in client.prompts[0]


def test_upsert_embeddings_uses_law_ids_and_metadata():
    index, encoder = FakeIndex(), FakeEncoder()
    assert seed.upsert_embeddings(index, encoder, [GDPR]) == 1
    assert encoder.texts[0].startswith("passage: ")
    vector = index.vectors[0]
    assert vector["id"] == "1"
    assert vector["values"] == [1.0, 1.0, 1.0]
    assert vector["metadata"] == {"LawID": 1, "Country": "European Union", "Title": GDPR["Title"]}


def test_upsert_embeddings_without_laws():
    assert seed.upsert_embeddings(FakeIndex(), FakeEncoder(), []) == 0
