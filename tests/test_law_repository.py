import re

import pytest
from pymongo.errors import PyMongoError

import law_repository


class FakeLaws:
    def __init__(self):
        self.pipelines = []
        self.counted = []

    def aggregate(self, pipeline):
        self.pipelines.append(pipeline)
        return iter([{"LawID": 1, "Title": "GDPR"}])

    def count_documents(self, filters):
        self.counted.append(filters)
        return 3

    def estimated_document_count(self):
        return 7

    def distinct(self, field):
        return ["United States", None, "European Union", ""]

    def find_one(self, query, projection=None):
        return {"LawID": query["LawID"], "Title": "GDPR"}


class BrokenLaws:
    def __getattr__(self, name):
        def fail(*args, **kwargs):
            raise PyMongoError("timeout")
        return fail


def test_build_law_filters_combines_criteria():
    filters = law_repository.build_law_filters(law_id=4, title="privacy", country="Brazil")
    assert filters == {
        "LawID": 4,
        "Title": {"$regex": "privacy", "$options": "i"},
        "Country": "Brazil",
    }


def test_build_law_filters_ignores_defaults():
    assert law_repository.build_law_filters(law_id=0, title="", country="All") == {}


def test_build_law_filters_matches_title_literally():
    pattern = law_repository.build_law_filters(title="C++ (draft)")["Title"]["$regex"]
    assert re.fullmatch(pattern, "C++ (draft)")
    assert not re.search(pattern, "CCC draft")


def test_query_laws_sorts_and_paginates():
    laws = FakeLaws()
    result = law_repository.query_laws(laws, {"Country": "Japan"}, skip=10, limit=10)
    assert result == [{"LawID": 1, "Title": "GDPR"}]
    assert laws.pipelines[0] == [
        {"$match": {"Country": "Japan"}},
        {"$sort": {"LawID": 1}},
        {"$skip": 10},
        {"$limit": 10},
    ]


def test_query_laws_without_filters_skips_match():
    laws = FakeLaws()
    law_repository.query_laws(laws)
    assert laws.pipelines[0][0] == {"$sort": {"LawID": 1}}


def test_count_laws_uses_estimate_without_filters():
    laws = FakeLaws()
    assert law_repository.count_laws(laws) == 7
    assert law_repository.count_laws(laws, {"LawID": 1}) == 3


def test_get_countries_sorted_without_blanks():
    assert law_repository.get_countries(FakeLaws()) == ["European Union", "United States"]


def test_load_law():
    assert law_repository.load_law(FakeLaws(), 2)["LawID"] == 2


@pytest.mark.parametrize("total, pages", [(0, 1), (1, 1), (10, 1), (11, 2), (25, 3)])
def test_total_pages(total, pages):
    assert law_repository.total_pages(total, page_size=10) == pages


def test_errors_return_empty_results(monkeypatch):
    shown = []
    monkeypatch.setattr(law_repository.st, "error", shown.append)
    laws = BrokenLaws()
    assert law_repository.query_laws(laws) == []
    assert law_repository.count_laws(laws) == 0
    assert law_repository.get_countries(laws) == []
    assert law_repository.load_law(laws, 1) is None
    assert len(shown) == 4
