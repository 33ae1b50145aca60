from collections import Counter

from content import (
    ARTICLES,
    CYBER_LAWS,
    EXPERIMENT_STATUS_KEYS,
    EXPERIMENTS,
    EXPERTS,
    REGIONS,
    TEMPLATE_CATEGORIES,
    TEMPLATES,
    TIMELINE,
)
from localization import TRANSLATIONS


def test_templates_belong_to_known_categories():
    counts = Counter(template["category"] for template in TEMPLATES)
    assert set(counts) == set(TEMPLATE_CATEGORIES)
    assert counts == {"Data Privacy": 3, "Intellectual Property": 2, "Contracts & Agreements": 3}


def test_ids_are_unique():
    for items in (TEMPLATES, ARTICLES, EXPERIMENTS, EXPERTS):
        ids = [item["id"] for item in items]
        assert len(ids) == len(set(ids))
    law_ids = [law["LawID"] for law in CYBER_LAWS]
    assert len(law_ids) == len(set(law_ids))


def test_every_template_has_content():
    assert all(template["content"].strip() for template in TEMPLATES)


def test_experiment_statuses_are_translated():
    for experiment in EXPERIMENTS:
        assert EXPERIMENT_STATUS_KEYS[experiment["status"]] in TRANSLATIONS["en"]


def test_regions_are_translated():
    for key, name, flag in REGIONS:
        assert key in TRANSLATIONS["en"]
        assert name


def test_timeline_is_chronological_and_typed():
    years = [int(milestone["year"]) for milestone in TIMELINE]
    assert years == sorted(years)
    assert {milestone["type"] for milestone in TIMELINE} == {"law", "ai"}


def test_seed_laws_have_required_fields():
    for law in CYBER_LAWS:
        assert {"LawID", "Country", "Title", "Summary", "KeyPoints", "Penalties"} <= set(law)
        assert law["KeyPoints"]
