import json
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

from oai_rfc1807.core.models import BibliographicRecord


def record_data(**overrides: Any) -> dict[str, Any]:
    """Plain-dict record, as it would be stored in a JSON file."""
    publication = {
        "id": 11,
        "locale": "en",
        "title": {"en": "Soil Carbon in Alpine Meadows", "fr": "Carbone des sols"},
        "abstract": {"en": "<p>We measured <em>soil</em> carbon.</p>"},
        "pages": "1-10",
        "date_published": "2020-05-04",
        "coverage": {"en": "Alps, 2015-2019"},
        "sponsor": {"en": "National Science Fund"},
        "authors": [
            {
                "given_name": {"en": "Ada"},
                "family_name": {"en": "Lovelace"},
                "affiliation": {"en": "Analytical Society"},
            },
            {"given_name": {"en": "Charles"}, "family_name": {"en": "Babbage"}},
        ],
    }
    publication.update(overrides.pop("publication", {}))
    data: dict[str, Any] = {
        "article": {
            "id": 7,
            "best_id": "soil-carbon",
            "current_publication_id": 11,
            "publications": [publication],
        },
        "journal": {
            "id": 1,
            "path": "ecology",
            "name": {"en": "Journal of Ecology", "fr": "Revue d'écologie"},
            "publisher_institution": "",
            "primary_locale": "en",
            "supported_locales": ["en", "fr"],
            "publishing_mode": "open",
            "license_terms": {"en": "<p>Licensed under <b>CC BY</b>.</p>"},
        },
        "section": {"id": 3, "identify_type": {"en": "Peer-reviewed Article"}},
        "issue": {"id": 5, "identification": "Vol 1 No 2 (2020)"},
        "datestamp": "2020-05-04T10:00:00Z",
        "keywords": {"en": ["soil", "carbon"]},
        "subjects": {"en": ["ecology"]},
    }
    for key, value in overrides.items():
        if key in ("article", "journal", "section", "issue"):
            data[key] = {**data[key], **value}
        else:
            data[key] = value
    return data


@pytest.fixture
def make_record() -> Callable[..., BibliographicRecord]:
    def _make(**overrides: Any) -> BibliographicRecord:
        return BibliographicRecord.model_validate(record_data(**overrides))

    return _make


@pytest.fixture
def record(make_record: Callable[..., BibliographicRecord]) -> BibliographicRecord:
    return make_record()


@pytest.fixture
def write_record(tmp_path: Path) -> Callable[..., Path]:
    """Write a record JSON file under tmp_path and return its path."""

    def _write(name: str = "record.json", **overrides: Any) -> Path:
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(record_data(**overrides)), encoding="utf-8")
        return path

    return _write
