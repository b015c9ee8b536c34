# Purpose: Shared fixtures for the Points Converter API tests.

import json

import pytest

from points_api.schemas import ConversionData


@pytest.fixture
def sample_document():
    """
    A small but realistic conversions.json, including a top-level key
    the API does not know about.
    """
    return {
        "lastUpdated": "2025-01-01T00:00:00Z",
        "dataSource": "manual-entry",
        "config": {"defaultDollarValue": 0.01, "maxSteps": 3},
        "programs": {
            "chase-ur": {
                "name": "Chase Ultimate Rewards",
                "shortName": "Chase UR",
                "type": "bank",
                "dollarValue": 0.02
            },
            "united": {
                "name": "United MileagePlus",
                "shortName": "United",
                "type": "airline",
                "dollarValue": 0.012
            }
        },
        "conversions": [
            {
                "from": "chase-ur",
                "to": "united",
                "rate": 1.0,
                "bonus": False,
                "bonusRate": None,
                "instantTransfer": True,
                "lastUpdated": "2025-01-01T00:00:00Z"
            }
        ],
        "schemaVersion": 2
    }


@pytest.fixture
def sample_data(sample_document):
    return ConversionData.model_validate(sample_document)


@pytest.fixture
def in_container_dir(tmp_path, monkeypatch):
    """
    Runs the test from an empty directory (the container layout) and
    returns a helper that drops conversions.json into it.
    """
    monkeypatch.chdir(tmp_path)

    def write(content):
        path = tmp_path / "conversions.json"
        if isinstance(content, (dict, list)):
            content = json.dumps(content)
        path.write_text(content, encoding="utf-8")
        return path

    return write
