"""Shared pytest fixtures.

Datasets are built in memory so no test depends on the bundled data file.
"""

from __future__ import annotations

import pytest

from app import create_app
from shared.dataset import ZipDataset, ZipRecord

ATLANTA_RECORDS = [
    {"zip": "30301", "lat": 33.75, "lng": -84.39, "population": 1000},
    {"zip": "30302", "lat": 33.76, "lng": -84.40, "population": 2000},
]

# Downtown Raleigh origin with neighbours at increasing distances
RALEIGH_RECORDS = [
    {"zip": "27601", "lat": 35.7796, "lng": -78.6382, "population": 8000},
    {"zip": "27610", "lat": 35.75, "lng": -78.55, "population": 80000},  # ~5.3 mi
    {"zip": "27605", "lat": 35.795, "lng": -78.655, "population": 5000},  # ~1.4 mi
    {"zip": "27513", "lat": 35.80, "lng": -78.80, "population": 40000},  # ~9.2 mi
    {"zip": "27701", "lat": 35.99, "lng": -78.90, "population": 60000},  # ~20.6 mi
    {"zip": "28202", "lat": 35.227, "lng": -80.843, "population": 11000},  # ~130 mi
]


def make_dataset(raw: list[dict]) -> ZipDataset:
    return ZipDataset(ZipRecord(**item) for item in raw)


@pytest.fixture
def atlanta_dataset() -> ZipDataset:
    return make_dataset(ATLANTA_RECORDS)


@pytest.fixture
def raleigh_dataset() -> ZipDataset:
    return make_dataset(RALEIGH_RECORDS)


@pytest.fixture
def app(raleigh_dataset, tmp_path):
    return create_app(
        dataset=raleigh_dataset,
        config_overrides={
            "TESTING": True,
            "CLUSTER_DATA_FILE": str(tmp_path / "zip_clusters.json"),
        },
    )


@pytest.fixture
def client(app):
    return app.test_client()
