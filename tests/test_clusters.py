"""Tests for the cluster file loader."""

from __future__ import annotations

import json
import logging

from shared.clusters import load_cluster_data


def test_valid_file_is_returned_as_is(tmp_path):
    path = tmp_path / "clusters.json"
    path.write_text(json.dumps({"clusters": [[1, 2]]}), encoding="utf-8")

    assert load_cluster_data(path) == {"clusters": [[1, 2]]}


def test_missing_file_returns_none(tmp_path, caplog):
    with caplog.at_level(logging.WARNING, logger="shared.clusters"):
        assert load_cluster_data(tmp_path / "missing.json") is None
    assert "not found" in caplog.text


def test_invalid_utf8_returns_none(tmp_path, caplog):
    path = tmp_path / "clusters.json"
    path.write_bytes(b"\xff\xfe")

    with caplog.at_level(logging.ERROR, logger="shared.clusters"):
        assert load_cluster_data(path) is None
    assert "Invalid cluster data file" in caplog.text


def test_invalid_json_returns_none(tmp_path):
    path = tmp_path / "clusters.json"
    path.write_text("{oops", encoding="utf-8")

    assert load_cluster_data(path) is None


def test_directory_returns_none(tmp_path, caplog):
    with caplog.at_level(logging.ERROR, logger="shared.clusters"):
        assert load_cluster_data(tmp_path) is None
    assert "Cannot read cluster data file" in caplog.text
