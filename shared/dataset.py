"""
ZIP population dataset for ZIP Population Coverage.

Loads ZIP centroids and populations from a static JSON file. Records are
validated with pydantic at load time and held in a read-only repository
object for the lifetime of the process.
"""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Iterable, Iterator

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from shared.errors import DatasetLoadError, DatasetMissingError

logger = logging.getLogger(__name__)


class ZipRecord(BaseModel):
    """One ZIP code centroid with its population (Value Object)."""

    zip: str
    lat: float = Field(ge=-90, le=90)
    lng: float = Field(ge=-180, le=180)
    population: int = Field(ge=0)

    # Strict: "33.75" or true are rejected rather than coerced to numbers
    model_config = ConfigDict(frozen=True, strict=True)


class ZipDataset:
    """Read-only, ordered collection of ZipRecords.

    Iteration follows the order of the source file. There is no mutation
    API; build a new dataset instead.
    """

    def __init__(self, records: Iterable[ZipRecord] = ()) -> None:
        self._records = tuple(records)
        self._by_zip: dict[str, ZipRecord] = {}
        for record in self._records:
            if record.zip in self._by_zip:
                raise DatasetLoadError(f"Duplicate ZIP code in dataset: {record.zip}")
            self._by_zip[record.zip] = record

    @classmethod
    def from_json_file(cls, file_path: Path | str) -> "ZipDataset":
        """Load and validate a JSON array of {zip, lat, lng, population} objects."""
        path = Path(file_path)
        if not path.exists():
            raise DatasetMissingError(f"ZIP data file not found: {path}")

        try:
            with open(path, "r", encoding="utf-8") as f:
                raw = json.load(f)
        except json.JSONDecodeError as e:
            raise DatasetLoadError(f"Invalid JSON in {path}: {e}") from e
        except UnicodeDecodeError as e:
            raise DatasetLoadError(f"ZIP data file {path} is not valid UTF-8: {e}") from e
        except OSError as e:
            raise DatasetLoadError(f"Cannot read ZIP data file {path}: {e}") from e

        return cls.from_raw(raw)

    @classmethod
    def from_raw(cls, raw) -> "ZipDataset":
        """Validate already-parsed JSON data."""
        if not isinstance(raw, list):
            raise DatasetLoadError(
                f"ZIP data must be a JSON array, got {type(raw).__name__}"
            )

        records = []
        for index, item in enumerate(raw):
            try:
                records.append(ZipRecord.model_validate(item))
            except ValidationError as e:
                raise DatasetLoadError(f"Invalid ZIP record at index {index}: {e}") from e

        return cls(records)

    def get(self, zip_code: str) -> ZipRecord | None:
        return self._by_zip.get(zip_code)

    def __contains__(self, zip_code) -> bool:
        return zip_code in self._by_zip

    def __iter__(self) -> Iterator[ZipRecord]:
        return iter(self._records)

    def __len__(self) -> int:
        return len(self._records)

    @property
    def records(self) -> tuple[ZipRecord, ...]:
        return self._records


def load_dataset_or_empty(file_path: Path | str) -> ZipDataset:
    """
    Load the ZIP dataset, falling back to an empty one.

    A missing or malformed file is logged and the service keeps running in
    degraded mode: every coverage query then reports ZIP not found.
    """
    try:
        dataset = ZipDataset.from_json_file(file_path)
    except DatasetMissingError:
        logger.warning("ZIP data file not found: %s", file_path)
        return ZipDataset()
    except DatasetLoadError as e:
        logger.error("Error loading ZIP data: %s", e)
        return ZipDataset()

    logger.info("Loaded %d ZIP records from %s", len(dataset), file_path)
    return dataset
