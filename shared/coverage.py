"""
Radius coverage calculations for ZIP Population Coverage.

For an origin ZIP, every radius band collects the ZIPs whose centroid lies
within that many miles, with their total population and count.
"""
from __future__ import annotations

import csv
import io
import logging
from typing import Iterable

from pydantic import BaseModel, ConfigDict, Field

from shared.dataset import ZipDataset, ZipRecord
from shared.errors import ZipNotFoundError
from shared.geography import distance_miles

logger = logging.getLogger(__name__)

# =============================================================================
# RADIUS BANDS (miles)
# =============================================================================
RADIUS_STEP_MILES = 5
MAX_RADIUS_MILES = 110
COVERAGE_RADII = tuple(range(RADIUS_STEP_MILES, MAX_RADIUS_MILES + 1, RADIUS_STEP_MILES))

# Written as "Radius (mi),ZIP Code"; no space after the delimiter
CSV_HEADER = ["Radius (mi)", "ZIP Code"]


class CoverageBand(BaseModel):
    """Population within ``radius`` miles of the origin."""

    radius: int
    population: int
    zip_count: int = Field(alias="zipCount")
    zips: tuple[str, ...]

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    def to_json(self) -> dict:
        return self.model_dump(mode="json", by_alias=True)


class BandSummary(CoverageBand):
    """Coverage band with the marginal gain over the previous band."""

    delta: int
    percent: float
    highlight: bool


def compute_coverage(origin_zip: str, dataset: ZipDataset) -> list[CoverageBand]:
    """
    Compute population coverage bands around ``origin_zip``.

    Returns one band per radius in COVERAGE_RADII, ascending. The origin
    itself is always part of every band. ZIPs within each band keep dataset
    order.

    Raises:
        ZipNotFoundError: origin_zip is not in the dataset
    """
    origin = dataset.get(origin_zip)
    if origin is None:
        raise ZipNotFoundError(origin_zip)

    # Distance to the origin never changes between bands
    distances = [(record, distance_miles(origin, record)) for record in dataset]

    bands = []
    for radius in COVERAGE_RADII:
        in_radius = [record for record, dist in distances if dist <= radius]
        bands.append(CoverageBand(
            radius=radius,
            population=sum(record.population for record in in_radius),
            zip_count=len(in_radius),
            zips=tuple(record.zip for record in in_radius),
        ))

    logger.debug(
        "Coverage for %s: %d ZIPs within %d mi",
        origin_zip, bands[-1].zip_count, MAX_RADIUS_MILES,
    )
    return bands


def lookup_zips(zips: Iterable[str], dataset: ZipDataset) -> list[ZipRecord]:
    """Return dataset records whose ZIP is requested, in dataset order."""
    wanted = set(zips)
    return [record for record in dataset if record.zip in wanted]


def summarize_coverage(bands: list[CoverageBand]) -> list[BandSummary]:
    """
    Add delta, percent and highlight to each band.

    - delta: population gained over the previous band (0 for the first)
    - percent: delta relative to the previous band's population, rounded
      to one decimal; 0.0 when there is no previous population
    - highlight: True only for the band with the largest positive delta
      (first one wins on ties); nothing is highlighted if no delta is > 0
    """
    deltas = []
    percents = []
    for i, band in enumerate(bands):
        if i == 0:
            deltas.append(0)
            percents.append(0.0)
            continue
        previous = bands[i - 1].population
        delta = band.population - previous
        deltas.append(delta)
        percents.append(round(delta / previous * 100, 1) if previous > 0 else 0.0)

    max_delta = 0
    highlight_index = None
    for i, delta in enumerate(deltas):
        if delta > max_delta:
            max_delta = delta
            highlight_index = i

    return [
        BandSummary(
            radius=band.radius,
            population=band.population,
            zip_count=band.zip_count,
            zips=band.zips,
            delta=deltas[i],
            percent=percents[i],
            highlight=(i == highlight_index),
        )
        for i, band in enumerate(bands)
    ]


def coverage_csv(bands: list[CoverageBand]) -> str:
    """Render (radius, zip) membership rows as CSV text."""
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow(CSV_HEADER)
    for band in bands:
        for zip_code in band.zips:
            writer.writerow([band.radius, zip_code])
    return buffer.getvalue()


def csv_filename(origin_zip: str) -> str:
    return f"zip_coverage_{origin_zip}.csv"
