"""
Coverage Blueprint - Population within radius bands around a ZIP code.
Part of ZIP Population Coverage.
"""
import logging

from flask import Blueprint, Response, current_app, jsonify, request
from pydantic import BaseModel, ValidationError

from shared.clusters import load_cluster_data
from shared.coverage import (
    compute_coverage, coverage_csv, csv_filename, lookup_zips, summarize_coverage
)
from shared.errors import ZipNotFoundError

logger = logging.getLogger(__name__)

# Create blueprint
coverage_bp = Blueprint('coverage', __name__, url_prefix='/api')

DATASET_EXTENSION = "zip_dataset"


class ZipDetailsRequest(BaseModel):
    """Body of POST /api/zips/details."""

    zips: list[str]


def get_dataset():
    """Dataset loaded once by the application factory."""
    return current_app.extensions[DATASET_EXTENSION]


def zip_not_found(zip_code):
    logger.info("Coverage requested for unknown ZIP %s", zip_code)
    return jsonify({"error": "ZIP not found"}), 404


# =============================================================================
# ROUTES
# =============================================================================
@coverage_bp.route("/coverage/<zip_code>")
def get_coverage(zip_code):
    """
    API endpoint for population coverage bands.
    Returns 22 bands (5 to 110 miles) with population, ZIP count and ZIPs.
    """
    try:
        bands = compute_coverage(zip_code, get_dataset())
    except ZipNotFoundError:
        return zip_not_found(zip_code)

    return jsonify([band.to_json() for band in bands])


@coverage_bp.route("/coverage/<zip_code>/summary")
def get_coverage_summary(zip_code):
    """
    API endpoint for coverage bands with marginal gains.
    Used by the bar chart to highlight the largest population jump.
    """
    try:
        bands = compute_coverage(zip_code, get_dataset())
    except ZipNotFoundError:
        return zip_not_found(zip_code)

    return jsonify([band.to_json() for band in summarize_coverage(bands)])


@coverage_bp.route("/coverage/<zip_code>/export")
def export_coverage(zip_code):
    """Download per-radius ZIP membership as CSV."""
    try:
        bands = compute_coverage(zip_code, get_dataset())
    except ZipNotFoundError:
        return zip_not_found(zip_code)

    return Response(
        coverage_csv(bands),
        mimetype="text/csv",
        headers={"Content-Disposition": f"attachment; filename={csv_filename(zip_code)}"},
    )


@coverage_bp.route("/zips/details", methods=["POST"])
def get_zip_details():
    """API endpoint returning full records for the requested ZIP codes."""
    payload = request.get_json(silent=True)
    if payload is None:
        return jsonify({"error": "Request body must be JSON"}), 400

    try:
        details = ZipDetailsRequest.model_validate(payload)
    except ValidationError as e:
        errors = e.errors(include_url=False, include_context=False)
        return jsonify({"error": "Invalid request body", "details": errors}), 400

    records = lookup_zips(details.zips, get_dataset())
    return jsonify([record.model_dump(mode="json") for record in records])


@coverage_bp.route("/zip-clusters")
def get_zip_clusters():
    """API endpoint passing through the precomputed cluster file."""
    data = load_cluster_data(current_app.config["CLUSTER_DATA_FILE"])
    if data is None:
        return jsonify({"error": "Cluster data not found"}), 404
    return jsonify(data)


@coverage_bp.route("/health")
def health():
    """Report whether ZIP data was loaded."""
    return jsonify({"status": "ok", "zip_count": len(get_dataset())})
