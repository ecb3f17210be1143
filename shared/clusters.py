"""
ZIP cluster data loader for ZIP Population Coverage.
Serves a precomputed cluster file as-is.
"""
import json
import logging

logger = logging.getLogger(__name__)


def load_cluster_data(file_path):
    """Load cluster data from static file, or None if it is unavailable."""
    try:
        with open(file_path, 'r', encoding='utf-8') as f:
            return json.load(f)
    except FileNotFoundError:
        logger.warning("Cluster data file not found: %s", file_path)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        logger.error("Invalid cluster data file %s: %s", file_path, e)
    except OSError as e:
        logger.error("Cannot read cluster data file %s: %s", file_path, e)
    return None
