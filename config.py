import os
from dotenv import load_dotenv

load_dotenv()

BASE_DIR = os.path.dirname(os.path.abspath(__file__))
DATA_DIR = os.path.join(BASE_DIR, "static", "data")

# Server
PORT = int(os.environ.get("PORT", "3001"))
DEBUG = os.environ.get("FLASK_DEBUG", "").lower() in ("1", "true", "yes")
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()

# Static data files, loaded relative to the project root unless overridden
ZIP_DATA_FILE = os.environ.get(
    "ZIP_DATA_FILE", os.path.join(DATA_DIR, "zip_population_coordinates.json")
)
CLUSTER_DATA_FILE = os.environ.get(
    "CLUSTER_DATA_FILE", os.path.join(DATA_DIR, "zip_clusters.json")
)
