import logging

from flask import Flask, render_template

import config
from blueprints.coverage import DATASET_EXTENSION, coverage_bp
from shared.dataset import load_dataset_or_empty

logger = logging.getLogger(__name__)


def create_app(dataset=None, config_overrides=None):
    """
    Build the Flask application.

    The ZIP dataset is loaded once here, before any request is served, and
    shared read-only by all requests. Pass ``dataset`` to skip file loading.
    """
    app = Flask(__name__)
    app.config.update(
        ZIP_DATA_FILE=config.ZIP_DATA_FILE,
        CLUSTER_DATA_FILE=config.CLUSTER_DATA_FILE,
    )
    if config_overrides:
        app.config.update(config_overrides)

    if dataset is None:
        dataset = load_dataset_or_empty(app.config["ZIP_DATA_FILE"])
    app.extensions[DATASET_EXTENSION] = dataset

    app.register_blueprint(coverage_bp)

    @app.route("/")
    def index():
        """Render the coverage chart page."""
        return render_template("index.html")

    return app


if __name__ == "__main__":
    logging.basicConfig(
        level=config.LOG_LEVEL,
        format='%(asctime)s - %(levelname)s - %(message)s',
    )
    app = create_app()
    logger.info("Backend API running on port %d", config.PORT)
    app.run(debug=config.DEBUG, port=config.PORT)
