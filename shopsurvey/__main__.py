import logging

from . import create_app
from .config import Settings


def main():
    settings = Settings()
    logging.basicConfig(
        level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger = logging.getLogger("shopsurvey")

    app = create_app()
    store = app.extensions["survey_store"]
    logger.info(f"Server listening on port {app.config['PORT']}. DB file: {app.config['DB_FILE']}")
    try:
        app.run(host=app.config["HOST"], port=app.config["PORT"], threaded=True)
    finally:
        with app.app_context():
            store.close()


if __name__ == "__main__":
    main()
