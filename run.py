import atexit
import logging
from app import create_app, dispose_engine
from config import Config

logging.basicConfig(
    level=getattr(logging, Config.LOG_LEVEL, logging.INFO),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)

app = create_app()
atexit.register(dispose_engine, app)

if __name__ == "__main__":
    logging.getLogger(__name__).info("Server running on port %s", app.config["PORT"])
    app.run(host="0.0.0.0", port=app.config["PORT"])
