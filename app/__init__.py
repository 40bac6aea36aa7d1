from flask import Flask
from app.extensions import db, cors, migrate
from app.routes import register_routes, register_error_handlers
from app.utils.errors import ConfigurationError

REQUIRED_SETTINGS = ("SQLALCHEMY_DATABASE_URI",)

def create_app(overrides=None):
    app = Flask(__name__)
    app.config.from_object("config.Config")
    if overrides:
        app.config.update(overrides)

    missing = [key for key in REQUIRED_SETTINGS if not app.config.get(key)]
    if missing:
        raise ConfigurationError(f"Missing required configuration: {', '.join(missing)}")

    app.json.sort_keys = False

    # Initialize database
    db.init_app(app)

    # Initialize Flask-Migrate
    migrate.init_app(app, db)

    # CORS Configuration
    cors.init_app(app,
                  origins=app.config.get("CORS_ORIGINS") or "*",
                  allow_headers=["Content-Type"],
                  methods=["GET", "POST", "OPTIONS"])

    register_routes(app)
    register_error_handlers(app)

    return app

def dispose_engine(app):
    """Release every pooled connection held by ``app``'s engine."""
    with app.app_context():
        db.session.remove()
        db.engine.dispose()
