from werkzeug.exceptions import HTTPException
from app.utils.http import error
from .home_routes import home_bp
from .feedback_routes import feedback_bp

def register_routes(app):
    app.register_blueprint(home_bp)
    app.register_blueprint(feedback_bp)

def register_error_handlers(app):
    @app.errorhandler(HTTPException)
    def handle_http_exception(e):
        return error(e.name.upper().replace(" ", "_"), e.description, e.code)

    @app.errorhandler(Exception)
    def handle_unexpected(e):
        app.logger.exception("Unhandled error on request")
        return error("SERVER_ERROR", "Server Error", 500)
