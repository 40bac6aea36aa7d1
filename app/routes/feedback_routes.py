from flask import Blueprint
from app.controllers.feedback_controller import (
    create_feedback_handler,
    list_feedbacks_handler
)

feedback_bp = Blueprint("feedback", __name__, url_prefix="/feedback")

@feedback_bp.route("", methods=["POST"])
def create_feedback():
    return create_feedback_handler()

@feedback_bp.route("", methods=["GET"])
def list_feedbacks():
    return list_feedbacks_handler()
