from flask import request
from app.utils.http import ok, error, json_body, validate_schema
from app.schemas.feedback_schema import FeedbackSchema, ListFeedbackQuerySchema
from app.services.feedback_service import create_feedback, list_feedbacks
from app.utils.errors import PersistenceError

def create_feedback_handler():
    data, errors = validate_schema(FeedbackSchema, json_body())
    if errors:
        return error("VALIDATION_ERROR", "Invalid feedback data", 400, details=errors)

    try:
        feedback = create_feedback(data)
    except PersistenceError:
        return error("SERVER_ERROR", "Server Error", 500)

    return ok({"message": "Feedback saved", "data": feedback.to_dict()}, 201)

def list_feedbacks_handler():
    params, errors = validate_schema(ListFeedbackQuerySchema, request.args)
    if errors:
        return error("VALIDATION_ERROR", "Invalid query parameters", 400, details=errors)

    try:
        feedbacks = list_feedbacks(
            faculty=(params["faculty"] or "").strip() or None,
            reg_number=(params["reg_number"] or "").strip() or None,
        )
    except PersistenceError:
        return error("SERVER_ERROR", "Server Error", 500)

    return ok([f.to_dict() for f in feedbacks])
