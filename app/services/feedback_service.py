import logging
from typing import Any, Dict, List, Optional
from sqlalchemy.exc import SQLAlchemyError
from app.extensions import db
from app.models.feedback import Feedback
from app.services.scoring_service import RATING_FIELDS, compute_score
from app.utils.errors import PersistenceError

logger = logging.getLogger(__name__)

def create_feedback(data: Dict[str, Any]) -> Feedback:
    """
    Scores a validated submission and stores it.
    Any weighted_score/grade sent by the client is discarded and recomputed.
    """
    record = {k: v for k, v in data.items() if k not in ("weighted_score", "grade")}
    weighted_score, grade = compute_score(
        {f: record.get(f) for f in RATING_FIELDS},
        record.get("quiz_marks"),
    )

    feedback = Feedback(weighted_score=weighted_score, grade=grade, **record)
    try:
        db.session.add(feedback)
        db.session.commit()
    except SQLAlchemyError as e:
        db.session.rollback()
        logger.exception("Failed to save feedback for %s", record.get("reg_number"))
        raise PersistenceError("Could not save feedback") from e

    logger.info("Saved feedback %s for %s: %.2f (%s)", feedback.id, feedback.reg_number, weighted_score, grade)
    return feedback

def list_feedbacks(faculty: Optional[str] = None, reg_number: Optional[str] = None) -> List[Feedback]:
    """
    Retrieves feedback newest first, optionally filtered by faculty and
    registration number (matched case-insensitively).
    """
    query = Feedback.query
    if faculty:
        query = query.filter(Feedback.faculty == faculty)
    if reg_number:
        query = query.filter(Feedback.reg_number == reg_number.upper())

    try:
        return query.order_by(Feedback.created_at.desc(), Feedback.id.desc()).all()
    except SQLAlchemyError as e:
        db.session.rollback()
        logger.exception("Failed to list feedback")
        raise PersistenceError("Could not load feedback") from e
