"""
Scoring Service Module

Derives the weighted score and grade band of a feedback submission from its
rubric ratings and quiz mark.
"""

from typing import Mapping, Optional, Tuple
from app.utils.enums import Grade


# Rubric fields in declaration order (model attribute names)
RATING_FIELDS = (
    "attendance",
    "dress_code",
    "discipline",
    "participation",
    "teamwork",
    "presentation_content",
    "presentation_delivery",
    "communication",
    "analytical",
    "creativity",
    "ethics",
    "emotional",
    "overall_engagement",
)

# Lower bound of each band, highest first
GRADE_BANDS = (
    (85, Grade.A_PLUS),
    (70, Grade.A),
    (55, Grade.B_PLUS),
    (40, Grade.B),
)


def average_rating(ratings: Mapping[str, Optional[float]]) -> float:
    """
    Mean of the ratings that are present.

    Absent (None) ratings count neither towards the sum nor the count,
    and an empty set averages to 0.
    """
    present = [float(ratings[f]) for f in RATING_FIELDS if ratings.get(f) is not None]
    if not present:
        return 0.0
    return sum(present) / len(present)


def grade_for(weighted_score: float) -> Grade:
    for threshold, grade in GRADE_BANDS:
        if weighted_score >= threshold:
            return grade
    return Grade.C


def compute_score(ratings: Mapping[str, Optional[float]], quiz_marks: Optional[float] = None) -> Tuple[float, str]:
    """
    Compute ``(weighted_score, grade)`` for a submission.

    Args:
        ratings: Rubric field -> value in [0, 100]; missing keys and None are absent
        quiz_marks: Quiz mark in [0, 100], treated as 0 when absent

    Returns:
        Tuple of the weighted score rounded to 2 decimals and the grade label
    """
    quiz = float(quiz_marks) if quiz_marks is not None else 0.0
    weighted_score = round((average_rating(ratings) + quiz) / 2, 2)
    return weighted_score, grade_for(weighted_score).value
