from app.extensions import db
from app.utils.enums import Grade
from datetime import datetime

class Feedback(db.Model):
    __tablename__ = "feedbacks"

    id = db.Column(db.Integer, primary_key=True)
    student_name = db.Column(db.String(120), nullable=False)
    reg_number = db.Column(db.String(10), nullable=False, index=True)
    email = db.Column(db.String(120), nullable=False)
    mobile = db.Column(db.String(10), nullable=False)
    faculty = db.Column(db.String(120), nullable=False, index=True)
    batch_id = db.Column(db.String(50), nullable=True)

    # Rubric ratings, 0-100, NULL when not rated
    attendance = db.Column(db.Float, nullable=True)
    dress_code = db.Column(db.Float, nullable=True)
    discipline = db.Column(db.Float, nullable=True)
    participation = db.Column(db.Float, nullable=True)
    teamwork = db.Column(db.Float, nullable=True)
    presentation_content = db.Column(db.Float, nullable=True)
    presentation_delivery = db.Column(db.Float, nullable=True)
    communication = db.Column(db.Float, nullable=True)
    analytical = db.Column(db.Float, nullable=True)
    creativity = db.Column(db.Float, nullable=True)
    ethics = db.Column(db.Float, nullable=True)
    emotional = db.Column(db.Float, nullable=True)
    overall_engagement = db.Column(db.Float, nullable=True)

    quiz_marks = db.Column(db.Float, nullable=True)
    weighted_score = db.Column(db.Float, nullable=False, default=0)
    grade = db.Column(db.String(2), nullable=False, default=Grade.UNSCORED.value)

    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False, index=True)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)

    def to_dict(self):
        return {
            "id": self.id,
            "studentName": self.student_name,
            "regNumber": self.reg_number,
            "email": self.email,
            "mobile": self.mobile,
            "faculty": self.faculty,
            "batchId": self.batch_id,
            "attendance": self.attendance,
            "dressCode": self.dress_code,
            "discipline": self.discipline,
            "participation": self.participation,
            "teamwork": self.teamwork,
            "presentationContent": self.presentation_content,
            "presentationDelivery": self.presentation_delivery,
            "communication": self.communication,
            "analytical": self.analytical,
            "creativity": self.creativity,
            "ethics": self.ethics,
            "emotional": self.emotional,
            "overallEngagement": self.overall_engagement,
            "quizMarks": self.quiz_marks,
            "weightedScore": self.weighted_score,
            "grade": self.grade,
            "createdAt": self.created_at.isoformat() if self.created_at else None,
            "updatedAt": self.updated_at.isoformat() if self.updated_at else None,
        }
