from marshmallow import Schema, fields, validate, pre_load, post_load, EXCLUDE
from app.utils.enums import Grade

REG_NUMBER_PATTERN = r"^[A-Za-z]{3}[0-9]{7}$"
MOBILE_PATTERN = r"^[0-9]{10}$"

class Mark(fields.Float):
    """Float in [0, 100] that refuses booleans instead of reading them as 0/1."""

    def __init__(self, **kwargs):
        kwargs.setdefault("allow_none", True)
        kwargs.setdefault("validate", validate.Range(min=0, max=100))
        super().__init__(**kwargs)

    def _deserialize(self, value, attr, data, **kwargs):
        if isinstance(value, bool):
            raise self.make_error("invalid")
        return super()._deserialize(value, attr, data, **kwargs)


class FeedbackSchema(Schema):
    class Meta:
        unknown = EXCLUDE

    student_name = fields.Str(required=True, data_key="studentName", validate=validate.Length(min=1, max=120))
    reg_number = fields.Str(
        required=True,
        data_key="regNumber",
        validate=validate.Regexp(REG_NUMBER_PATTERN, error="Must be 3 letters followed by 7 digits."),
    )
    email = fields.Email(required=True, validate=validate.Length(max=120))
    mobile = fields.Str(required=True, validate=validate.Regexp(MOBILE_PATTERN, error="Must be exactly 10 digits."))
    faculty = fields.Str(required=True, validate=validate.Length(min=1, max=120))
    batch_id = fields.Str(data_key="batchId", allow_none=True, load_default=None, validate=validate.Length(max=50))

    attendance = Mark()
    dress_code = Mark(data_key="dressCode")
    discipline = Mark()
    participation = Mark()
    teamwork = Mark()
    presentation_content = Mark(data_key="presentationContent")
    presentation_delivery = Mark(data_key="presentationDelivery")
    communication = Mark()
    analytical = Mark()
    creativity = Mark()
    ethics = Mark()
    emotional = Mark()
    overall_engagement = Mark(data_key="overallEngagement")
    quiz_marks = Mark(data_key="quizMarks")

    # Accepted for shape only; the service always recomputes both
    weighted_score = Mark(data_key="weightedScore")
    grade = fields.Str(allow_none=True, validate=validate.OneOf([e.value for e in Grade]))

    @pre_load
    def normalize_input(self, data, **kwargs):
        if not isinstance(data, dict):
            return data
        data = dict(data)
        # Older clients send the faculty as facultyName
        if "faculty" not in data and "facultyName" in data:
            data["faculty"] = data.pop("facultyName")
        for key, value in data.items():
            if isinstance(value, str):
                data[key] = value.strip()
        if data.get("batchId") == "":
            data["batchId"] = None
        return data

    @post_load
    def uppercase_reg_number(self, data, **kwargs):
        data["reg_number"] = data["reg_number"].upper()
        return data


class ListFeedbackQuerySchema(Schema):
    class Meta:
        unknown = EXCLUDE

    faculty = fields.Str(allow_none=True, load_default=None)
    reg_number = fields.Str(data_key="regNumber", allow_none=True, load_default=None)
