from datetime import datetime
from borrow_return.extensions import db

STUDENT_TYPES = ("free", "premium")
DEFAULT_STUDENT_TYPE = "free"

class Student(db.Model):
    __tablename__ = "students"

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(200), nullable=False, index=True)
    type = db.Column(db.String(20), nullable=False, default=DEFAULT_STUDENT_TYPE)  # free/premium

    created_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow)
