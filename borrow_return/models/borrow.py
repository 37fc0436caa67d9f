from datetime import datetime
from borrow_return.extensions import db

class Borrow(db.Model):
    __tablename__ = "borrows"

    id = db.Column(db.Integer, primary_key=True)

    student_id = db.Column(db.Integer, db.ForeignKey("students.id"), nullable=False, index=True)
    item_id = db.Column(db.Integer, db.ForeignKey("items.id"), nullable=False, index=True)

    borrow_date = db.Column(db.DateTime, nullable=False, default=datetime.utcnow, index=True)
    return_date = db.Column(db.DateTime, nullable=True)
    returned = db.Column(db.Boolean, nullable=False, default=False)

    student = db.relationship("Student", backref="borrows")
    item = db.relationship("Item", backref="borrows")

    @property
    def status(self) -> str:
        # active -> returned, geri dönüş yok
        return "returned" if self.returned else "active"
