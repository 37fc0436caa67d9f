from datetime import datetime
from borrow_return.extensions import db

class Item(db.Model):
    __tablename__ = "items"
    # stok asla eksiye düşmesin (servis kontrolüne ek olarak DB seviyesinde)
    __table_args__ = (db.CheckConstraint("qty >= 0", name="ck_items_qty_non_negative"),)

    id = db.Column(db.Integer, primary_key=True)
    title = db.Column(db.String(200), nullable=False, index=True)
    qty = db.Column(db.Integer, nullable=False, default=1)

    created_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow)
