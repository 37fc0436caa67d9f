from sqlalchemy.orm import joinedload

from borrow_return.extensions import db
from borrow_return.models.borrow import Borrow
from borrow_return.repositories.base_repo import BaseRepo

class BorrowRepo(BaseRepo):
    model = Borrow

    @classmethod
    def ordering(cls):
        # aynı saniyede açılan kayıtlar için id ile ikinci sıralama
        return (Borrow.borrow_date.desc(), Borrow.id.desc())

    @classmethod
    def query(cls):
        return Borrow.query.options(joinedload(Borrow.student), joinedload(Borrow.item))

    @staticmethod
    def get_for_update(borrow_id: int):
        return db.session.execute(
            db.select(Borrow).where(Borrow.id == borrow_id).with_for_update()
            .execution_options(populate_existing=True)
        ).scalar_one_or_none()

    @staticmethod
    def list_active_by_item(item_id: int):
        return Borrow.query.filter_by(item_id=item_id, returned=False).all()
