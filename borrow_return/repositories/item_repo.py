from borrow_return.extensions import db
from borrow_return.models.item import Item
from borrow_return.repositories.base_repo import BaseRepo

class ItemRepo(BaseRepo):
    model = Item

    @classmethod
    def ordering(cls):
        return (Item.title, Item.id)

    @staticmethod
    def get_for_update(item_id: int):
        # SELECT ... FOR UPDATE (sqlite bunu yok sayar, kilit uygulama seviyesinde)
        return db.session.execute(
            db.select(Item).where(Item.id == item_id).with_for_update()
            .execution_options(populate_existing=True)
        ).scalar_one_or_none()
