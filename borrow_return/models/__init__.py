from borrow_return.models.student import Student
from borrow_return.models.item import Item
from borrow_return.models.borrow import Borrow

__all__ = ["Student", "Item", "Borrow"]
