from borrow_return.models.student import Student
from borrow_return.repositories.base_repo import BaseRepo

class StudentRepo(BaseRepo):
    model = Student

    @classmethod
    def ordering(cls):
        return (Student.name, Student.id)
