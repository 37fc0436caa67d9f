import threading

import pytest
from sqlalchemy.exc import IntegrityError

from borrow_return import create_app
from borrow_return.config import TestConfig
from borrow_return.errors import OutOfStock
from borrow_return.extensions import db
from borrow_return.models.borrow import Borrow
from borrow_return.models.item import Item
from borrow_return.models.student import Student
from borrow_return.repositories.transaction import exclusive, run_exclusive
from borrow_return.services.lending_service import LendingService


class RecordingLock:
    def __init__(self):
        self.events = []

    def __enter__(self):
        self.events.append("acquire")
        return self

    def __exit__(self, exc_type, exc, tb):
        self.events.append("release")
        return False


def test_exclusive_commits_on_success(app):
    lock = RecordingLock()
    with exclusive(lock):
        db.session.add(Student(name="Dana", type="free"))

    db.session.rollback()  # commit edildiyse etkisiz
    assert Student.query.count() == 1
    assert lock.events == ["acquire", "release"]


def test_exclusive_rolls_back_and_reraises(app):
    lock = RecordingLock()
    with pytest.raises(RuntimeError):
        with exclusive(lock):
            db.session.add(Student(name="Ghost", type="free"))
            db.session.flush()
            raise RuntimeError("boom")

    assert Student.query.count() == 0
    assert lock.events == ["acquire", "release"]


def test_run_exclusive_returns_result(app):
    def _add(name):
        s = Student(name=name, type="premium")
        db.session.add(s)
        db.session.flush()
        return s.id

    new_id = run_exclusive(_add, "Eve")
    assert db.session.get(Student, new_id).name == "Eve"


def test_exclusive_requires_registered_lock(app):
    app.extensions.pop("borrow_return.mutation_lock")
    with pytest.raises(RuntimeError):
        with exclusive():
            pass


def test_item_qty_check_constraint(app):
    db.session.add(Item(title="Broken", qty=-1))
    with pytest.raises(IntegrityError):
        db.session.commit()
    db.session.rollback()


def test_concurrent_borrows_of_last_unit(tmp_path):
    class FileConfig(TestConfig):
        SQLALCHEMY_DATABASE_URI = f"sqlite:///{tmp_path / 'race.sqlite'}"

    app = create_app(FileConfig)
    with app.app_context():
        item = Item(title="Projector Remote", qty=1)
        students = [Student(name=f"S{i}", type="free") for i in range(8)]
        db.session.add_all([item, *students])
        db.session.commit()
        item_id = item.id
        student_ids = [s.id for s in students]
        db.session.remove()

    start = threading.Barrier(len(student_ids))
    results = []
    results_lock = threading.Lock()

    def worker(student_id):
        with app.app_context():
            start.wait(timeout=5)
            try:
                LendingService.borrow_item(student_id, item_id)
                outcome = "ok"
            except OutOfStock:
                outcome = "out_of_stock"
            finally:
                db.session.remove()
            with results_lock:
                results.append(outcome)

    threads = [threading.Thread(target=worker, args=(sid,)) for sid in student_ids]
    for t in threads:
        t.start()
    for t in threads:
        t.join(timeout=10)

    assert results.count("ok") == 1
    assert results.count("out_of_stock") == len(student_ids) - 1

    with app.app_context():
        assert db.session.get(Item, item_id).qty == 0
        assert Borrow.query.count() == 1
        db.session.remove()
        db.engine.dispose()
