import click
from flask import current_app

from borrow_return.extensions import db
from borrow_return.models.item import Item
from borrow_return.models.student import Student
from borrow_return.repositories.item_repo import ItemRepo
from borrow_return.repositories.student_repo import StudentRepo

DEMO_STUDENTS = [
    ("Alice Santos", "free"),
    ("Bob Reyes", "free"),
    ("Charlie Dela Cruz", "premium"),
]

DEMO_ITEMS = [
    ("Intro to PHP - Textbook", 3),
    ("Calculator", 5),
    ("Projector Remote", 1),
]


def seed_demo_data() -> bool:
    """Tablolar boşsa örnek öğrenci/eşya ekler. Ekleme yaptıysa True döner."""
    if StudentRepo.count() or ItemRepo.count():
        return False

    for name, student_type in DEMO_STUDENTS:
        db.session.add(Student(name=name, type=student_type))
    for title, qty in DEMO_ITEMS:
        db.session.add(Item(title=title, qty=qty))
    db.session.commit()
    return True


def register_cli(app):
    @app.cli.command("init-db")
    def init_db_command():
        """Tabloları oluşturur (varsa dokunmaz)."""
        db.create_all()
        current_app.logger.info("[cli] Tablolar hazır.")
        click.echo("Veritabanı hazır.")

    @app.cli.command("seed-demo")
    def seed_demo_command():
        """Boş veritabanına örnek veri ekler."""
        db.create_all()
        if seed_demo_data():
            click.echo(f"{len(DEMO_STUDENTS)} öğrenci, {len(DEMO_ITEMS)} eşya eklendi.")
        else:
            click.echo("Veritabanı boş değil, örnek veri eklenmedi.")
