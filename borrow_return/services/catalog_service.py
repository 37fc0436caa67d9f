from flask import current_app

from borrow_return.errors import ValidationError
from borrow_return.models.item import Item
from borrow_return.models.student import Student, STUDENT_TYPES, DEFAULT_STUDENT_TYPE
from borrow_return.repositories.base_repo import MAX_DB_INT
from borrow_return.repositories.item_repo import ItemRepo
from borrow_return.repositories.student_repo import StudentRepo


class CatalogService:
    @staticmethod
    def _text(value, label: str) -> str:
        if value is None:
            return ""
        if not isinstance(value, str):
            raise ValidationError(f"{label} metin olmalı")
        return value.strip()

    @staticmethod
    def normalize_student_type(student_type) -> str:
        st = CatalogService._text(student_type, "Öğrenci tipi")
        if not st:
            return DEFAULT_STUDENT_TYPE
        if st not in STUDENT_TYPES:
            raise ValidationError(
                f"Geçersiz öğrenci tipi: '{st}' (izin verilenler: {', '.join(STUDENT_TYPES)})"
            )
        return st

    @staticmethod
    def add_student(name, student_type=None) -> Student:
        name = CatalogService._text(name, "Öğrenci adı")
        if not name:
            raise ValidationError("Öğrenci adı zorunlu")

        student = Student(
            name=name,
            type=CatalogService.normalize_student_type(student_type),
        )
        StudentRepo.create(student)
        current_app.logger.info(f"[catalog] Öğrenci eklendi: #{student.id} {student.name} ({student.type})")
        return student

    @staticmethod
    def add_item(title, qty=1) -> Item:
        title = CatalogService._text(title, "Eşya adı")
        if not title:
            raise ValidationError("Eşya adı zorunlu")

        # negatif adet reddedilmez, 0'a çekilir
        try:
            qty = max(0, int(qty if qty is not None else 1))
        except (TypeError, ValueError, OverflowError):
            raise ValidationError("Adet sayı olmalı")
        if qty > MAX_DB_INT:
            raise ValidationError("Adet çok büyük")

        item = Item(title=title, qty=qty)
        ItemRepo.create(item)
        current_app.logger.info(f"[catalog] Eşya eklendi: #{item.id} {item.title} (adet: {item.qty})")
        return item
