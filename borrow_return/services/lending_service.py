from datetime import datetime

from flask import current_app

from borrow_return.errors import ValidationError, NotFound, OutOfStock, AlreadyReturned
from borrow_return.models.borrow import Borrow
from borrow_return.repositories.base_repo import MAX_DB_INT
from borrow_return.repositories.borrow_repo import BorrowRepo
from borrow_return.repositories.item_repo import ItemRepo
from borrow_return.repositories.student_repo import StudentRepo
from borrow_return.repositories.transaction import exclusive


class LendingService:
    @staticmethod
    def _require_id(value, label: str) -> int:
        try:
            value = int(value or 0)
        except (TypeError, ValueError, OverflowError):
            raise ValidationError(f"{label} sayı olmalı")
        if value <= 0:
            raise ValidationError(f"{label} zorunlu")
        if value > MAX_DB_INT:
            # bu kadar büyük id veritabanında olamaz
            raise NotFound(f"Kayıt bulunamadı ({label}={value})")
        return value

    @staticmethod
    def borrow_item(student_id, item_id) -> Borrow:
        """
        Stok > 0 ise ödünç kaydı açar ve stoğu 1 düşürür.
        İki adım tek kilit + tek commit içinde yapılır.
        """
        student_id = LendingService._require_id(student_id, "student_id")
        item_id = LendingService._require_id(item_id, "item_id")

        try:
            with exclusive():
                item = ItemRepo.get_for_update(item_id)
                if not item:
                    raise NotFound(f"Eşya bulunamadı (#{item_id})")

                student = StudentRepo.get(student_id)
                if not student:
                    raise NotFound(f"Öğrenci bulunamadı (#{student_id})")

                if item.qty is None or item.qty < 1:
                    raise OutOfStock(f"'{item.title}' şu anda stokta yok")

                borrow = Borrow(
                    student_id=student.id,
                    item_id=item.id,
                    borrow_date=datetime.utcnow(),
                    returned=False,
                )
                BorrowRepo.create(borrow, commit=False)
                ItemRepo.update(item, commit=False, qty=item.qty - 1)
        except (NotFound, OutOfStock) as e:
            current_app.logger.warning(f"[lending] Ödünç reddedildi (student={student_id}, item={item_id}): {e}")
            raise

        current_app.logger.info(
            f"[lending] Ödünç verildi: borrow #{borrow.id} student={student_id} item={item_id} kalan={item.qty}"
        )
        return borrow

    @staticmethod
    def return_item(borrow_id) -> Borrow:
        """
        Aktif ödünç kaydını kapatır ve eşyanın stoğunu 1 artırır.
        Zaten iade edilmiş kayıt için ikinci bir etki olmaz (AlreadyReturned).
        """
        borrow_id = LendingService._require_id(borrow_id, "borrow_id")

        try:
            with exclusive():
                borrow = BorrowRepo.get_for_update(borrow_id)
                if not borrow:
                    raise NotFound(f"Ödünç kaydı bulunamadı (#{borrow_id})")

                if borrow.returned:
                    raise AlreadyReturned(f"Ödünç kaydı #{borrow_id} zaten iade edilmiş")

                BorrowRepo.update(borrow, commit=False, returned=True, return_date=datetime.utcnow())

                # stok iade
                item = ItemRepo.get_for_update(borrow.item_id)
                if item:
                    ItemRepo.update(item, commit=False, qty=item.qty + 1)
        except (NotFound, AlreadyReturned) as e:
            current_app.logger.warning(f"[lending] İade reddedildi (borrow={borrow_id}): {e}")
            raise

        current_app.logger.info(f"[lending] İade alındı: borrow #{borrow.id} item={borrow.item_id}")
        return borrow
