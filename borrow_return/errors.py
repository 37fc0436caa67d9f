"""
Ödünç/iade akışındaki reddedilen istekler için hata sınıfları.

Servisler bu hataları fırlatır, controller'lar yakalayıp flash mesajına
veya JSON cevabına çevirir. Reddedilen bir istek veritabanında hiçbir
değişiklik bırakmaz.
"""

from __future__ import annotations


class LendingError(ValueError):
    """Tüm iş kuralı hatalarının tabanı."""

    code: str = "lending_error"
    status: int = 400

    def __init__(self, message: str | None = None) -> None:
        if message is None:
            message = "İşlem gerçekleştirilemedi"
        super().__init__(message)


class ValidationError(LendingError):
    """Zorunlu alan boş ya da geçersiz."""

    code = "validation_error"
    status = 400


class NotFound(LendingError):
    """İstenen öğrenci, eşya veya ödünç kaydı yok."""

    code = "not_found"
    status = 404


class OutOfStock(LendingError):
    code = "out_of_stock"
    status = 409


class AlreadyReturned(LendingError):
    code = "already_returned"
    status = 409
