"""
Ödünç ve iade işlemleri için tek parça (exclusive) transaction.

Stok okuma + kontrol + yazma adımları aynı kilit altında ve tek commit
ile yapılır; aksi halde son adet için gelen iki eşzamanlı istek ikisi
birden başarılı olup stoğu -1'e düşürebilir.
"""
from __future__ import annotations

import threading
from contextlib import contextmanager
from typing import Any, Callable, Iterator, TypeVar

from flask import current_app

from borrow_return.extensions import db

T = TypeVar("T")

LOCK_EXTENSION_KEY = "borrow_return.mutation_lock"


def init_lock(app) -> None:
    """Uygulamaya ait mutasyon kilidini kaydeder (create_app içinde çağrılır)."""
    app.extensions[LOCK_EXTENSION_KEY] = threading.Lock()


def _app_lock():
    lock = current_app.extensions.get(LOCK_EXTENSION_KEY)
    if lock is None:
        raise RuntimeError("Mutasyon kilidi kayıtlı değil; init_lock(app) çağrılmalı")
    return lock


@contextmanager
def exclusive(lock=None) -> Iterator[Any]:
    """
    Kilidi alır, bloğu çalıştırır, başarıda commit eder.

    Blok içinde herhangi bir hata olursa (iş kuralı hatası dahil)
    session rollback edilir ve hata aynen yukarı fırlatılır.
    """
    lk = lock or _app_lock()
    with lk:
        try:
            yield db.session
            db.session.commit()
        except Exception:
            db.session.rollback()
            raise


def run_exclusive(fn: Callable[..., T], *args: Any, **kwargs: Any) -> T:
    with exclusive():
        return fn(*args, **kwargs)
