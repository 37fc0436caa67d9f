"""
Form / JSON isteğindeki ``action`` alanını tipli komutlara çevirir.

Desteklenen aksiyonlar kapalı bir kümedir (``Action``); her biri için
ayrı bir dataclass vardır ve ``dispatch`` hepsini tek ``match`` ile
ilgili servise yollar. Yeni aksiyon eklemek = enum + dataclass +
``match`` kolu.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping, Union

from borrow_return.errors import ValidationError
from borrow_return.services.catalog_service import CatalogService
from borrow_return.services.lending_service import LendingService


class Action(str, Enum):
    ADD_STUDENT = "add_student"
    ADD_ITEM = "add_item"
    BORROW = "borrow"
    RETURN = "return"


@dataclass(frozen=True)
class AddStudent:
    name: str
    student_type: str | None = None


@dataclass(frozen=True)
class AddItem:
    title: str
    qty: int = 1


@dataclass(frozen=True)
class BorrowItem:
    student_id: int
    item_id: int


@dataclass(frozen=True)
class ReturnItem:
    borrow_id: int


Command = Union[AddStudent, AddItem, BorrowItem, ReturnItem]

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _to_int(value: Any, default: int = 0) -> int:
    """
    Formdan gelen sayıyı esnek okur: boş -> default, baştaki tam sayı
    kısmı alınır ("2.5" -> 2, "5abc" -> 5), sayı yoksa -> 0.
    """
    if value is None or (isinstance(value, str) and not value.strip()):
        return default
    if isinstance(value, (bool, int)):
        return int(value)
    if isinstance(value, float):
        try:
            return int(value)
        except (OverflowError, ValueError):
            return 0
    m = _LEADING_INT.match(str(value))
    return int(m.group(1)) if m else 0


def _text(data: Mapping[str, Any], field: str) -> str | None:
    value = data.get(field)
    if value is None or isinstance(value, str):
        return value
    raise ValidationError(f"{field} metin olmalı")


def parse_command(data: Mapping[str, Any]) -> Command:
    raw = data.get("action")
    if isinstance(raw, str):
        raw = raw.strip()
    try:
        action = Action(raw)
    except ValueError:
        raise ValidationError(f"Bilinmeyen aksiyon: {raw!r}")

    if action is Action.ADD_STUDENT:
        return AddStudent(name=_text(data, "name") or "", student_type=_text(data, "type"))
    if action is Action.ADD_ITEM:
        return AddItem(title=_text(data, "title") or "", qty=_to_int(data.get("qty"), default=1))
    if action is Action.BORROW:
        return BorrowItem(
            student_id=_to_int(data.get("student_id")),
            item_id=_to_int(data.get("item_id")),
        )
    return ReturnItem(borrow_id=_to_int(data.get("borrow_id")))


def dispatch(command: Command):
    """Komutu ilgili servise iletir, oluşan/güncellenen kaydı döner."""
    match command:
        case AddStudent(name=name, student_type=student_type):
            return CatalogService.add_student(name, student_type)
        case AddItem(title=title, qty=qty):
            return CatalogService.add_item(title, qty)
        case BorrowItem(student_id=student_id, item_id=item_id):
            return LendingService.borrow_item(student_id, item_id)
        case ReturnItem(borrow_id=borrow_id):
            return LendingService.return_item(borrow_id)
        case _:
            raise TypeError(f"Desteklenmeyen komut: {command!r}")
