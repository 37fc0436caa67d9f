from flask import Blueprint, render_template, request, redirect, url_for, flash, current_app

from borrow_return.commands import parse_command, dispatch, AddStudent, AddItem, BorrowItem, ReturnItem
from borrow_return.errors import LendingError
from borrow_return.models.student import STUDENT_TYPES
from borrow_return.repositories.borrow_repo import BorrowRepo
from borrow_return.repositories.item_repo import ItemRepo
from borrow_return.repositories.student_repo import StudentRepo

web_bp = Blueprint("web", __name__)


def _success_message(command, result) -> str:
    if isinstance(command, AddStudent):
        return f"Öğrenci eklendi: {result.name} ({result.type})"
    if isinstance(command, AddItem):
        return f"Eşya eklendi: {result.title} (adet: {result.qty})"
    if isinstance(command, BorrowItem):
        return f"Ödünç verildi: {result.item.title} → {result.student.name}"
    if isinstance(command, ReturnItem):
        return f"İade alındı: {result.item.title}"
    return "İşlem tamam"


@web_bp.get("/")
def index():
    return render_template(
        "index.html",
        students=StudentRepo.list_all(),
        items=ItemRepo.list_all(),
        borrows=BorrowRepo.list_all(),
        student_types=STUDENT_TYPES,
    )


@web_bp.post("/")
def submit_action():
    # her aksiyondan sonra aynı sayfaya dön (post/redirect/get)
    try:
        command = parse_command(request.form)
        result = dispatch(command)
        flash(_success_message(command, result), "success")
    except LendingError as e:
        current_app.logger.info(f"[web] Aksiyon reddedildi ({request.form.get('action')}): {e}")
        flash(str(e), "danger")

    return redirect(url_for("web.index"))
