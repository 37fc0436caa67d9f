from flask import Blueprint, jsonify, request

from borrow_return.commands import parse_command, dispatch
from borrow_return.errors import LendingError
from borrow_return.models.borrow import Borrow
from borrow_return.models.item import Item
from borrow_return.models.student import Student
from borrow_return.repositories.borrow_repo import BorrowRepo
from borrow_return.repositories.item_repo import ItemRepo
from borrow_return.repositories.student_repo import StudentRepo


web_api_bp = Blueprint("web_api", __name__, url_prefix="/web/api")


# -----------------------------
# Helpers
# -----------------------------
def _json_error(message, code=400, error_code=None):
    payload = {"success": False, "message": message}
    if error_code:
        payload["code"] = error_code
    return jsonify(payload), code


def _ts(value):
    return value.isoformat(sep=" ", timespec="seconds") if value else None


def _student_json(s: Student) -> dict:
    return {"id": s.id, "name": s.name, "type": s.type, "created_at": _ts(s.created_at)}


def _item_json(i: Item) -> dict:
    return {"id": i.id, "title": i.title, "qty": i.qty, "created_at": _ts(i.created_at)}


def _borrow_json(b: Borrow) -> dict:
    return {
        "id": b.id,
        "student_id": b.student_id,
        "student_name": b.student.name if b.student else None,
        "student_type": b.student.type if b.student else None,
        "item_id": b.item_id,
        "item_title": b.item.title if b.item else None,
        "borrow_date": _ts(b.borrow_date),
        "return_date": _ts(b.return_date),
        "returned": bool(b.returned),
        "status": b.status,
    }


_SERIALIZERS = {
    Student: _student_json,
    Item: _item_json,
    Borrow: _borrow_json,
}


# -----------------------------
# State
# -----------------------------
@web_api_bp.get("/state")
def state():
    return jsonify({"success": True, "data": {
        "students": [_student_json(s) for s in StudentRepo.list_all()],
        "items": [_item_json(i) for i in ItemRepo.list_all()],
        "borrows": [_borrow_json(b) for b in BorrowRepo.list_all()],
    }})


# -----------------------------
# Actions
# -----------------------------
@web_api_bp.post("/actions")
def actions():
    data = request.get_json(silent=True)
    if data is None:
        data = {}
    if not isinstance(data, dict):
        return _json_error("JSON nesnesi bekleniyor", 400, "validation_error")
    try:
        command = parse_command(data)
        result = dispatch(command)
    except LendingError as e:
        return _json_error(str(e), e.status, e.code)

    return jsonify({
        "success": True,
        "action": data.get("action"),
        "data": _SERIALIZERS[type(result)](result),
    }), 201
