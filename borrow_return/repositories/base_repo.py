from borrow_return.extensions import db

# SQLite / BIGINT sınırı; üstü sürücüde OverflowError verir
MAX_DB_INT = 2**63 - 1


class BaseRepo:
    """
    Tek tablo için ortak insert / get / update / list işlemleri.
    Alt sınıf model ve sıralamayı belirler.
    """
    model = None

    @classmethod
    def ordering(cls):
        return (cls.model.id,)

    @classmethod
    def query(cls):
        return cls.model.query

    @classmethod
    def get(cls, obj_id: int):
        return db.session.get(cls.model, obj_id)

    @classmethod
    def list_all(cls):
        return cls.query().order_by(*cls.ordering()).all()

    @classmethod
    def create(cls, obj, commit: bool = True):
        db.session.add(obj)
        if commit:
            db.session.commit()
        else:
            # id'nin atanması için (exclusive blok içinde commit dışarıda yapılır)
            db.session.flush()
        return obj

    @classmethod
    def update(cls, obj, commit: bool = True, **fields):
        for k, v in fields.items():
            setattr(obj, k, v)
        if commit:
            db.session.commit()
        else:
            db.session.flush()
        return obj

    @classmethod
    def count(cls) -> int:
        return db.session.query(cls.model).count()
