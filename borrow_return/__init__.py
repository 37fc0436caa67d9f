import logging

from flask import Flask, jsonify
from borrow_return.config import Config
from borrow_return.extensions import db, migrate


def create_app(config_object=Config):
    app = Flask(__name__)
    app.config.from_object(config_object)
    app.logger.setLevel(getattr(logging, str(app.config.get("LOG_LEVEL", "INFO")).upper(), logging.INFO))

    # 1) Önce db init (db.engine / db.session için şart)
    from borrow_return import models  # noqa: F401  (tabloların metadata'ya kaydı, flask db için de gerekli)
    db.init_app(app)
    migrate.init_app(app, db)

    # 2) Ödünç/iade için uygulama seviyesinde mutasyon kilidi
    from borrow_return.repositories.transaction import init_lock
    init_lock(app)

    # 3) Tablolar (migration kullanılmıyorsa)
    if app.config.get("AUTO_CREATE_TABLES"):
        with app.app_context():
            db.create_all()

    # 4) Blueprintler
    from borrow_return.controllers.web_controller import web_bp
    from borrow_return.controllers.web_api_controller import web_api_bp
    app.register_blueprint(web_bp)
    app.register_blueprint(web_api_bp)

    @app.get("/health")
    def health():
        return jsonify({"ok": True})

    # 5) CLI komutları (init-db, seed-demo)
    from borrow_return.cli import register_cli
    register_cli(app)

    return app
