# seefit/__init__.py

import os
import logging

from dotenv import load_dotenv
from flask import Flask, jsonify, request
from flask_sqlalchemy import SQLAlchemy
from flask_migrate import Migrate

# Carga variables de entorno (.env)
load_dotenv()

# Extensiones compartidas
db = SQLAlchemy()
migrate = Migrate()

API_PREFIXES = ("/hiits", "/exercise", "/healthz")


def _configure_logging(app: Flask) -> None:
    """Logging simple y consistente."""
    level = logging.DEBUG if app.debug else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
    app.logger.setLevel(level)


def _register_error_handlers(app: Flask) -> None:
    from seefit.services.errors import ConstraintViolation, NotFound, StorageUnavailable, ValidationError

    @app.errorhandler(NotFound)
    def _not_found(err):
        return jsonify(error="NotFound", message=str(err)), 404

    @app.errorhandler(ValidationError)
    def _validation_error(err):
        return jsonify(error="ValidationError", message=str(err), fields=err.fields), 422

    @app.errorhandler(ConstraintViolation)
    def _constraint_violation(err):
        app.logger.info(f"[api] constraint violation: {err}")
        return jsonify(error="AlreadyExists", message=str(err)), 409

    @app.errorhandler(StorageUnavailable)
    def _storage_unavailable(err):
        app.logger.error(f"[api] storage unavailable: {err}")
        return jsonify(error="StorageUnavailable", message="Base de datos no disponible"), 503

    @app.errorhandler(400)
    @app.errorhandler(404)
    @app.errorhandler(405)
    @app.errorhandler(409)
    @app.errorhandler(415)
    @app.errorhandler(500)
    def _http_errors(err):
        # Si la petición es JSON o va contra la API, devolvemos JSON consistente
        if request.is_json or request.path.startswith(API_PREFIXES):
            code = getattr(err, "code", 500) or 500
            return jsonify(error="http_error", message=str(err)), code
        return err


def create_app(test_config=None) -> Flask:
    """Factory principal de la aplicación."""
    app = Flask(__name__, instance_relative_config=True)

    # Asegura carpeta instance/
    os.makedirs(app.instance_path, exist_ok=True)

    # DB por defecto (SQLite en instance/seefit.db)
    db_path = os.path.join(app.instance_path, "seefit.db")
    default_db_uri = f"sqlite:///{db_path}"

    app.config.from_mapping(
        SQLALCHEMY_DATABASE_URI=os.getenv("SQLALCHEMY_DATABASE_URI", default_db_uri),
        SQLALCHEMY_TRACK_MODIFICATIONS=False,
        MAX_CONTENT_LENGTH=1 * 1024 * 1024,  # 1 MB por petición
        SEEFIT_PROGRESS_FILE=os.getenv(
            "SEEFIT_PROGRESS_FILE", os.path.join(app.instance_path, "progress.json")
        ),
    )
    if test_config:
        app.config.update(test_config)

    # Inicializa extensiones
    db.init_app(app)
    migrate.init_app(app, db)

    _configure_logging(app)

    # Modelos (importar para que Flask-Migrate los detecte)
    from seefit.models.hiit import Hiit, Exercise  # noqa: F401

    # ---------------------------------------------------------
    # BLUEPRINTS
    # ---------------------------------------------------------
    from seefit.routes.hiits import hiits_api
    app.register_blueprint(hiits_api)

    # Shell de la SPA (/ y /app/*)
    from seefit.routes.home_ui import home_ui
    app.register_blueprint(home_ui)

    # CLI (seed, hiit, progress)
    from seefit.cli import register_cli
    register_cli(app)

    @app.get("/healthz")
    def _healthz():
        return {"status": "ok"}, 200

    _register_error_handlers(app)

    app.logger.debug(f"[init] DB => {app.config['SQLALCHEMY_DATABASE_URI']}")
    return app
