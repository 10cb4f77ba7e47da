import logging

from flask import Flask, jsonify, render_template, request

from api import api
from cli import register_commands
from config import Config
from models import db
from pages import pages


def configure_logging(app):
    level = app.config.get("LOG_LEVEL", "INFO")
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
    app.logger.setLevel(level)


def wants_json():
    return request.path.startswith("/api/")


def register_error_handlers(app):
    @app.errorhandler(404)
    def not_found(_error):
        if wants_json():
            return jsonify({"error": "Not found"}), 404
        return render_template("404.html"), 404

    @app.errorhandler(500)
    def server_error(_error):
        db.session.rollback()
        if wants_json():
            return jsonify({"error": "Internal server error"}), 500
        return render_template("500.html"), 500


def create_app(config_object=Config):
    app = Flask(__name__)
    app.config.from_object(config_object)
    configure_logging(app)

    db.init_app(app)
    app.register_blueprint(pages)
    app.register_blueprint(api)
    register_error_handlers(app)
    register_commands(app)

    # ===== Initialize DB at startup (CREATE TABLE IF NOT EXISTS is idempotent) =====
    with app.app_context():
        db.create_all()
        app.logger.info("Database ready: %s", db.engine.url.render_as_string(hide_password=True))

    return app


# Local dev entrypoint (Render uses Gunicorn: `gunicorn "app:create_app()"`)
if __name__ == "__main__":
    create_app().run(debug=True, host="127.0.0.1", port=5000)
