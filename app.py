import logging
import os
import sys

sys.path.insert(0, os.path.abspath(os.path.dirname(__file__)))

from flask import Flask, render_template, session, redirect, request
from flask_login import LoginManager
from flask_wtf.csrf import CSRFProtect

from config import Config
from filters import STATUSES
from models.database import init_app as init_db_app
from models.user import User
from translations import DEFAULT_LANGUAGE, LANGUAGES, LANGUAGE_NAMES, get_translator


def configure_logging(level):
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


def create_app(config_overrides=None):
    app = Flask(__name__)
    app.config.from_object(Config)
    if config_overrides:
        app.config.update(config_overrides)

    configure_logging(app.config["LOG_LEVEL"])

    # Extensions
    csrf = CSRFProtect(app)
    login_manager = LoginManager(app)
    login_manager.login_view = "auth.login"
    login_manager.login_message = "auth.flash.loginRequired"
    login_manager.login_message_category = "warning"
    login_manager.localize_callback = lambda key: get_translator(
        session.get("lang", DEFAULT_LANGUAGE))(key)

    @login_manager.user_loader
    def load_user(user_id):
        return User.get_by_id(int(user_id))

    # Database teardown
    init_db_app(app)

    # The active language lives in the session and is re-read on every request
    @app.context_processor
    def inject_globals():
        lang = session.get("lang", DEFAULT_LANGUAGE)
        return {
            "t": get_translator(lang),
            "lang": lang,
            "languages": LANGUAGES,
            "language_names": LANGUAGE_NAMES,
            "statuses": STATUSES,
            "status_colors": app.config["STATUS_COLORS"],
        }

    @app.route("/set-language/<lang>")
    def set_language(lang):
        if lang in LANGUAGES:
            session["lang"] = lang
        return redirect(request.referrer or "/")

    # Blueprints
    from routes.auth import auth_bp
    from routes.registry import registry_bp
    from routes.persons import persons_bp
    from routes.api import api_bp

    app.register_blueprint(auth_bp)
    app.register_blueprint(registry_bp)
    app.register_blueprint(persons_bp, url_prefix="/persons")
    app.register_blueprint(api_bp, url_prefix="/api")

    # Exempt API from CSRF
    csrf.exempt(api_bp)

    # Error handlers
    @app.errorhandler(403)
    def forbidden(e):
        return render_template("errors/403.html"), 403

    @app.errorhandler(404)
    def not_found(e):
        return render_template("errors/404.html"), 404

    return app


if __name__ == "__main__":
    app = create_app()
    app.run(debug=True, use_reloader=False)
