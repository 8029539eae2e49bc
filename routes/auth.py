import logging

from flask import Blueprint, render_template, redirect, url_for, flash, request, session
from flask_login import login_user, logout_user, login_required, current_user
from werkzeug.security import check_password_hash

from forms.auth_forms import LoginForm
from models.user import User
from translations import get_translator

logger = logging.getLogger(__name__)

auth_bp = Blueprint("auth", __name__)


@auth_bp.route("/login", methods=["GET", "POST"])
def login():
    if current_user.is_authenticated:
        return redirect(url_for("registry.dashboard"))

    t = get_translator(session.get("lang", "en"))
    form = LoginForm()
    if form.validate_on_submit():
        user = User.get_by_username(form.username.data)
        if user and check_password_hash(user.password_hash, form.password.data):
            if not user.is_active:
                logger.warning("Login refused for deactivated user %s", user.username)
                flash(t("auth.flash.accountDeactivated"), "danger")
                return render_template("auth/login.html", form=form)
            login_user(user)
            logger.info("User %s logged in from %s", user.username, request.remote_addr)
            next_page = request.args.get("next")
            if not next_page or not next_page.startswith("/"):
                next_page = url_for("registry.dashboard")
            return redirect(next_page)
        logger.warning("Failed login for %r from %s", form.username.data, request.remote_addr)
        flash(t("auth.flash.invalidCredentials"), "danger")
    return render_template("auth/login.html", form=form)


@auth_bp.route("/logout")
@login_required
def logout():
    t = get_translator(session.get("lang", "en"))
    logger.info("User %s logged out", current_user.username)
    logout_user()
    flash(t("auth.flash.loggedOut"), "info")
    return redirect(url_for("auth.login"))
