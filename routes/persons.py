import logging

from flask import (Blueprint, render_template, redirect, url_for, flash,
                   request, current_app, abort, session)
from flask_login import login_required, current_user

from forms.person_forms import PersonForm
from models.person import Person
from translations import get_translator

logger = logging.getLogger(__name__)

persons_bp = Blueprint("persons", __name__)


@persons_bp.before_request
@login_required
def require_login():
    pass


@persons_bp.route("")
def list_persons():
    page = request.args.get("page", 1, type=int)
    search = request.args.get("search", "").strip()
    per_page = current_app.config["PER_PAGE"]
    persons, total = Person.list_page(search, page=page, per_page=per_page)
    total_pages = max(1, (total + per_page - 1) // per_page)
    return render_template("persons/list.html", persons=persons, page=page,
                           total=total, total_pages=total_pages, search=search)


@persons_bp.route("/new", methods=["GET", "POST"])
def new_person():
    t = get_translator(session.get("lang", "en"))
    form = PersonForm(data={"nationality": current_app.config["DEFAULT_NATIONALITY"]})
    if form.validate_on_submit():
        person = Person.create(form.data, created_by=current_user.username)
        logger.info("%s registered person %s", current_user.username, person.person_id)
        flash(t("person.flash.created", person_id=person.person_id), "success")
        return redirect(url_for("persons.list_persons"))
    return render_template("persons/form.html", form=form, person=None)


@persons_bp.route("/<person_id>/edit", methods=["GET", "POST"])
def edit_person(person_id):
    person = Person.get_by_id(person_id)
    if person is None:
        abort(404)

    t = get_translator(session.get("lang", "en"))
    form = PersonForm(data=person.form_data())
    if form.validate_on_submit():
        Person.update(person_id, form.data)
        logger.info("%s updated person %s", current_user.username, person_id)
        flash(t("person.flash.updated", person_id=person_id), "success")
        return redirect(url_for("persons.list_persons"))
    return render_template("persons/form.html", form=form, person=person)
