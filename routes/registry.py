import logging
from datetime import date

from flask import (Blueprint, render_template, redirect, url_for, flash,
                   request, current_app, abort, session)
from flask_login import login_required, current_user

from filters import SearchQuery, effective_status, filter_records
from forms.record_forms import RECORD_FORMS, SearchForm, StatusForm
from models.person import Person
from models.records import RECORD_CLASSES, load_all_records, recent_registrations
from translations import get_translator

logger = logging.getLogger(__name__)

registry_bp = Blueprint("registry", __name__)

RECORD_LISTS = "<any(births, deaths, marriages, divorces):plural>"


def record_class(plural):
    return RECORD_CLASSES[plural[:-1]]


def form_defaults(category, person=None):
    """Values pre-filled on a blank registration form.

    Birth and death forms opened for a registered person also carry that
    person's ID, name and details.
    """
    config = current_app.config
    defaults = {
        "city": config["DEFAULT_CITY"],
        "kebele": config["DEFAULT_KEBELE"],
        "registration_date": date.today(),
    }
    if category in ("birth", "death"):
        defaults["nationality"] = config["DEFAULT_NATIONALITY"]
    else:
        defaults["husband_nationality"] = config["DEFAULT_NATIONALITY"]
        defaults["wife_nationality"] = config["DEFAULT_NATIONALITY"]
    if person is not None and category in ("birth", "death"):
        name_field = "child_name" if category == "birth" else "name"
        defaults.update({k: v for k, v in person.form_data().items() if v})
        defaults.update({
            name_field: person.full_name,
            "person_id": person.person_id,
            "sex": person.gender.capitalize(),
        })
    return defaults


def localize_choices(form, t):
    if hasattr(form, "sex"):
        form.sex.choices = [(value, t(f"common.sex.{value}")) for value, _ in form.sex.choices]
    if hasattr(form, "requester"):
        form.requester.choices = [(value, t(f"divorce.form.requester.{value.lower()}"))
                                  for value, _ in form.requester.choices]


@registry_bp.route("/")
@login_required
def dashboard():
    counts = {category: cls.count_all() for category, cls in RECORD_CLASSES.items()}
    status_counts = {category: cls.count_by_status() for category, cls in RECORD_CLASSES.items()}
    days = current_app.config["RECENT_DAYS"]
    recent_counts = {category: cls.count_since(days) for category, cls in RECORD_CLASSES.items()}
    return render_template("registry/dashboard.html", counts=counts,
                           status_counts=status_counts, recent_counts=recent_counts,
                           recent_days=days,
                           recent=recent_registrations(current_app.config["RECENT_LIMIT"]),
                           person_count=Person.count_all())


@registry_bp.route(f"/{RECORD_LISTS}")
@login_required
def list_records(plural):
    cls = record_class(plural)
    page = request.args.get("page", 1, type=int)
    search = request.args.get("search", "").strip()
    per_page = current_app.config["PER_PAGE"]

    records, total = cls.list_page(search, page=page, per_page=per_page)
    total_pages = max(1, (total + per_page - 1) // per_page)

    return render_template("registry/list.html", category=cls.CATEGORY, plural=plural,
                           records=records, page=page, total=total,
                           total_pages=total_pages, search=search)


@registry_bp.route(f"/{RECORD_LISTS}/new", methods=["GET", "POST"])
@login_required
def new_record(plural):
    cls = record_class(plural)
    category = cls.CATEGORY
    t = get_translator(session.get("lang", "en"))
    person = None
    if request.args.get("person_id"):
        person = Person.get_by_id(request.args["person_id"])
    form = RECORD_FORMS[category](data=form_defaults(category, person))
    localize_choices(form, t)

    if form.validate_on_submit():
        record = cls.create(form.data, created_by=current_user.username)
        logger.info("%s registered %s", current_user.username, record.regno)
        flash(t("record.flash.registered", title=t(f"{category}.form.successTitle"),
                regno=record.regno), "success")
        return redirect(url_for("registry.certificate", plural=plural, regno=record.regno))
    if request.method == "POST":
        flash(t("record.flash.invalid"), "danger")

    return render_template(f"registry/forms/{category}.html", form=form,
                           category=category, plural=plural)


@registry_bp.route(f"/{RECORD_LISTS}/<regno>/certificate")
@login_required
def certificate(plural, regno):
    cls = record_class(plural)
    record = cls.get_by_regno(regno)
    if record is None:
        abort(404)

    status_form = StatusForm(data={"status": effective_status(record)})
    return render_template("registry/certificate.html", record=record,
                           category=cls.CATEGORY, plural=plural,
                           status_form=status_form, issue_date=date.today().isoformat())


@registry_bp.route(f"/{RECORD_LISTS}/<regno>/status", methods=["POST"])
@login_required
def update_status(plural, regno):
    cls = record_class(plural)
    record = cls.get_by_regno(regno)
    if record is None:
        abort(404)
    if not current_user.is_admin:
        abort(403)

    t = get_translator(session.get("lang", "en"))
    form = StatusForm()
    if form.validate_on_submit():
        old_status = effective_status(record)
        cls.update_status(regno, form.status.data)
        logger.info("%s changed status of %s: %s -> %s", current_user.username,
                    regno, old_status, form.status.data)
        flash(t("status.flash.updated", regno=regno,
                status=t(f"search.form.status.{form.status.data.lower()}")), "success")
    else:
        flash(t("record.flash.invalid"), "danger")
    return redirect(url_for("registry.certificate", plural=plural, regno=regno))


@registry_bp.route("/search")
@login_required
def search():
    form = SearchForm(request.args)
    query = SearchQuery.from_args(request.args)
    results = filter_records(load_all_records(), query)
    has_results = any(results.values())
    return render_template("registry/search.html", form=form, query=query,
                           results=results, has_results=has_results)
