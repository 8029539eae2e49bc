import logging

from flask import Blueprint, jsonify, request, current_app
from flask_login import current_user
from werkzeug.datastructures import ImmutableMultiDict

from filters import SearchQuery, filter_records
from forms.person_forms import PersonForm
from forms.record_forms import RECORD_FORMS
from models.person import Person
from models.records import RECORD_CLASSES, load_all_records, recent_registrations
from routes.registry import form_defaults

logger = logging.getLogger(__name__)

api_bp = Blueprint("api", __name__)

CATEGORY = "<any(birth, death, marriage, divorce):category>"


@api_bp.before_request
def require_auth():
    if not current_user.is_authenticated:
        return jsonify({"error": "Authentication required"}), 401


def pagination_args():
    page = max(request.args.get("page", 1, type=int), 1)
    limit = request.args.get("limit", current_app.config["PER_PAGE"], type=int)
    limit = max(1, min(limit, current_app.config["MAX_PER_PAGE"]))
    return page, limit


def paginated(key, items, page, limit, total):
    return jsonify({
        key: items,
        "pagination": {
            "page": page,
            "limit": limit,
            "total": total,
            "pages": max(1, (total + limit - 1) // limit),
        },
    })


def json_form(form_class, defaults=None):
    """Bind a form to the JSON request body.

    Scalar values are passed to the form as strings, the way an HTML form
    would submit them. Returns None unless the body is an object whose
    values are all scalars or null.
    """
    payload = request.get_json(silent=True)
    if not isinstance(payload, dict):
        return None
    values = {}
    for key, value in payload.items():
        if value is None:
            continue
        if isinstance(value, (dict, list)):
            return None
        if isinstance(value, bool):
            value = "true" if value else "false"
        values[key] = str(value)
    formdata = ImmutableMultiDict(values)
    return form_class(formdata=formdata, data=defaults, meta={"csrf": False})


def invalid(form):
    return jsonify({"error": "Validation failed", "fields": form.errors}), 400


def missing_body():
    return jsonify({"error": "Expected a JSON object of field values"}), 400


@api_bp.route("/me")
def me():
    return jsonify({"user": current_user.to_dict()})


@api_bp.route("/dashboard/stats")
def dashboard_stats():
    days = current_app.config["RECENT_DAYS"]
    stats = {"totalPersons": Person.count_all()}
    for cls in RECORD_CLASSES.values():
        name = cls.TABLE.capitalize()
        stats[f"total{name}"] = cls.count_all()
        stats[f"recent{name}"] = cls.count_since(days)
    return jsonify(stats)


@api_bp.route("/dashboard/recent")
def dashboard_recent():
    limit = request.args.get("limit", current_app.config["RECENT_LIMIT"], type=int)
    limit = max(1, min(limit, current_app.config["MAX_PER_PAGE"]))
    return jsonify([
        {
            "type": record.CATEGORY,
            "regno": record.regno,
            "name": record.display_name,
            "registration_date": record.registration_date,
            "registered_by": record.created_by,
        }
        for record in recent_registrations(limit)
    ])


@api_bp.route("/person")
def list_persons():
    page, limit = pagination_args()
    persons, total = Person.list_page(request.args.get("search", "").strip(),
                                      page=page, per_page=limit)
    return paginated("persons", [p.to_dict() for p in persons], page, limit, total)


@api_bp.route("/person", methods=["POST"])
def create_person():
    form = json_form(PersonForm, {"nationality": current_app.config["DEFAULT_NATIONALITY"]})
    if form is None:
        return missing_body()
    if not form.validate():
        return invalid(form)
    person = Person.create(form.data, created_by=current_user.username)
    logger.info("%s registered person %s via API", current_user.username, person.person_id)
    return jsonify(person.to_dict()), 201


@api_bp.route("/person/<person_id>")
def get_person(person_id):
    person = Person.get_by_id(person_id)
    if person is None:
        return jsonify({"error": "Person not found"}), 404
    return jsonify(person.to_dict())


@api_bp.route(f"/{CATEGORY}")
def list_records(category):
    cls = RECORD_CLASSES[category]
    page, limit = pagination_args()
    records, total = cls.list_page(request.args.get("search", "").strip(),
                                   page=page, per_page=limit)
    return paginated(cls.TABLE, [r.to_dict() for r in records], page, limit, total)


@api_bp.route(f"/{CATEGORY}", methods=["POST"])
def create_record(category):
    cls = RECORD_CLASSES[category]
    form = json_form(RECORD_FORMS[category], form_defaults(category))
    if form is None:
        return missing_body()
    if not form.validate():
        return invalid(form)
    record = cls.create(form.data, created_by=current_user.username)
    logger.info("%s registered %s via API", current_user.username, record.regno)
    return jsonify(record.to_dict()), 201


@api_bp.route(f"/{CATEGORY}/<regno>")
def get_record(category, regno):
    record = RECORD_CLASSES[category].get_by_regno(regno)
    if record is None:
        return jsonify({"error": "Record not found"}), 404
    return jsonify(record.to_dict())


@api_bp.route("/search")
def search():
    query = SearchQuery.from_args(request.args)
    results = filter_records(load_all_records(), query)
    return jsonify({
        "query": {
            "q": query.search_term,
            "type": query.record_type,
            "status": query.status,
        },
        "results": {category: [r.to_dict() for r in records]
                    for category, records in results.items()},
        "total": sum(len(records) for records in results.values()),
    })
