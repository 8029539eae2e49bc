import uuid
from datetime import date, datetime, timedelta

from filters import DEFAULT_STATUS, STATUSES
from models.database import execute_db, like_pattern, paginate, query_db

META_FIELDS = ("status", "created_at", "updated_at", "created_by")

SEX_CHOICES = ("Male", "Female")
REQUESTER_CHOICES = ("Husband", "Wife", "Both")


def to_db_value(value):
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, str):
        return value.strip() or None
    return value


class VitalRecord:
    """Base class for the birth, death, marriage and divorce records.

    Subclasses declare their table, category tag and registration-number
    field, the data fields they store, which of those are plain text that the
    record search may match against, and which are matched by the list-page
    search box.
    """

    CATEGORY = None
    TABLE = None
    REGNO_FIELD = None
    REGNO_PREFIX = None
    FIELDS = ()
    SEARCH_FIELDS = ()
    NAME_FIELDS = ()
    TITLE_FIELDS = ()

    def __init__(self, **values):
        for field in self.FIELDS + META_FIELDS:
            setattr(self, field, values.get(field))

    @property
    def regno(self):
        return getattr(self, self.REGNO_FIELD)

    @property
    def display_name(self):
        """The names a person would recognise this record by."""
        names = [getattr(self, field) for field in self.TITLE_FIELDS]
        return " & ".join(name for name in names if name)

    def searchable_values(self):
        """Return the string values of this record's searchable fields."""
        values = []
        for field in self.SEARCH_FIELDS:
            value = getattr(self, field, None)
            if isinstance(value, str):
                values.append(value)
        return values

    def to_dict(self):
        data = {field: getattr(self, field) for field in self.FIELDS + META_FIELDS}
        data["category"] = self.CATEGORY
        return data

    def __repr__(self):
        return f"<{type(self).__name__} {self.regno}>"

    @classmethod
    def from_row(cls, row):
        if row is None:
            return None
        return cls(**{key: row[key] for key in row.keys()})

    @classmethod
    def generate_regno(cls):
        return f"{cls.REGNO_PREFIX}-{date.today():%Y%m%d}-{uuid.uuid4().hex[:6].upper()}"

    @classmethod
    def create(cls, data, created_by=None):
        """Insert a new record built from ``data`` and return it.

        The registration number, status and timestamps are always assigned
        here; values for them in ``data`` are ignored.
        """
        now = datetime.now().isoformat(timespec="seconds")
        values = {field: to_db_value(data.get(field)) for field in cls.FIELDS}
        values[cls.REGNO_FIELD] = cls.generate_regno()
        if not values.get("registration_date"):
            values["registration_date"] = date.today().isoformat()
        values.update(status=DEFAULT_STATUS, created_at=now, updated_at=now,
                      created_by=created_by)

        columns = list(values)
        placeholders = ", ".join("?" * len(columns))
        execute_db(
            f"INSERT INTO {cls.TABLE} ({', '.join(columns)}) VALUES ({placeholders})",
            [values[column] for column in columns],
        )
        return cls(**values)

    @classmethod
    def get_by_regno(cls, regno):
        row = query_db(f"SELECT * FROM {cls.TABLE} WHERE {cls.REGNO_FIELD} = ?",
                       (regno,), one=True)
        return cls.from_row(row)

    @classmethod
    def get_all(cls):
        """All records of this category in registration order."""
        rows = query_db(f"SELECT * FROM {cls.TABLE} ORDER BY id")
        return [cls.from_row(row) for row in rows]

    @classmethod
    def list_page(cls, search="", page=1, per_page=10):
        conditions = []
        params = []
        if search:
            like = like_pattern(search)
            fields = (cls.REGNO_FIELD,) + cls.NAME_FIELDS
            conditions.append("(" + " OR ".join(f"{f} LIKE ? ESCAPE '\\'" for f in fields) + ")")
            params.extend([like] * len(fields))

        where = ""
        if conditions:
            where = "WHERE " + " AND ".join(conditions)

        rows, total = paginate(
            f"SELECT * FROM {cls.TABLE} {where} ORDER BY created_at DESC, id DESC",
            f"SELECT COUNT(*) as cnt FROM {cls.TABLE} {where}",
            params, page=page, per_page=per_page,
        )
        return [cls.from_row(row) for row in rows], total

    @classmethod
    def update_status(cls, regno, status):
        if status not in STATUSES:
            raise ValueError(f"Unknown status: {status}")
        execute_db(
            f"UPDATE {cls.TABLE} SET status = ?, updated_at = ? WHERE {cls.REGNO_FIELD} = ?",
            (status, datetime.now().isoformat(timespec="seconds"), regno),
        )

    @classmethod
    def count_all(cls):
        row = query_db(f"SELECT COUNT(*) as count FROM {cls.TABLE}", one=True)
        return row["count"] if row else 0

    @classmethod
    def count_by_status(cls):
        rows = query_db(f"SELECT status, COUNT(*) as count FROM {cls.TABLE} GROUP BY status")
        counts = {status: 0 for status in STATUSES}
        for row in rows:
            counts[row["status"] or DEFAULT_STATUS] += row["count"]
        return counts

    @classmethod
    def count_since(cls, days):
        """Number of records registered in the last ``days`` days."""
        since = (datetime.now() - timedelta(days=days)).isoformat(timespec="seconds")
        row = query_db(f"SELECT COUNT(*) as count FROM {cls.TABLE} WHERE created_at >= ?",
                       (since,), one=True)
        return row["count"] if row else 0

    @classmethod
    def recent(cls, limit=10):
        rows = query_db(f"SELECT * FROM {cls.TABLE} ORDER BY created_at DESC, id DESC LIMIT ?",
                        (limit,))
        return [cls.from_row(row) for row in rows]


class Birth(VitalRecord):
    CATEGORY = "birth"
    TABLE = "births"
    REGNO_FIELD = "birth_regno"
    REGNO_PREFIX = "BRT"
    FIELDS = ("birth_regno", "child_name", "mother_name", "father_name",
              "date_of_birth", "sex", "city", "kebele", "house_number",
              "nationality", "registration_date", "person_id")
    SEARCH_FIELDS = ("birth_regno", "child_name", "mother_name", "father_name",
                     "date_of_birth", "city", "kebele", "house_number",
                     "nationality", "registration_date")
    NAME_FIELDS = ("child_name", "mother_name", "father_name")
    TITLE_FIELDS = ("child_name",)


class Death(VitalRecord):
    CATEGORY = "death"
    TABLE = "deaths"
    REGNO_FIELD = "death_regno"
    REGNO_PREFIX = "DTH"
    FIELDS = ("death_regno", "name", "date_of_birth", "date_of_death",
              "cause_of_death", "sex", "city", "kebele", "house_number",
              "nationality", "registration_date", "birth_regno", "person_id")
    SEARCH_FIELDS = ("death_regno", "name", "date_of_birth", "date_of_death",
                     "cause_of_death", "city", "kebele", "house_number",
                     "nationality", "registration_date", "birth_regno")
    NAME_FIELDS = ("name",)
    TITLE_FIELDS = ("name",)


class Marriage(VitalRecord):
    CATEGORY = "marriage"
    TABLE = "marriages"
    REGNO_FIELD = "marriage_regno"
    REGNO_PREFIX = "MAR"
    FIELDS = ("marriage_regno", "husband_name", "husband_age", "husband_nationality",
              "wife_name", "wife_age", "wife_nationality", "date_of_marriage",
              "city", "kebele", "house_number", "registration_date")
    SEARCH_FIELDS = ("marriage_regno", "husband_name", "husband_nationality",
                     "wife_name", "wife_nationality", "date_of_marriage",
                     "city", "kebele", "house_number", "registration_date")
    NAME_FIELDS = ("husband_name", "wife_name")
    TITLE_FIELDS = ("husband_name", "wife_name")


class Divorce(VitalRecord):
    CATEGORY = "divorce"
    TABLE = "divorces"
    REGNO_FIELD = "divorce_regno"
    REGNO_PREFIX = "DIV"
    FIELDS = ("divorce_regno", "husband_name", "husband_age", "husband_nationality",
              "wife_name", "wife_age", "wife_nationality", "date_of_divorce",
              "requester", "city", "kebele", "house_number", "registration_date")
    SEARCH_FIELDS = ("divorce_regno", "husband_name", "husband_nationality",
                     "wife_name", "wife_nationality", "date_of_divorce",
                     "city", "kebele", "house_number", "registration_date")
    NAME_FIELDS = ("husband_name", "wife_name")
    TITLE_FIELDS = ("husband_name", "wife_name")


RECORD_CLASSES = {cls.CATEGORY: cls for cls in (Birth, Death, Marriage, Divorce)}


def load_all_records():
    """Every stored record grouped by category."""
    return {category: cls.get_all() for category, cls in RECORD_CLASSES.items()}


def recent_registrations(limit=10):
    """The latest registrations across every category, newest first."""
    records = []
    for cls in RECORD_CLASSES.values():
        records.extend(cls.recent(limit))
    records.sort(key=lambda record: record.created_at or "", reverse=True)
    return records[:limit]
