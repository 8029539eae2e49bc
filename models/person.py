import uuid
from datetime import date, datetime

from models.database import execute_db, like_pattern, paginate, query_db
from models.records import to_db_value


class Person:
    FIELDS = ("first_name", "middle_name", "last_name", "gender", "date_of_birth",
              "place_of_birth", "nationality", "region", "zone", "woreda",
              "kebele", "house_number", "phone")
    SEARCH_FIELDS = ("first_name", "middle_name", "last_name", "person_id", "phone")

    def __init__(self, person_id, created_at=None, updated_at=None, created_by=None,
                 **values):
        self.person_id = person_id
        self.created_at = created_at
        self.updated_at = updated_at
        self.created_by = created_by
        for field in self.FIELDS:
            setattr(self, field, values.get(field))

    def form_data(self):
        """Field values in the shape the edit form expects."""
        data = {field: getattr(self, field) for field in self.FIELDS}
        if data["date_of_birth"]:
            data["date_of_birth"] = date.fromisoformat(data["date_of_birth"])
        return data

    @property
    def full_name(self):
        parts = [self.first_name, self.middle_name, self.last_name]
        return " ".join(part for part in parts if part)

    def to_dict(self):
        data = {field: getattr(self, field) for field in self.FIELDS}
        data.update(person_id=self.person_id, full_name=self.full_name,
                    created_at=self.created_at, updated_at=self.updated_at)
        return data

    @staticmethod
    def from_row(row):
        if row is None:
            return None
        values = {key: row[key] for key in row.keys() if key != "id"}
        return Person(**values)

    @staticmethod
    def create(data, created_by=None):
        now = datetime.now().isoformat(timespec="seconds")
        person_id = f"PRS-{uuid.uuid4().hex[:8].upper()}"
        values = [to_db_value(data.get(field)) for field in Person.FIELDS]
        execute_db(
            f"INSERT INTO persons (person_id, {', '.join(Person.FIELDS)}, created_at, "
            f"updated_at, created_by) VALUES ({', '.join('?' * (len(Person.FIELDS) + 4))})",
            [person_id] + values + [now, now, created_by],
        )
        return Person.get_by_id(person_id)

    @staticmethod
    def update(person_id, data):
        fields = {k: to_db_value(v) for k, v in data.items() if k in Person.FIELDS}
        if not fields:
            return
        fields["updated_at"] = datetime.now().isoformat(timespec="seconds")
        set_clause = ", ".join(f"{k} = ?" for k in fields)
        execute_db(f"UPDATE persons SET {set_clause} WHERE person_id = ?",
                   list(fields.values()) + [person_id])

    @staticmethod
    def get_by_id(person_id):
        row = query_db("SELECT * FROM persons WHERE person_id = ?", (person_id,), one=True)
        return Person.from_row(row)

    @staticmethod
    def list_page(search="", page=1, per_page=10):
        where = ""
        params = []
        if search:
            like = like_pattern(search)
            where = "WHERE " + " OR ".join(f"{f} LIKE ? ESCAPE '\\'" for f in Person.SEARCH_FIELDS)
            params = [like] * len(Person.SEARCH_FIELDS)
        rows, total = paginate(
            f"SELECT * FROM persons {where} ORDER BY created_at DESC, id DESC",
            f"SELECT COUNT(*) as cnt FROM persons {where}",
            params, page=page, per_page=per_page,
        )
        return [Person.from_row(row) for row in rows], total

    @staticmethod
    def count_all():
        row = query_db("SELECT COUNT(*) as count FROM persons", one=True)
        return row["count"] if row else 0
