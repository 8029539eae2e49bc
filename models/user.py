from flask_login import UserMixin

from models.database import execute_db, query_db

ROLES = ("admin", "employee")


class User(UserMixin):
    def __init__(self, id, username, full_name, password_hash, role, is_active,
                 created_at):
        self.id = id
        self.username = username
        self.full_name = full_name
        self.password_hash = password_hash
        self.role = role
        self._is_active = is_active
        self.created_at = created_at

    @property
    def is_active(self):
        return bool(self._is_active)

    @property
    def is_admin(self):
        return self.role == "admin"

    def to_dict(self):
        return {
            "id": self.id,
            "username": self.username,
            "fullName": self.full_name,
            "role": self.role,
        }

    @staticmethod
    def from_row(row):
        if row is None:
            return None
        return User(
            id=row["id"],
            username=row["username"],
            full_name=row["full_name"],
            password_hash=row["password_hash"],
            role=row["role"],
            is_active=row["is_active"],
            created_at=row["created_at"],
        )

    @staticmethod
    def get_by_id(user_id):
        row = query_db("SELECT * FROM users WHERE id = ?", (user_id,), one=True)
        return User.from_row(row)

    @staticmethod
    def get_by_username(username):
        row = query_db("SELECT * FROM users WHERE username = ?", (username,), one=True)
        return User.from_row(row)

    @staticmethod
    def create(username, full_name, password_hash, role="employee"):
        if role not in ROLES:
            raise ValueError(f"Unknown role: {role}")
        return execute_db(
            "INSERT INTO users (username, full_name, password_hash, role) "
            "VALUES (?, ?, ?, ?)",
            (username, full_name, password_hash, role),
        )
