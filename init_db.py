import argparse
import logging
import os
import sqlite3
from datetime import datetime

from werkzeug.security import generate_password_hash

from config import Config

logger = logging.getLogger(__name__)

SCHEMA = """
CREATE TABLE IF NOT EXISTS users (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    username TEXT UNIQUE NOT NULL,
    full_name TEXT NOT NULL,
    password_hash TEXT NOT NULL,
    role TEXT NOT NULL DEFAULT 'employee',
    is_active INTEGER NOT NULL DEFAULT 1,
    created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
);

CREATE TABLE IF NOT EXISTS persons (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    person_id TEXT UNIQUE NOT NULL,
    first_name TEXT NOT NULL,
    middle_name TEXT,
    last_name TEXT NOT NULL,
    gender TEXT NOT NULL,
    date_of_birth TEXT,
    place_of_birth TEXT,
    nationality TEXT NOT NULL DEFAULT 'Ethiopian',
    region TEXT,
    zone TEXT,
    woreda TEXT,
    kebele TEXT,
    house_number TEXT,
    phone TEXT,
    created_at TEXT,
    updated_at TEXT,
    created_by TEXT
);

CREATE TABLE IF NOT EXISTS births (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    birth_regno TEXT UNIQUE NOT NULL,
    child_name TEXT NOT NULL,
    mother_name TEXT NOT NULL,
    father_name TEXT NOT NULL,
    date_of_birth TEXT NOT NULL,
    sex TEXT NOT NULL CHECK (sex IN ('Male', 'Female')),
    city TEXT NOT NULL,
    kebele TEXT NOT NULL,
    house_number TEXT,
    nationality TEXT NOT NULL,
    registration_date TEXT NOT NULL,
    person_id TEXT REFERENCES persons(person_id),
    status TEXT NOT NULL DEFAULT 'Pending'
        CHECK (status IN ('Pending', 'Approved', 'Rejected')),
    created_at TEXT,
    updated_at TEXT,
    created_by TEXT
);

CREATE TABLE IF NOT EXISTS deaths (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    death_regno TEXT UNIQUE NOT NULL,
    name TEXT NOT NULL,
    date_of_birth TEXT NOT NULL,
    date_of_death TEXT NOT NULL,
    cause_of_death TEXT NOT NULL,
    sex TEXT NOT NULL CHECK (sex IN ('Male', 'Female')),
    city TEXT NOT NULL,
    kebele TEXT NOT NULL,
    house_number TEXT,
    nationality TEXT NOT NULL,
    registration_date TEXT NOT NULL,
    birth_regno TEXT,
    person_id TEXT REFERENCES persons(person_id),
    status TEXT NOT NULL DEFAULT 'Pending'
        CHECK (status IN ('Pending', 'Approved', 'Rejected')),
    created_at TEXT,
    updated_at TEXT,
    created_by TEXT
);

CREATE TABLE IF NOT EXISTS marriages (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    marriage_regno TEXT UNIQUE NOT NULL,
    husband_name TEXT NOT NULL,
    husband_age INTEGER NOT NULL,
    husband_nationality TEXT NOT NULL,
    wife_name TEXT NOT NULL,
    wife_age INTEGER NOT NULL,
    wife_nationality TEXT NOT NULL,
    date_of_marriage TEXT NOT NULL,
    city TEXT NOT NULL,
    kebele TEXT NOT NULL,
    house_number TEXT,
    registration_date TEXT NOT NULL,
    status TEXT NOT NULL DEFAULT 'Pending'
        CHECK (status IN ('Pending', 'Approved', 'Rejected')),
    created_at TEXT,
    updated_at TEXT,
    created_by TEXT
);

CREATE TABLE IF NOT EXISTS divorces (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    divorce_regno TEXT UNIQUE NOT NULL,
    husband_name TEXT NOT NULL,
    husband_age INTEGER NOT NULL,
    husband_nationality TEXT NOT NULL,
    wife_name TEXT NOT NULL,
    wife_age INTEGER NOT NULL,
    wife_nationality TEXT NOT NULL,
    date_of_divorce TEXT NOT NULL,
    requester TEXT NOT NULL CHECK (requester IN ('Husband', 'Wife', 'Both')),
    city TEXT NOT NULL,
    kebele TEXT NOT NULL,
    house_number TEXT,
    registration_date TEXT NOT NULL,
    status TEXT NOT NULL DEFAULT 'Pending'
        CHECK (status IN ('Pending', 'Approved', 'Rejected')),
    created_at TEXT,
    updated_at TEXT,
    created_by TEXT
);
"""

ADDRESS = {"city": "Jimma", "kebele": "Hermata Merkato"}

SAMPLE_RECORDS = {
    "births": [
        dict(ADDRESS, birth_regno="BRT-001", child_name="Abebe Kebede",
             mother_name="Almaz Tadesse", father_name="Kebede Worku",
             date_of_birth="2025-01-15", sex="Male", house_number="123",
             nationality="Ethiopian", registration_date="2025-01-20", status="Approved"),
        dict(ADDRESS, birth_regno="BRT-002", child_name="Hanna Tesfaye",
             mother_name="Tigist Alemayehu", father_name="Tesfaye Bekele",
             date_of_birth="2025-02-10", sex="Female", house_number="456",
             nationality="Ethiopian", registration_date="2025-02-15", status="Pending"),
    ],
    "deaths": [
        dict(ADDRESS, death_regno="DTH-001", name="Girma Haile",
             date_of_birth="1950-05-20", date_of_death="2025-01-10",
             cause_of_death="Natural causes", sex="Male", house_number="789",
             nationality="Ethiopian", registration_date="2025-01-12", status="Approved"),
    ],
    "marriages": [
        dict(ADDRESS, marriage_regno="MAR-001", husband_name="Samuel Desta",
             husband_age=28, husband_nationality="Ethiopian", wife_name="Meron Yohannes",
             wife_age=25, wife_nationality="Ethiopian", date_of_marriage="2024-12-25",
             house_number="321", registration_date="2024-12-26", status="Approved"),
    ],
    "divorces": [
        dict(ADDRESS, divorce_regno="DIV-001", husband_name="Daniel Mulugeta",
             husband_age=35, husband_nationality="Ethiopian", wife_name="Sara Tekle",
             wife_age=32, wife_nationality="Ethiopian", date_of_divorce="2025-01-05",
             requester="Both", house_number="654", registration_date="2025-01-07",
             status="Pending"),
    ],
}


def seed_samples(db):
    """Insert the demonstration records unless they are already present."""
    now = datetime.now().isoformat(timespec="seconds")
    for table, records in SAMPLE_RECORDS.items():
        for record in records:
            values = dict(record, created_at=now, updated_at=now, created_by="admin")
            columns = list(values)
            db.execute(
                f"INSERT OR IGNORE INTO {table} ({', '.join(columns)}) "
                f"VALUES ({', '.join('?' * len(columns))})",
                [values[column] for column in columns],
            )
    db.commit()
    logger.info("Sample records loaded")


def init_db(database=None, samples=False):
    database = database or Config.DATABASE
    directory = os.path.dirname(database)
    if directory:
        os.makedirs(directory, exist_ok=True)

    db = sqlite3.connect(database)
    db.executescript(SCHEMA)

    # Seed admin user if not exists
    cursor = db.execute("SELECT id FROM users WHERE username = 'admin'")
    if cursor.fetchone() is None:
        admin_password = os.environ.get("ADMIN_PASSWORD", "admin")
        db.execute(
            "INSERT INTO users (username, full_name, password_hash, role) "
            "VALUES (?, ?, ?, ?)",
            ("admin", "Kebele Administrator", generate_password_hash(admin_password), "admin"),
        )
        db.commit()
        if admin_password == "admin":
            logger.warning("Admin created with default password. "
                           "Set ADMIN_PASSWORD env var for production.")
        logger.info("Admin user created (username: admin)")
    else:
        logger.info("Admin user already exists")

    if samples:
        seed_samples(db)

    db.close()
    logger.info("Database initialized at %s", database)


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Create the registry database.")
    parser.add_argument("--database", help="path to the SQLite file")
    parser.add_argument("--samples", action="store_true",
                        help="load the demonstration records")
    args = parser.parse_args()

    logging.basicConfig(level=Config.LOG_LEVEL, format="%(levelname)s %(message)s")
    init_db(args.database, samples=args.samples)
