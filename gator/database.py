"""SQLite storage for users and feeds."""

from __future__ import annotations

import sqlite3
import uuid
from dataclasses import dataclass
from datetime import datetime

_SCHEMA = """
CREATE TABLE IF NOT EXISTS users (
    id TEXT PRIMARY KEY,
    created_at TEXT NOT NULL,
    updated_at TEXT NOT NULL,
    name TEXT NOT NULL UNIQUE
);
CREATE TABLE IF NOT EXISTS feeds (
    id TEXT PRIMARY KEY,
    created_at TEXT NOT NULL,
    updated_at TEXT NOT NULL,
    name TEXT NOT NULL,
    url TEXT NOT NULL UNIQUE,
    user_id TEXT NOT NULL REFERENCES users (id) ON DELETE CASCADE
);
"""

_USER_COLUMNS = "id, created_at, updated_at, name"
_FEED_COLUMNS = "id, created_at, updated_at, name, url, user_id"


@dataclass(frozen=True)
class User:
    id: uuid.UUID
    created_at: datetime
    updated_at: datetime
    name: str


@dataclass(frozen=True)
class Feed:
    id: uuid.UUID
    created_at: datetime
    updated_at: datetime
    name: str
    url: str
    user_id: uuid.UUID


class NotFoundError(LookupError):
    """A query that expects exactly one row found none."""


def connect(db_url: str) -> sqlite3.Connection:
    """Open the database named by ``db_url`` and make sure the tables exist.

    Accepts a file path, ``:memory:``, or a ``sqlite:///path`` URL.
    """
    target = db_url
    if target.startswith("sqlite:///"):
        target = target[len("sqlite:///"):]
    elif target.startswith("sqlite://"):
        target = target[len("sqlite://"):]
    conn = sqlite3.connect(target or ":memory:")
    ensure_schema(conn)
    return conn


def ensure_schema(conn: sqlite3.Connection) -> None:
    """Turn on foreign keys and create the tables if they are missing."""
    conn.execute("PRAGMA foreign_keys = ON")
    conn.executescript(_SCHEMA)
    conn.commit()


def _user(row: tuple) -> User:
    return User(
        id=uuid.UUID(row[0]),
        created_at=datetime.fromisoformat(row[1]),
        updated_at=datetime.fromisoformat(row[2]),
        name=row[3],
    )


def _feed(row: tuple) -> Feed:
    return Feed(
        id=uuid.UUID(row[0]),
        created_at=datetime.fromisoformat(row[1]),
        updated_at=datetime.fromisoformat(row[2]),
        name=row[3],
        url=row[4],
        user_id=uuid.UUID(row[5]),
    )


class Queries:
    """The queries the application runs against its database."""

    def __init__(self, conn: sqlite3.Connection):
        self.conn = conn

    def _one(self, sql: str, params: tuple, what: str) -> tuple:
        row = self.conn.execute(sql, params).fetchone()
        if row is None:
            raise NotFoundError(what)
        return row

    def create_user(
        self, id: uuid.UUID, created_at: datetime, updated_at: datetime, name: str
    ) -> User:
        with self.conn:
            row = self.conn.execute(
                f"INSERT INTO users ({_USER_COLUMNS}) VALUES (?, ?, ?, ?) "
                f"RETURNING {_USER_COLUMNS}",
                (str(id), created_at.isoformat(), updated_at.isoformat(), name),
            ).fetchone()
        return _user(row)

    def delete_users(self) -> None:
        with self.conn:
            self.conn.execute("DELETE FROM users")

    def get_user(self, name: str) -> User:
        return _user(
            self._one(
                f"SELECT {_USER_COLUMNS} FROM users WHERE name = ?",
                (name,),
                f"no user named {name!r}",
            )
        )

    def get_user_by_id(self, id: uuid.UUID) -> User:
        return _user(
            self._one(
                f"SELECT {_USER_COLUMNS} FROM users WHERE id = ?",
                (str(id),),
                f"no user with id {id}",
            )
        )

    def get_users(self) -> list[User]:
        rows = self.conn.execute(f"SELECT {_USER_COLUMNS} FROM users ORDER BY rowid")
        return [_user(row) for row in rows]

    def create_feed(
        self,
        id: uuid.UUID,
        created_at: datetime,
        updated_at: datetime,
        name: str,
        url: str,
        user_id: uuid.UUID,
    ) -> Feed:
        with self.conn:
            row = self.conn.execute(
                f"INSERT INTO feeds ({_FEED_COLUMNS}) VALUES (?, ?, ?, ?, ?, ?) "
                f"RETURNING {_FEED_COLUMNS}",
                (
                    str(id),
                    created_at.isoformat(),
                    updated_at.isoformat(),
                    name,
                    url,
                    str(user_id),
                ),
            ).fetchone()
        return _feed(row)

    def get_feeds(self) -> list[Feed]:
        rows = self.conn.execute(f"SELECT {_FEED_COLUMNS} FROM feeds ORDER BY rowid")
        return [_feed(row) for row in rows]