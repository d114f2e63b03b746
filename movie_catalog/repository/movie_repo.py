from sqlite3 import Connection, OperationalError
from typing import List

DDL = """
CREATE TABLE IF NOT EXISTS movies (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    title TEXT NOT NULL,
    genres TEXT NOT NULL,
    year INTEGER NOT NULL
)
"""


def ensure_schema(conn: Connection):
    conn.execute(DDL)


def insert(conn: Connection, title: str, genres: str, year: int) -> int:
    cur = conn.execute(
        "INSERT INTO movies(title, genres, year) VALUES(?,?,?)",
        (title, genres, int(year)),
    )
    return cur.lastrowid


def delete_all(conn: Connection) -> int:
    return conn.execute("DELETE FROM movies").rowcount


def delete_by_title(conn: Connection, title: str) -> int:
    return conn.execute("DELETE FROM movies WHERE title=?", (title,)).rowcount


def list_all(conn: Connection) -> List:
    # 不加 ORDER BY：调用方不能依赖顺序
    return conn.execute("SELECT title, genres, year FROM movies").fetchall()


def count(conn: Connection) -> int:
    row = conn.execute("SELECT COUNT(1) AS cnt FROM movies").fetchone()
    return int(row["cnt"])


def is_missing_table(exc: Exception) -> bool:
    return isinstance(exc, OperationalError) and "no such table" in str(exc).lower()
