from __future__ import annotations

# movie_catalog/db.py
import sqlite3
import os
import yaml

# DB 路径解析顺序：
# 1) 环境变量 MOVIE_DB_PATH（最高优先级）
# 2) config.yaml 的 test_db_path（当检测到测试环境时）
# 3) config.yaml 的 db_path（默认）
# 4) 兜底：项目根 movies.db
_PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
_ROOT_DB = os.path.join(_PROJECT_ROOT, "movies.db")

MEMORY = ":memory:"


def _read_config_yaml() -> dict:
    cfg_path = os.path.join(_PROJECT_ROOT, "config.yaml")
    if not os.path.exists(cfg_path):
        return {}
    try:
        with open(cfg_path, "r", encoding="utf-8") as f:
            cfg = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError):
        return {}
    if not isinstance(cfg, dict):
        return {}
    out = {}
    for k in ("db_path", "test_db_path"):
        v = cfg.get(k)
        if isinstance(v, str) and v.strip():
            out[k] = v.strip()
    return out


def is_file_location(location: str) -> bool:
    return location != MEMORY and not location.startswith("file:")


def get_db_path() -> str:
    env_path = os.environ.get("MOVIE_DB_PATH")
    cfg = _read_config_yaml()
    cfg_db = cfg.get("db_path")
    cfg_test = cfg.get("test_db_path")
    is_test = (os.environ.get("APP_ENV") == "test") or (os.environ.get("PYTEST_CURRENT_TEST") is not None)

    if env_path:
        path = env_path
    elif is_test and cfg_test:
        path = cfg_test
    elif cfg_db:
        path = cfg_db
    else:
        path = _ROOT_DB

    # 确保目录存在（内存库 / URI 不处理）
    if is_file_location(path):
        dirn = os.path.dirname(path) or "."
        os.makedirs(dirn, exist_ok=True)
    return path


def connect(location: str) -> sqlite3.Connection:
    """
    打开一个 SQLite 连接：autocommit（isolation_level=None），row_factory 为 Row。
    """
    conn = sqlite3.connect(
        location,
        isolation_level=None,
        uri=True,
    )
    conn.row_factory = sqlite3.Row
    return conn
