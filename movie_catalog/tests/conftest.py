import sys
import pytest
from pathlib import Path

# Ensure project root on sys.path
_THIS_DIR = Path(__file__).resolve().parent
_PROJECT_ROOT = _THIS_DIR.parent.parent
if str(_PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(_PROJECT_ROOT))

from movie_catalog.services.movie_store import MovieStore

HEADER = "title,genres,year"


@pytest.fixture()
def store():
    # in-memory DB: lives exactly as long as this store's connection
    s = MovieStore(":memory:")
    s.create_schema()
    yield s
    if not s.closed:
        s.close()


@pytest.fixture()
def write_csv(tmp_path):
    """Write a CSV (header + given lines) and return its path as str."""
    def _write(*lines, header=HEADER, name="movies.csv"):
        path = tmp_path / name
        body = [header] if header is not None else []
        body.extend(lines)
        path.write_text("\n".join(body) + "\n", encoding="utf-8")
        return str(path)
    return _write

