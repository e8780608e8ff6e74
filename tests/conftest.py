import tempfile
from pathlib import Path

import pytest

from magsell import DatabaseService


@pytest.fixture()
def home():
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture()
def service(home):
    db = DatabaseService(home)
    db.initialize()
    yield db
    db.shutdown()
