# tests/conftest.py

import pytest

from models.model import Model
from models.storage import Storage
from models.user_prefs import UserPrefs
from typical_students import ALICE, typical_students


@pytest.fixture
def sample_student():
    return ALICE


@pytest.fixture
def model():
    return Model(typical_students())


@pytest.fixture
def expected_model():
    return Model(typical_students())


@pytest.fixture
def empty_model():
    return Model()


@pytest.fixture
def storage(tmp_path):
    return Storage(
        str(tmp_path / "students.json"),
        str(tmp_path / "archive.json"),
        str(tmp_path / "preferences.json"),
    )


@pytest.fixture
def user_prefs(tmp_path):
    return UserPrefs.in_directory(str(tmp_path))
