import os
import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from govuk_binders.schemas import DateErrorText  # noqa: E402
from govuk_binders.services.model_state import ModelState  # noqa: E402


@pytest.fixture(scope="session")
def client():
    os.environ["APP_ENV"] = "test"
    from govuk_binders.main import app

    with TestClient(app) as c:
        yield c


@pytest.fixture
def error_text():
    return DateErrorText(
        name_at_start_of_sentence="Date of birth",
        name_within_sentence="date of birth",
    )


@pytest.fixture
def model_state():
    return ModelState()
