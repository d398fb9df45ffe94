"""Shared fixtures: a throw-away SQLite database, upload directory and users."""

from __future__ import annotations

import os
import shutil
import sys
import tempfile
from collections.abc import Callable, Iterator
from pathlib import Path

import pytest

pytest.importorskip("fastapi")
from fastapi.testclient import TestClient

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.append(str(ROOT))

TEST_DB_PATH = Path(tempfile.gettempdir()) / "tls_api_test.db"
TEST_UPLOAD_ROOT = Path(tempfile.mkdtemp(prefix="tls_api_uploads_"))
os.environ["DATABASE_URL"] = f"sqlite:///{TEST_DB_PATH}"
os.environ["SECRET_KEY"] = "test-secret"
os.environ["ACCESS_TOKEN_EXPIRE_MINUTES"] = "30"
os.environ["UPLOAD_ROOT"] = str(TEST_UPLOAD_ROOT)
os.environ["UPLOAD_URL_PREFIX"] = "/uploads"
os.environ["LOG_LEVEL"] = "WARNING"

from tls_api.config import get_settings  # noqa: E402

get_settings.cache_clear()

from main import create_app  # noqa: E402
from tls_api.application.use_cases.initiatives import create_initiative  # noqa: E402
from tls_api.application.use_cases.users import create_user  # noqa: E402
from tls_api.domain.entities import Initiative  # noqa: E402
from tls_api.infrastructure.database import (  # noqa: E402
    Base,
    SessionLocal,
    engine,
    initialize_database,
)
from tls_api.infrastructure.storage import IncomingImage, LocalImageStorage  # noqa: E402

ADMIN_EMAIL = "admin@example.com"
ADMIN_PASSWORD = "AdminPass123"
EDITOR_EMAIL = "editor@example.com"
EDITOR_PASSWORD = "EditorPass123"

IMAGE_BYTES = b"\xff\xd8\xff\xe0" + b"\x00" * 64


def make_images(*names: str, content_type: str = "image/jpeg") -> list[IncomingImage]:
    """Build in-memory uploads as the API layer hands them to the use cases."""

    return [IncomingImage(filename=name, content_type=content_type, data=IMAGE_BYTES) for name in names]


def image_files(*names: str, content_type: str = "image/jpeg") -> list[tuple]:
    """Return a multipart ``files`` argument posting ``names`` under ``images``."""

    return [("images", (name, IMAGE_BYTES, content_type)) for name in names]


@pytest.fixture(autouse=True)
def reset_database() -> Iterator[None]:
    """Ensure the test database starts from a clean state for each test."""

    Base.metadata.drop_all(bind=engine)
    initialize_database()
    yield
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture(autouse=True)
def clean_uploads() -> Iterator[None]:
    shutil.rmtree(TEST_UPLOAD_ROOT / "initiatives", ignore_errors=True)
    yield
    shutil.rmtree(TEST_UPLOAD_ROOT / "initiatives", ignore_errors=True)


@pytest.fixture()
def db_session():
    with SessionLocal() as session:
        yield session


@pytest.fixture()
def storage() -> LocalImageStorage:
    return LocalImageStorage(get_settings().initiative_image_settings())


@pytest.fixture()
def client() -> Iterator[TestClient]:
    """Return a test client bound to a clean application instance."""

    app = create_app()
    with TestClient(app) as test_client:
        yield test_client


def login(client: TestClient, email: str, password: str) -> dict[str, str]:
    response = client.post("/api/auth/token", data={"username": email, "password": password})
    assert response.status_code == 200, response.text
    return {"Authorization": f"Bearer {response.json()['access_token']}"}


@pytest.fixture()
def admin_headers(client: TestClient) -> dict[str, str]:
    with SessionLocal() as session:
        create_user(session, name="Site Admin", email=ADMIN_EMAIL, password=ADMIN_PASSWORD)
    return login(client, ADMIN_EMAIL, ADMIN_PASSWORD)


@pytest.fixture()
def editor_headers(client: TestClient) -> dict[str, str]:
    with SessionLocal() as session:
        create_user(
            session,
            name="Content Editor",
            email=EDITOR_EMAIL,
            password=EDITOR_PASSWORD,
            role_alias="editor",
        )
    return login(client, EDITOR_EMAIL, EDITOR_PASSWORD)


@pytest.fixture()
def make_initiative() -> Callable[..., Initiative]:
    """Return a factory inserting initiatives with sensible defaults."""

    created = 0

    def factory(**overrides) -> Initiative:
        nonlocal created
        created += 1
        values = {
            "title_en": f"Tamil Reading Circle {created}",
            "title_ta": "தமிழ் வாசிப்பு வட்டம்",
            "bureau": "language-literature",
            "description_en": "Weekly reading sessions on Tamil literature.",
            "description_ta": "தமிழ் இலக்கிய வாசிப்பு அமர்வுகள்.",
            "director_name": "Kavitha Raman",
            "director_email": "kavitha@example.com",
            "director_phone": "+1 555 0100",
            "status": "active",
        }
        values.update(overrides)
        with SessionLocal() as session:
            return create_initiative(session, **values)

    return factory
