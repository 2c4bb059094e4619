import os

os.environ.setdefault("JWT_SECRET", "test-secret")

import pytest
from fastapi.testclient import TestClient

import app.api as api_module
from app import deps
from core.accounts import AccountManager
from core.config import Settings, get_settings
from core.errors import StoreConflict
from core.tokens import SessionClaims, TokenService

FRONTEND_URL = "http://frontend.test"


class InMemoryUserStore:
    """Credential store with the same uniqueness rules as the users table."""

    def __init__(self):
        self.users = {}
        self._next_id = 1

    def find_by_email(self, email):
        email = (email or "").strip().lower()
        for user in self.users.values():
            if user["email"] == email:
                return dict(user)
        return None

    def find_by_id(self, user_id):
        user = self.users.get(user_id)
        return dict(user) if user else None

    def create(self, username, email, password_hash):
        email = email.strip().lower()
        for user in self.users.values():
            if user["email"] == email or user["username"] == username:
                raise StoreConflict("duplicate key value violates unique constraint")
        user = {
            "id": self._next_id,
            "username": username,
            "email": email,
            "password_hash": password_hash,
            "created_at": "2025-01-01T00:00:00+00:00",
            "updated_at": "2025-01-01T00:00:00+00:00",
        }
        self.users[user["id"]] = user
        self._next_id += 1
        return dict(user)

    def save(self, user):
        self.users[user["id"]] = dict(user)


class FakeMailer:
    def __init__(self):
        self.sent = []
        self.fail_with = None

    def send(self, to_email, subject, body):
        if self.fail_with is not None:
            raise self.fail_with
        self.sent.append((to_email, subject, body))


class FakeStorage:
    def __init__(self):
        self.stored = []
        self.deleted = []

    def store(self, data, content_type, folder):
        url = f"https://res.cloudinary.com/demo/image/upload/v1/{folder}/file{len(self.stored) + 1}.jpg"
        self.stored.append((url, data, content_type))
        return url

    def delete(self, url):
        self.deleted.append(url)


def token_from_mail(body: str) -> str:
    return body.split("token=", 1)[1].split()[0]


@pytest.fixture
def settings():
    return Settings(jwt_secret="test-secret", frontend_url=FRONTEND_URL)


@pytest.fixture
def tokens(settings):
    return TokenService(settings.jwt_secret)


@pytest.fixture
def store():
    return InMemoryUserStore()


@pytest.fixture
def mailer():
    return FakeMailer()


@pytest.fixture
def storage():
    return FakeStorage()


@pytest.fixture
def manager(store, tokens, mailer):
    return AccountManager(store=store, tokens=tokens, mailer=mailer, frontend_url=FRONTEND_URL)


@pytest.fixture
def client(settings, store, mailer, storage):
    overrides = api_module.app.dependency_overrides
    overrides[get_settings] = lambda: settings
    overrides[deps.get_user_store] = lambda: store
    overrides[deps.get_mailer] = lambda: mailer
    overrides[deps.get_storage] = lambda: storage
    yield TestClient(api_module.app)
    overrides.clear()


@pytest.fixture
def auth_headers(tokens):
    token = tokens.issue(SessionClaims(userId=1, username="agency", email="agency@example.com"))
    return {"Authorization": f"Bearer {token}"}


# --- Postgres-backed tests (skipped unless DATABASE_URL is set) ---

@pytest.fixture
def pg():
    if not os.getenv("DATABASE_URL"):
        pytest.skip("DATABASE_URL must be set for Postgres-only tests.")
    from core.db.base import get_conn
    from core.db.schema import TABLES, init_db

    def _truncate_all():
        conn = get_conn()
        cur = conn.cursor()
        cur.execute("TRUNCATE " + ", ".join(TABLES) + " RESTART IDENTITY CASCADE")
        conn.commit()
        conn.close()

    get_settings.cache_clear()
    init_db()
    _truncate_all()
    yield get_conn
    _truncate_all()
