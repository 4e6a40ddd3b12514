"""
Test configuration and fixtures for Muro tests.
"""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.pool import StaticPool

from muro.core.db.engine import RecordStore
from muro.core.db.tables.base import Base
from muro.core.db.tables.account import Account
from muro.core.db.tables.post import Post
from muro.core.media import UploadSink
from muro.core.security import hash_credential

# Smallest byte prefix filetype recognises as PNG
PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"\x00" * 64


@pytest.fixture(scope="function")
def store():
    """Create an isolated in-memory record store for each test."""
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    record_store = RecordStore(engine)
    record_store.create_tables()

    yield record_store

    Base.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture
def db_session(store):
    session = store.session()
    yield session
    session.close()


@pytest.fixture
def upload_sink(tmp_path):
    return UploadSink(tmp_path / "uploads")


@pytest.fixture
def client_factory(upload_sink):
    """Factory to create test clients bound to a specific record store."""

    def create_client(record_store, raise_server_exceptions=True):
        from muro.app import app
        from muro.core.db.session import get_store
        from muro.core.media import get_upload_sink

        app.dependency_overrides[get_store] = lambda: record_store
        app.dependency_overrides[get_upload_sink] = lambda: upload_sink

        return TestClient(app, raise_server_exceptions=raise_server_exceptions)

    yield create_client

    from muro.app import app

    app.dependency_overrides.clear()


@pytest.fixture
def client(store, client_factory):
    return client_factory(store)


@pytest.fixture
def unavailable_store(tmp_path):
    """A store whose database file can never be opened."""
    engine = create_engine(f"sqlite:///{tmp_path}/missing-dir/muro.db")
    yield RecordStore(engine)
    engine.dispose()


@pytest.fixture
def stored_files(upload_sink):
    """List the files currently in the upload directory."""

    def list_files():
        if not upload_sink.root.exists():
            return []
        return sorted(p.name for p in upload_sink.root.iterdir())

    return list_files


@pytest.fixture
def image_file():
    """Build a multipart file tuple; defaults to a small PNG."""

    def build(filename="foto.png", content=PNG_BYTES, content_type="image/png"):
        return {"file": (filename, content, content_type)}

    return build


@pytest.fixture
def test_account(db_session):
    """Create an account with a plaintext credential."""
    account = Account(
        nombre="Ana",
        apellido="Pérez",
        correo="ana@example.com",
        clave="secreta",
    )
    db_session.add(account)
    db_session.commit()
    db_session.refresh(account)

    return {"id": account.id, "correo": "ana@example.com", "clave": "secreta"}


@pytest.fixture
def hashed_account(db_session):
    """Create an account whose credential is stored as a bcrypt hash."""
    account = Account(
        nombre="Luis",
        apellido="Gómez",
        correo="luis@example.com",
        clave=hash_credential("otra-clave"),
    )
    db_session.add(account)
    db_session.commit()
    db_session.refresh(account)

    return {"id": account.id, "correo": "luis@example.com", "clave": "otra-clave"}


@pytest.fixture
def post_factory(db_session):
    """Create posts with a given like count."""

    def create_post(likes_count=0, contenido="Hola"):
        post = Post(
            nombre="Ana",
            contenido=contenido,
            autor_id=1,
            likes_count=likes_count,
        )
        db_session.add(post)
        db_session.commit()
        db_session.refresh(post)
        return post.id

    return create_post
