from typing import Generator

from fastapi import Depends
from sqlalchemy.orm import Session

from muro.core.db.engine import RecordStore, store
from muro.core.errors import ServiceUnavailableError

STORE_UNAVAILABLE_MESSAGE = "Error de conexión con la base de datos"


def get_store() -> RecordStore:
    return store


def require_store(record_store: RecordStore = Depends(get_store)) -> RecordStore:
    """Dependency that short-circuits the request when the store is unreachable"""
    if not record_store.is_available():
        raise ServiceUnavailableError(STORE_UNAVAILABLE_MESSAGE)
    return record_store


def get_db(
    record_store: RecordStore = Depends(get_store),
) -> Generator[Session, None, None]:
    db = record_store.session()
    try:
        yield db
    finally:
        db.close()
