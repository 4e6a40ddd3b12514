"""
Media ingestion gate: validates an uploaded image and hands it to the upload sink.
"""
from pathlib import Path

import filetype
from fastapi import UploadFile

from muro.core.errors import (
    ValidationError,
    PayloadTooLargeError,
    UnsupportedMediaError,
)
from muro.core.logger import get_logger
from muro.core.media import UploadSink, StoredMedia
from muro.api.v0.media.models import (
    ALLOWED_EXTENSIONS,
    ALLOWED_MIME_SUBTYPES,
    ALLOWED_CONTENT_TYPES,
    MAX_UPLOAD_SIZE,
    CHUNK_SIZE,
    MISSING_FILE_MESSAGE,
    UNSUPPORTED_TYPE_MESSAGE,
    FILE_TOO_LARGE_MESSAGE,
    EMPTY_FILE_MESSAGE,
)

logger = get_logger(__name__)


def has_upload(file: UploadFile | None) -> bool:
    return file is not None and bool(file.filename)


def require_upload(file: UploadFile | None) -> UploadFile:
    """Reject requests that need a file but didn't send one"""
    if not has_upload(file):
        raise ValidationError(MISSING_FILE_MESSAGE)
    return file


def get_extension(filename: str) -> str:
    return Path(filename).suffix.lower()


def is_allowed_mime_type(content_type: str | None) -> bool:
    """Check that a declared MIME type is an allowed image type"""
    if not content_type:
        return False

    mime = content_type.split(";", 1)[0].strip().lower()
    main_type, _, subtype = mime.partition("/")
    return main_type == "image" and subtype in ALLOWED_MIME_SUBTYPES


def validate_declared_type(filename: str, content_type: str | None) -> str:
    """
    Validate both the declared MIME type and the filename extension.

    Returns the lowercased extension to keep on the stored file.
    """
    extension = get_extension(filename)

    if extension not in ALLOWED_EXTENSIONS or not is_allowed_mime_type(content_type):
        logger.warning(
            f"Rejected upload {filename!r} declared as {content_type!r}"
        )
        raise UnsupportedMediaError(UNSUPPORTED_TYPE_MESSAGE)

    return extension


def detect_content_type(content: bytes) -> str | None:
    """
    Detect the file type using magic bytes.
    Returns the detected MIME type or None if the content isn't recognised.
    """
    kind = filetype.guess(content)
    if kind is None:
        return None
    return kind.mime


async def read_limited(file: UploadFile, max_size: int = MAX_UPLOAD_SIZE) -> bytes:
    """Read an upload in chunks, failing as soon as it grows past max_size"""
    chunks = []
    total_size = 0

    while chunk := await file.read(CHUNK_SIZE):
        total_size += len(chunk)
        if total_size > max_size:
            logger.warning(f"Rejected upload {file.filename!r}: over {max_size} bytes")
            raise PayloadTooLargeError(FILE_TOO_LARGE_MESSAGE)
        chunks.append(chunk)

    return b"".join(chunks)


async def ingest_upload(file: UploadFile, sink: UploadSink) -> StoredMedia:
    """
    Validate an uploaded image and store it under a fresh name.

    Checks run before anything is written: declared type and extension,
    size (at most 5 MiB), non-empty content, and that the bytes aren't
    recognisably some other kind of file.
    """
    extension = validate_declared_type(file.filename or "", file.content_type)

    if file.size is not None and file.size > MAX_UPLOAD_SIZE:
        logger.warning(f"Rejected upload {file.filename!r}: {file.size} bytes")
        raise PayloadTooLargeError(FILE_TOO_LARGE_MESSAGE)

    content = await read_limited(file)

    if not content:
        raise ValidationError(EMPTY_FILE_MESSAGE)

    detected_mime = detect_content_type(content)
    if detected_mime is not None and detected_mime not in ALLOWED_CONTENT_TYPES:
        logger.warning(
            f"Rejected upload {file.filename!r}: content detected as {detected_mime}"
        )
        raise UnsupportedMediaError(UNSUPPORTED_TYPE_MESSAGE)

    return sink.save(content, extension)
