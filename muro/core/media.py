"""
Local upload sink: writes ingested media under the public upload root
"""
import uuid
import time
from dataclasses import dataclass
from pathlib import Path

from muro.core import config
from muro.core.logger import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class StoredMedia:
    """A media file written by the sink."""

    filename: str
    extension: str
    size_bytes: int
    url: str


def generate_storage_name(extension: str) -> str:
    """
    Generate a fresh storage name from the ingestion time.

    The random suffix keeps names distinct for uploads that land in the
    same millisecond.
    """
    return f"{int(time.time() * 1000)}-{uuid.uuid4().hex[:8]}{extension}"


def is_safe_filename(filename: str) -> bool:
    """Reject names that could escape the upload root."""
    return bool(filename) and not (
        ".." in filename or "/" in filename or "\\" in filename
    )


class UploadSink:
    """Write-once file store under a public, statically served directory"""

    def __init__(self, root: str | Path, url_prefix: str = config.UPLOAD_URL_PREFIX):
        self.root = Path(root)
        self.url_prefix = url_prefix.rstrip("/")

    def ensure_root(self) -> Path:
        self.root.mkdir(parents=True, exist_ok=True)
        return self.root

    def path_for(self, filename: str) -> Path:
        return self.root / filename

    def url_for(self, filename: str) -> str:
        return f"{self.url_prefix}/{filename}"

    def save(self, content: bytes, extension: str) -> StoredMedia:
        """
        Persist bytes under a newly generated name.

        The file is opened in exclusive-create mode, so an existing file is
        never overwritten.
        """
        upload_dir = self.ensure_root()
        filename = generate_storage_name(extension)

        with open(upload_dir / filename, "xb") as f:
            f.write(content)

        logger.info(f"Media stored: {filename} ({len(content)} bytes)")

        return StoredMedia(
            filename=filename,
            extension=extension,
            size_bytes=len(content),
            url=self.url_for(filename),
        )


upload_sink = UploadSink(config.UPLOAD_DIR)


def get_upload_sink() -> UploadSink:
    return upload_sink
