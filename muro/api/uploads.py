from fastapi import APIRouter, Depends
from fastapi.responses import FileResponse

from muro.core import config
from muro.core.errors import NotFoundError, ValidationError
from muro.core.media import UploadSink, get_upload_sink, is_safe_filename

router = APIRouter(prefix=config.UPLOAD_URL_PREFIX, tags=["uploads"])


@router.get("/{filename}")
def serve_upload(filename: str, sink: UploadSink = Depends(get_upload_sink)):
    """
    Serve an uploaded media file.
    Public endpoint, not gated on the record store.
    """
    # Security: prevent path traversal attacks
    if not is_safe_filename(filename):
        raise ValidationError("Nombre de archivo no válido")

    file_path = sink.path_for(filename)

    if not file_path.is_file():
        raise NotFoundError("Archivo no encontrado")

    return FileResponse(
        path=file_path,
        headers={
            "Cache-Control": "public, max-age=31536000",  # Names are never reused
        }
    )
