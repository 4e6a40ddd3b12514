from fastapi import APIRouter, Depends, File, Form, UploadFile
from sqlalchemy.orm import Session

from muro.core.db import repository
from muro.core.db.session import get_db, require_store
from muro.core.errors import ValidationError
from muro.core.logger import get_logger
from muro.core.media import UploadSink, get_upload_sink
from muro.api.v0.media.main import require_upload, ingest_upload
from muro.api.v0.story.models import StoryResponse, StoryActionResponse

router = APIRouter(tags=["stories"], dependencies=[Depends(require_store)])
logger = get_logger(__name__)


@router.get("/historias", response_model=list[StoryResponse])
def list_stories(session: Session = Depends(get_db)):
    """All stories, newest first"""
    return repository.list_stories(session)


@router.post("/crearhistoria", response_model=StoryActionResponse)
async def create_story(
    file: UploadFile | None = File(None),
    idUser: int | None = Form(None),
    session: Session = Depends(get_db),
    sink: UploadSink = Depends(get_upload_sink),
):
    """Upload an image and publish it as a story of the given account"""
    upload = require_upload(file)
    if idUser is None:
        raise ValidationError("Se requiere el id_usuario")

    media = await ingest_upload(upload, sink)
    story = repository.create_story(session, idUser, media.url)

    logger.info(f"Story {story.id} created by account {idUser}")
    return StoryActionResponse(
        message="Historia subida exitosamente",
        data=StoryResponse.model_validate(story),
    )
