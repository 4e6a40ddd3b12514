from fastapi import APIRouter, Depends, File, Form, UploadFile
from sqlalchemy.orm import Session

from muro.core.db import repository
from muro.core.db.session import get_db, require_store
from muro.core.errors import NotFoundError, ValidationError
from muro.core.logger import get_logger
from muro.core.media import UploadSink, get_upload_sink
from muro.api.v0.media.main import has_upload, ingest_upload
from muro.api.v0.post.models import (
    PostResponse,
    PostActionResponse,
    LikeRequest,
    LikesResponse,
)

router = APIRouter(tags=["posts"], dependencies=[Depends(require_store)])
logger = get_logger(__name__)

POST_NOT_FOUND_MESSAGE = "Post no encontrado"


def require_post_id(like_request: LikeRequest) -> int:
    if like_request.idPost is None:
        raise ValidationError("Se requiere el id del post")
    return like_request.idPost


@router.post("/insertarPost", response_model=PostActionResponse)
async def create_post(
    file: UploadFile | None = File(None),
    txt: str | None = Form(None),
    author_id: int | None = Form(None, alias="id"),
    nombreUser: str | None = Form(None),
    session: Session = Depends(get_db),
    sink: UploadSink = Depends(get_upload_sink),
):
    """
    Create a post, optionally with an attached image.

    The author is not checked against the accounts table.
    """
    image_url = None
    if has_upload(file):
        image_url = (await ingest_upload(file, sink)).url

    post = repository.create_post(session, nombreUser, txt, author_id, image_url)

    logger.info(f"Post {post.id} created by account {author_id}")
    return PostActionResponse(
        message="Post creado exitosamente",
        data=PostResponse.model_validate(post),
    )


@router.get("/optenerPost", response_model=list[PostResponse])
def list_posts(session: Session = Depends(get_db)):
    """All posts, newest first"""
    return repository.list_posts(session)


@router.post("/likes", response_model=LikesResponse)
def add_like(like_request: LikeRequest, session: Session = Depends(get_db)):
    post_id = require_post_id(like_request)

    likes = repository.increment_likes(session, post_id)
    if likes is None:
        logger.warning(f"Like on missing post {post_id}")
        raise NotFoundError(POST_NOT_FOUND_MESSAGE)

    return LikesResponse(message="Like agregado exitosamente", likes_count=likes)


@router.post("/eliminaLike", response_model=LikesResponse)
def remove_like(like_request: LikeRequest, session: Session = Depends(get_db)):
    """
    Remove a like.

    A post at zero likes and a missing post are reported the same way,
    since neither has a like to remove.
    """
    post_id = require_post_id(like_request)

    likes = repository.decrement_likes(session, post_id)
    if likes is None:
        raise ValidationError("No hay likes para eliminar")

    return LikesResponse(message="Like eliminado exitosamente", likes_count=likes)


@router.get("/likes/{idPost}", response_model=LikesResponse, response_model_exclude_none=True)
def get_likes(idPost: int, session: Session = Depends(get_db)):
    likes = repository.get_likes(session, idPost)
    if likes is None:
        raise NotFoundError(POST_NOT_FOUND_MESSAGE)

    return LikesResponse(likes_count=likes)
