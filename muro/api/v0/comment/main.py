from sqlalchemy.orm import Session
from fastapi import APIRouter, Depends

from muro.core.db import repository
from muro.core.db.session import get_db, require_store
from muro.core.errors import ValidationError
from muro.core.logger import get_logger
from muro.api.v0.comment.models import (
    CommentCreate,
    CommentResponse,
    CommentActionResponse,
)

router = APIRouter(
    prefix="/comentarios", tags=["comments"], dependencies=[Depends(require_store)]
)
logger = get_logger(__name__)


@router.post("", response_model=CommentActionResponse)
def create_comment(comment_data: CommentCreate, session: Session = Depends(get_db)):
    """Add a comment to a post; the post id is stored as given"""
    if not (comment_data.idPost and comment_data.nombre and comment_data.comentario):
        raise ValidationError("Se requiere el id del post, nombre y comentario")

    comment = repository.create_comment(
        session, comment_data.idPost, comment_data.nombre, comment_data.comentario
    )

    logger.info(f"Comment {comment.id} created on post {comment.post_id}")
    return CommentActionResponse(
        message="Comentario agregado exitosamente",
        data=CommentResponse.model_validate(comment),
    )


@router.get("/{idPost}", response_model=list[CommentResponse])
def list_comments(idPost: int, session: Session = Depends(get_db)):
    """Comments on a post, oldest first"""
    return repository.list_comments(session, idPost)
