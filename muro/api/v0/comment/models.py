from datetime import datetime

from pydantic import BaseModel, field_validator

from muro.api.v0.common import blank_to_none


class CommentCreate(BaseModel):
    idPost: int | None = None
    nombre: str | None = None
    comentario: str | None = None

    model_config = {"coerce_numbers_to_str": True}

    @field_validator("idPost", "nombre", "comentario", mode="before")
    @classmethod
    def empty_as_missing(cls, v):
        return blank_to_none(v)


class CommentResponse(BaseModel):
    id: int
    post_id: int
    nombre: str
    comentario: str
    created_at: datetime

    model_config = {"from_attributes": True}


class CommentActionResponse(BaseModel):
    success: bool = True
    message: str
    data: CommentResponse
