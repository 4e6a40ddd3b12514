from datetime import datetime

from pydantic import BaseModel, field_validator

from muro.api.v0.common import blank_to_none


class PostResponse(BaseModel):
    id: int
    nombre: str | None
    contenido: str | None
    autor_id: int | None
    imagen_url: str | None
    likes_count: int
    created_at: datetime

    model_config = {"from_attributes": True}


class PostActionResponse(BaseModel):
    success: bool = True
    message: str
    data: PostResponse


class LikeRequest(BaseModel):
    idPost: int | None = None

    @field_validator("idPost", mode="before")
    @classmethod
    def empty_as_missing(cls, v):
        return blank_to_none(v)


class LikesResponse(BaseModel):
    success: bool = True
    message: str | None = None
    likes_count: int
