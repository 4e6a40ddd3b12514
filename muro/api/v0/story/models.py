from datetime import datetime

from pydantic import BaseModel


class StoryResponse(BaseModel):
    id: int
    id_usuario: int
    contenido: str
    created_at: datetime

    model_config = {"from_attributes": True}


class StoryActionResponse(BaseModel):
    success: bool = True
    message: str
    data: StoryResponse
