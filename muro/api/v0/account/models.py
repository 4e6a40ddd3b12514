from pydantic import BaseModel, field_validator

from muro.api.v0.common import blank_to_none


class AccountResponse(BaseModel):
    """Public view of an account; the stored credential is never included"""

    id: int
    nombre: str | None
    apellido: str | None
    correo: str
    foto_perfil: str | None
    img_portada: str | None

    model_config = {"from_attributes": True}


class AccountActionResponse(BaseModel):
    success: bool = True
    message: str
    data: AccountResponse


class LoginRequest(BaseModel):
    correo: str | None = None
    clave: str | None = None

    model_config = {"coerce_numbers_to_str": True}

    @field_validator("correo", "clave", mode="before")
    @classmethod
    def empty_as_missing(cls, v):
        return blank_to_none(v)


class LoginUser(BaseModel):
    id: int
    correo: str


class LoginResponse(BaseModel):
    success: bool = True
    user: LoginUser
