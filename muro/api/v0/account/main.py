from fastapi import APIRouter, Depends, File, Form, Query, UploadFile
from sqlalchemy.orm import Session

from muro.core.db import repository
from muro.core.db.session import get_db, require_store
from muro.core.errors import AuthenticationError, NotFoundError, ValidationError
from muro.core.logger import get_logger
from muro.core.media import UploadSink, get_upload_sink
from muro.core.security import verify_credential
from muro.api.v0.media.main import require_upload, ingest_upload
from muro.api.v0.account.models import (
    AccountResponse,
    AccountActionResponse,
    LoginRequest,
    LoginResponse,
    LoginUser,
)

router = APIRouter(tags=["accounts"], dependencies=[Depends(require_store)])
logger = get_logger(__name__)

MISSING_OWNER_MESSAGE = "Se requiere el id_usuario"
ACCOUNT_NOT_FOUND_MESSAGE = "Usuario no encontrado"


@router.get("/usuarios", response_model=list[AccountResponse])
def list_accounts(session: Session = Depends(get_db)):
    return repository.list_accounts(session)


@router.get("/usuario", response_model=list[AccountResponse])
def get_account(
    account_id: int = Query(..., alias="id"),
    session: Session = Depends(get_db),
):
    """Fetch one account, as a list with zero or one row"""
    account = repository.get_account(session, account_id)
    return [account] if account else []


@router.post("/login", response_model=LoginResponse)
def login(credentials: LoginRequest, session: Session = Depends(get_db)):
    if not credentials.correo or not credentials.clave:
        raise ValidationError("Correo y clave son requeridos")

    account = repository.find_account_by_email(session, credentials.correo)

    if not account or not verify_credential(credentials.clave, account.clave):
        logger.warning(f"Failed login for {credentials.correo}")
        raise AuthenticationError("Credenciales incorrectas")

    logger.info(f"Account {account.id} logged in")
    return LoginResponse(user=LoginUser(id=account.id, correo=account.correo))


async def replace_account_image(
    field: str,
    message: str,
    file: UploadFile | None,
    owner_id: int | None,
    session: Session,
    sink: UploadSink,
) -> AccountActionResponse:
    """Store an uploaded image and point one of the account image columns at it"""
    upload = require_upload(file)
    if owner_id is None:
        raise ValidationError(MISSING_OWNER_MESSAGE)

    # Check first so a missing account doesn't leave an orphan file behind
    if repository.get_account(session, owner_id) is None:
        raise NotFoundError(ACCOUNT_NOT_FOUND_MESSAGE)

    media = await ingest_upload(upload, sink)

    account = repository.update_account_image(session, owner_id, field, media.url)
    if account is None:
        raise NotFoundError(ACCOUNT_NOT_FOUND_MESSAGE)

    logger.info(f"Account {owner_id} {field} set to {media.url}")
    return AccountActionResponse(
        message=message, data=AccountResponse.model_validate(account)
    )


@router.post("/cambiarPerfil", response_model=AccountActionResponse)
async def change_profile_image(
    file: UploadFile | None = File(None),
    idUser: int | None = Form(None),
    session: Session = Depends(get_db),
    sink: UploadSink = Depends(get_upload_sink),
):
    return await replace_account_image(
        "foto_perfil", "Foto perfil subida correctamente", file, idUser, session, sink
    )


@router.post("/cambiarPortada", response_model=AccountActionResponse)
async def change_cover_image(
    file: UploadFile | None = File(None),
    idUser: int | None = Form(None),
    session: Session = Depends(get_db),
    sink: UploadSink = Depends(get_upload_sink),
):
    return await replace_account_image(
        "img_portada", "Foto portada subida correctamente", file, idUser, session, sink
    )
