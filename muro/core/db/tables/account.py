from sqlalchemy import String, Integer
from sqlalchemy.orm import Mapped, mapped_column

from muro.core.db.tables.base import Base


class Account(Base):
    """
    A user account.

    Rows are seeded outside the API. Only the image references are
    updated here, by the profile and cover upload endpoints.
    """

    __tablename__ = "usuarios"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    nombre: Mapped[str | None] = mapped_column(String(256), nullable=True)
    apellido: Mapped[str | None] = mapped_column(String(256), nullable=True)
    correo: Mapped[str] = mapped_column(String(256), unique=True, index=True)
    # Plaintext (legacy) or bcrypt hash, see muro.core.security.verify_credential
    clave: Mapped[str] = mapped_column(String(256))
    foto_perfil: Mapped[str | None] = mapped_column(String(512), nullable=True)
    img_portada: Mapped[str | None] = mapped_column(String(512), nullable=True)
