# Allowed image formats, as extensions and as declared MIME subtypes
ALLOWED_FORMATS = ("jpeg", "jpg", "png", "webp", "tiff", "jfif")

ALLOWED_EXTENSIONS = {f".{fmt}" for fmt in ALLOWED_FORMATS}

ALLOWED_MIME_SUBTYPES = set(ALLOWED_FORMATS) | {"pjpeg"}

# Types filetype may detect from the content of an allowed image
ALLOWED_CONTENT_TYPES = {f"image/{subtype}" for subtype in ALLOWED_MIME_SUBTYPES}

# Max file size (in bytes)
MAX_UPLOAD_SIZE = 5 * 1024 * 1024  # 5 MiB

# Chunk size for streaming uploads (1MB)
CHUNK_SIZE = 1024 * 1024

MISSING_FILE_MESSAGE = "No se recibió ningún archivo o el formato no es válido"
UNSUPPORTED_TYPE_MESSAGE = (
    f"Solo se permiten imágenes ({', '.join(ALLOWED_FORMATS)})"
)
FILE_TOO_LARGE_MESSAGE = "El archivo supera el tamaño máximo de 5MB"
EMPTY_FILE_MESSAGE = "El archivo está vacío"
