"""
Runtime configuration for Muro, read from environment variables
"""
import logging
import os


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() == "true"


DEBUG = _env_flag("MURO_DEBUG", "false")

# Relational store
DATABASE_URL = os.getenv("MURO_DB_URL") or "sqlite:///.data/muro.db"
CREATE_TABLES = _env_flag("MURO_DB_CREATE_TABLES", "true")

# Public upload root, served back at /uploads
UPLOAD_DIR = os.getenv("MURO_UPLOAD_DIR", "./uploads")
UPLOAD_URL_PREFIX = "/uploads"

# Comma-separated list of allowed CORS origins
CORS_ORIGINS = [
    origin.strip()
    for origin in os.getenv("MURO_CORS_ORIGINS", "*").split(",")
    if origin.strip()
]

LOG_LEVEL = getattr(logging, os.getenv("MURO_LOG_LEVEL", "INFO").upper(), logging.INFO)
LOG_TO_FILE = _env_flag("MURO_LOG_TO_FILE", "true")
