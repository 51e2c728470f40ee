import os
from dotenv import load_dotenv

from .. import __version__

load_dotenv()

APP_VERSION = os.getenv("APP_VERSION", __version__)

LOG_LEVEL_FROM_ENV = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_BUFFER_CAPACITY = max(0, int(os.getenv("LOG_BUFFER_CAPACITY", "1000")))

ADMIN_TOKEN_FROM_ENV = os.getenv("ADMIN_TOKEN")

HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "8000"))

CORS_ALLOW_ORIGINS = [
    origin.strip()
    for origin in os.getenv("CORS_ALLOW_ORIGINS", "*").split(",")
    if origin.strip()
]

COMMON_HEADERS = {"X-Accel-Buffering": "no"}
