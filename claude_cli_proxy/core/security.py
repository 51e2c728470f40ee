import secrets
from fastapi import HTTPException, status, Depends
from fastapi.security import APIKeyHeader

from .config import ADMIN_TOKEN_FROM_ENV

ADMIN_TOKEN_HEADER = "X-Admin-Token"
# Without ADMIN_TOKEN a random token is generated, which locks the admin routes until one is configured
ADMIN_TOKEN = ADMIN_TOKEN_FROM_ENV or secrets.token_hex(32)

admin_token_scheme = APIKeyHeader(name=ADMIN_TOKEN_HEADER, auto_error=False)


def verify_admin(admin_token: str = Depends(admin_token_scheme)):
    if not admin_token or not secrets.compare_digest(admin_token, ADMIN_TOKEN):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers={"WWW-Authenticate": ADMIN_TOKEN_HEADER},
        )
    return True
