import secrets
from fastapi import Depends, HTTPException, Security, status
from fastapi.security.api_key import APIKeyHeader

from src.config import Settings, get_settings


api_key_header = APIKeyHeader(name="x-api-key", auto_error=False)


def get_api_key(
    api_key: str | None = Security(api_key_header),
    settings: Settings = Depends(get_settings),
) -> None:
    # Authentication is off unless a key is configured
    expected_key = settings.TODOLIST_API_KEY
    if not expected_key:
        return

    if not api_key:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="API key is missing",
        )

    if not secrets.compare_digest(api_key, expected_key):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="API key is invalid",
        )
