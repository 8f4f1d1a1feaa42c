"""Shared dependencies for API endpoints."""
import os
import secrets

from fastapi import Header, HTTPException, status


async def require_admin_key(x_admin_key: str = Header(..., alias="X-Admin-Key")) -> None:
    """Guard user-management endpoints with the shared ``ADMIN_KEY``.

    Raises:
        HTTPException: 503 when no key is configured, 403 on mismatch
    """
    configured = os.getenv("ADMIN_KEY")
    if not configured:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="User management is disabled: ADMIN_KEY is not configured",
        )
    if not secrets.compare_digest(x_admin_key.encode("utf-8"), configured.encode("utf-8")):
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Invalid admin key")
