"""Caller identity.

Callers are anonymous; the gateway in front of the board passes an opaque,
stable identifier in the X-Caller-Id header.
"""

from fastapi import Header, HTTPException, status


async def require_caller_id(
    x_caller_id: str | None = Header(default=None),
) -> str:
    """Return the caller identity or reject the request.

    Raises:
        HTTPException: 401 if the header is missing or blank
    """
    if not x_caller_id or not x_caller_id.strip():
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="X-Caller-Id header required",
        )
    return x_caller_id.strip()
