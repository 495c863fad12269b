from __future__ import annotations

from fastapi import HTTPException


def require(condition: bool, msg: str = "Bad request", status_code: int = 400) -> None:
    """Small helper used across routers.

    Defaults to 400 (validation). For missing rows or conflicts pass
    `status_code=404/409`.
    """
    if not condition:
        raise HTTPException(status_code=status_code, detail=msg)
