#!/usr/bin/env python3
"""
FastAPI dependencies for dependency injection.
"""

from typing import Generator, Optional

from fastapi import Depends, Header, HTTPException
from sqlalchemy.orm import Session

from core.config_loader import AppConfig, get_config
from database.database import SessionLocal


def get_db() -> Generator[Session, None, None]:
    """
    FastAPI dependency that yields a database session.

    Usage:
        @app.get("/endpoint")
        def my_endpoint(db: Session = Depends(get_db)):
            ...
    """
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


def get_app_config() -> AppConfig:
    return get_config()


def require_cron_secret(
    authorization: Optional[str] = Header(default=None),
    config: AppConfig = Depends(get_app_config)
) -> None:
    """
    Reject callers that don't present `Authorization: Bearer <cron_secret>`.

    With no secret configured every caller is rejected.
    """
    secret = config.web.cron_secret
    if not secret or authorization != f"Bearer {secret}":
        raise HTTPException(status_code=401, detail="Unauthorized")
