"""
Admin password checks.

There is a single shared secret, compared in plain text. Clients send it in
the ``x-admin-password`` header or as a ``password`` field in the JSON body.
"""

from __future__ import annotations

import logging
import secrets
from typing import Any, Optional

from fastapi import HTTPException, status

from amama.config import Settings

logger = logging.getLogger(__name__)


def password_matches(candidate: Any, settings: Settings) -> bool:
    if not isinstance(candidate, str):
        return False
    return secrets.compare_digest(
        candidate.encode("utf-8"), settings.admin_password.encode("utf-8")
    )


def extract_password(header_value: Optional[str], body: Any = None) -> Any:
    """Header wins; otherwise fall back to the body's ``password`` field."""
    if header_value:
        return header_value
    if isinstance(body, dict):
        return body.get("password")
    return None


def require_admin(
    settings: Settings, header_value: Optional[str], body: Any = None
) -> None:
    if not password_matches(extract_password(header_value, body), settings):
        logger.warning("Rejected admin request with missing or wrong password")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Unauthorized: invalid admin password",
        )
