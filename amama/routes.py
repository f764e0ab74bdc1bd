"""
HTTP routes for the document API.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Optional

from fastapi import APIRouter, Body, Depends, Header, HTTPException, Response, status

from amama.auth import password_matches, require_admin
from amama.config import Settings, get_settings
from amama.dependencies import get_store
from amama.schemas import (
    BackupResponse,
    DataResponse,
    ErrorResponse,
    HealthResponse,
    HelloResponse,
    SaveResponse,
    VerifyPasswordRequest,
    VerifyPasswordResponse,
)
from amama.store import DocumentStore, utc_now_iso

logger = logging.getLogger(__name__)

ADMIN_RESPONSES = {401: {"model": ErrorResponse}}

router = APIRouter(
    responses={
        400: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    }
)


def _read_document(store: DocumentStore) -> dict:
    try:
        return store.read()
    except Exception as exc:
        logger.exception("Failed to read document from %s", store.describe())
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal server error",
        ) from exc


def _write_document(store: DocumentStore, doc: dict) -> dict:
    try:
        return store.write(doc)
    except Exception as exc:
        logger.exception("Failed to write document to %s", store.describe())
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal server error",
        ) from exc


def _document_from_body(body: dict) -> Any:
    """
    Accept either ``{"data": {...}}`` or the document itself; a top-level
    ``password`` field is never persisted.
    """
    if "data" in body:
        return body["data"]
    return {key: value for key, value in body.items() if key != "password"}


@router.get("/hello", response_model=HelloResponse)
def hello():
    return HelloResponse(message="Hello from AMEN-GOGS Backend!")


@router.get("/data", response_model=DataResponse)
def get_data(store: DocumentStore = Depends(get_store)):
    doc = _read_document(store)
    return DataResponse(data=doc, timestamp=utc_now_iso())


@router.post("/data", response_model=SaveResponse, responses=ADMIN_RESPONSES)
def save_data(
    payload: Optional[dict] = Body(default=None),
    x_admin_password: Optional[str] = Header(default=None),
    settings: Settings = Depends(get_settings),
    store: DocumentStore = Depends(get_store),
):
    """
    Replace the whole document. There is no partial update.
    """
    if payload is None:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Request body must be a JSON object",
        )
    require_admin(settings, x_admin_password, payload)

    doc = _document_from_body(payload)
    if not isinstance(doc, dict):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Document must be a JSON object",
        )
    saved = _write_document(store, doc)
    logger.info("Document replaced (%d members)", len(saved.get("members") or []))
    return SaveResponse(
        message="Data saved successfully",
        data=saved,
        timestamp=saved["lastUpdated"],
    )


@router.get("/backup", response_model=BackupResponse, responses=ADMIN_RESPONSES)
def backup(
    x_admin_password: Optional[str] = Header(default=None),
    settings: Settings = Depends(get_settings),
    store: DocumentStore = Depends(get_store),
):
    require_admin(settings, x_admin_password)
    doc = _read_document(store)
    now = utc_now_iso()
    return BackupResponse(
        data=doc,
        timestamp=now,
        filename=f"amama_backup_{now[:10]}.json",
    )


@router.post("/reset", response_model=SaveResponse, responses=ADMIN_RESPONSES)
def reset(
    payload: Optional[dict] = Body(default=None),
    x_admin_password: Optional[str] = Header(default=None),
    settings: Settings = Depends(get_settings),
    store: DocumentStore = Depends(get_store),
):
    require_admin(settings, x_admin_password, payload)
    try:
        doc = store.reset()
    except Exception as exc:
        logger.exception("Failed to reset document in %s", store.describe())
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal server error",
        ) from exc
    return SaveResponse(
        message="Data reset to defaults",
        data=doc,
        timestamp=doc["lastUpdated"],
    )


@router.post("/verify-password", response_model=VerifyPasswordResponse)
def verify_password(
    payload: VerifyPasswordRequest,
    x_admin_password: Optional[str] = Header(default=None),
    settings: Settings = Depends(get_settings),
):
    # The submitted body field is what gets checked; the header is a fallback
    candidate = payload.password or x_admin_password
    return VerifyPasswordResponse(success=password_matches(candidate, settings))


@router.post(
    "/admin/login",
    response_model=VerifyPasswordResponse,
    responses=ADMIN_RESPONSES,
)
def admin_login(
    payload: VerifyPasswordRequest,
    settings: Settings = Depends(get_settings),
):
    if password_matches(payload.password, settings):
        return VerifyPasswordResponse(success=True)
    logger.warning("Failed admin login")
    raise HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid password"
    )


@router.get("/health", response_model=HealthResponse)
def health(store: DocumentStore = Depends(get_store)):
    doc = _read_document(store)
    return HealthResponse(
        timestamp=utc_now_iso(),
        dataFile=store.describe(),
        dataSize=len(json.dumps(doc).encode("utf-8")),
    )


@router.options("/{path:path}", include_in_schema=False)
def preflight(path: str):
    return Response(status_code=status.HTTP_200_OK)


@router.api_route(
    "/{path:path}",
    methods=["GET", "POST", "PUT", "PATCH", "DELETE"],
    include_in_schema=False,
    responses={404: {"model": ErrorResponse}},
)
def unknown_endpoint(path: str):
    raise HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=f"API endpoint not found: /{path}",
    )
