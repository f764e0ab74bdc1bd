"""
Static frontend serving: ``index.html`` (or a generated placeholder page) and
any other file under the configured static directory.
"""

from __future__ import annotations

from html import escape
from pathlib import Path

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import FileResponse, HTMLResponse

from amama.config import Settings, get_settings

router = APIRouter()

FALLBACK_PAGE = """<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="utf-8">
  <title>Amama EC Backend</title>
</head>
<body>
  <h1>Amama EC Backend Running</h1>
  <p>No <code>index.html</code> was found in the static directory.</p>
  <ul>
    <li><a href="{prefix}/data">GET {prefix}/data</a></li>
    <li><a href="{prefix}/health">GET {prefix}/health</a></li>
  </ul>
</body>
</html>
"""


def render_fallback_page(settings: Settings) -> str:
    return FALLBACK_PAGE.format(prefix=escape(settings.api_prefix))


def resolve_static_path(static_dir: str, relative: str) -> Path | None:
    """
    Return the file for ``relative`` if it exists inside ``static_dir``.

    Dotfiles (``.env`` and friends) are never served.
    """
    root = Path(static_dir).resolve()
    target = (root / relative.lstrip("/")).resolve()
    if not target.is_relative_to(root) or not target.is_file():
        return None
    if any(part.startswith(".") for part in target.relative_to(root).parts):
        return None
    return target


@router.get("/", include_in_schema=False)
@router.get("/index.html", include_in_schema=False)
def index(settings: Settings = Depends(get_settings)):
    page = resolve_static_path(settings.static_dir, "index.html")
    if page:
        return FileResponse(page)
    return HTMLResponse(render_fallback_page(settings))


@router.get("/{path:path}", include_in_schema=False)
def static_file(path: str, settings: Settings = Depends(get_settings)):
    target = resolve_static_path(settings.static_dir, path)
    if not target:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Not found")
    return FileResponse(target)
