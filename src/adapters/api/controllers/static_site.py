from __future__ import annotations

import os
from pathlib import Path
from urllib.parse import unquote

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse, Response

router = APIRouter(tags=["site"])

_NAMED_ASSETS = {
    "/": "/site/index.html",
    "/index.html": "/site/index.html",
    "/style.css": "/site/style.css",
    "/app.js": "/site/app.js",
    "/logo.svg": "/site/logo.svg",
    "/facilities.json": "/site/facilities.json",
}

MIME_TYPES = {
    ".html": "text/html",
    ".js": "text/javascript",
    ".css": "text/css",
    ".json": "application/json",
    ".svg": "image/svg+xml",
    ".jpg": "image/jpeg",
    ".jpeg": "image/jpeg",
    ".png": "image/png",
    ".ico": "image/x-icon",
}

_CORS = {"Access-Control-Allow-Origin": "*"}

# Only these directories under the site root are served.
_SERVED_DIRS = ("site", "images")


def map_url(url: str) -> str:
    """Map a request path onto a path under the site root."""

    path = unquote((url or "/").split("?", 1)[0])
    if path in _NAMED_ASSETS:
        return _NAMED_ASSETS[path]
    if path.startswith("/site/") or path.startswith("/images/"):
        return path
    return "/site" + (path if path.startswith("/") else "/" + path)


def content_type_for(path: str | Path) -> str:
    return MIME_TYPES.get(Path(path).suffix.lower(), "application/octet-stream")


def _site_root() -> Path:
    return Path(os.getenv("SITE_ROOT") or ".").resolve()


def _not_found() -> PlainTextResponse:
    return PlainTextResponse("Not Found", status_code=404, headers=_CORS)


@router.get("/{path:path}", include_in_schema=False)
def serve_site(path: str) -> Response:
    root = _site_root()
    target = (root / map_url("/" + path).lstrip("/")).resolve()
    served = any(target.is_relative_to(root / d) for d in _SERVED_DIRS)
    if not served or not target.is_file():
        return _not_found()

    return Response(
        content=target.read_bytes(),
        media_type=content_type_for(target),
        headers=_CORS,
    )
