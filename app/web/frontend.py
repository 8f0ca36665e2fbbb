"""
Front-end serving.

Exactly one mode is active per process:
  - production: files from STATIC_DIR, with index.html as the fallback
    for any unmatched GET or HEAD (single page app routing)
  - development: unmatched GET and HEAD requests are forwarded to the
    Vite dev server
"""
from pathlib import Path

import httpx
from fastapi import FastAPI, HTTPException, Request, status
from fastapi.responses import FileResponse, JSONResponse, RedirectResponse, Response

from app.core.config import Settings
from app.core.logging import get_logger

logger = get_logger("frontend")

# dropped when relaying in either direction
HOP_BY_HOP_HEADERS = {
    "connection",
    "keep-alive",
    "proxy-authenticate",
    "proxy-authorization",
    "te",
    "trailers",
    "transfer-encoding",
    "upgrade",
    "host",
    "content-length",
    "content-encoding",
}


CATCH_ALL_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE"]
SERVED_METHODS = ("GET", "HEAD")


def _api_path_response(request: Request, full_path: str) -> Response | None:
    """
    Handle API paths no API route matched.

    The catch-all shadows the router's own trailing slash redirect, so
    `/api/departments/` is sent on to `/api/departments` here. 307 keeps
    the method and body. Anything else under api/ is a JSON 404.
    """
    if full_path != "api" and not full_path.startswith("api/"):
        return None

    canonical = request.url.path.rstrip("/")
    if canonical != request.url.path and canonical != "/api":
        return RedirectResponse(
            url=str(request.url.replace(path=canonical)),
            status_code=status.HTTP_307_TEMPORARY_REDIRECT,
        )
    raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Not Found")


def _reject_unserved_method(request: Request) -> None:
    if request.method not in SERVED_METHODS:
        raise HTTPException(
            status_code=status.HTTP_405_METHOD_NOT_ALLOWED,
            detail="Method Not Allowed",
            headers={"Allow": ", ".join(SERVED_METHODS)},
        )


def _resolve_static_file(static_dir: Path, full_path: str) -> Path | None:
    if not full_path:
        return None

    candidate = (static_dir / full_path).resolve()
    if not candidate.is_relative_to(static_dir) or not candidate.is_file():
        return None
    return candidate


def mount_static_bundle(app: FastAPI, settings: Settings) -> None:
    static_dir = Path(settings.STATIC_DIR).resolve()
    index_file = static_dir / "index.html"

    if not index_file.is_file():
        logger.warning("No front-end bundle at %s, run the front-end build first", index_file)

    @app.api_route("/{full_path:path}", methods=CATCH_ALL_METHODS, include_in_schema=False)
    def serve_bundle(full_path: str, request: Request):
        api_response = _api_path_response(request, full_path)
        if api_response is not None:
            return api_response
        _reject_unserved_method(request)

        static_file = _resolve_static_file(static_dir, full_path)
        if static_file is not None:
            return FileResponse(static_file)

        if not index_file.is_file():
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Not Found")
        return FileResponse(index_file)


def mount_dev_proxy(app: FastAPI, settings: Settings) -> None:
    @app.api_route("/{full_path:path}", methods=CATCH_ALL_METHODS, include_in_schema=False)
    async def proxy_to_dev_server(full_path: str, request: Request):
        api_response = _api_path_response(request, full_path)
        if api_response is not None:
            return api_response
        _reject_unserved_method(request)

        client: httpx.AsyncClient = request.app.state.dev_client
        headers = {
            k: v for k, v in request.headers.items()
            if k.lower() not in HOP_BY_HOP_HEADERS
        }
        url = httpx.URL(path="/" + full_path, query=request.url.query.encode("utf-8"))

        try:
            upstream = await client.request(request.method, url, headers=headers)
        except httpx.HTTPError as e:
            logger.warning("Dev server %s unreachable: %s", settings.DEV_SERVER_URL, e)
            return JSONResponse(
                status_code=status.HTTP_502_BAD_GATEWAY,
                content={"error": "Dev server unavailable"},
            )

        response_headers = {
            k: v for k, v in upstream.headers.items()
            if k.lower() not in HOP_BY_HOP_HEADERS
        }
        return Response(
            content=upstream.content,
            status_code=upstream.status_code,
            headers=response_headers,
        )


def build_dev_client(settings: Settings) -> httpx.AsyncClient:
    return httpx.AsyncClient(base_url=settings.DEV_SERVER_URL, timeout=30.0)


def mount_frontend(app: FastAPI, settings: Settings) -> None:
    if settings.is_production:
        mount_static_bundle(app, settings)
    else:
        mount_dev_proxy(app, settings)
