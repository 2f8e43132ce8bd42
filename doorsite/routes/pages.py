import os
from pathlib import Path
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import FileResponse

from doorsite.config import Settings
from doorsite.dependencies import get_settings

router = APIRouter(tags=["pages"])

PAGE_METHODS = ["GET", "HEAD"]
ANY_METHOD = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]
INDEX = "index.html"


def site_root(settings: Settings) -> Path:
    return Path(settings.site_dir).resolve()


def resolve_page(root: Path, *parts: str) -> Optional[Path]:
    """Return the file for ``parts`` under ``root``, or None.

    A directory resolves to its index.html. Anything that escapes ``root``
    counts as missing, as does anything the OS refuses to look up or read.
    """
    try:
        path = root.joinpath(*parts).resolve()
        if not path.is_relative_to(root):
            return None
        if path.is_dir():
            path = path / INDEX
        if not path.is_file():
            return None
    except (OSError, ValueError):
        return None
    return path if os.access(path, os.R_OK) else None


def serve(path: Optional[Path], fallback: Optional[Path] = None) -> FileResponse:
    target = path or fallback
    if target is None:
        raise HTTPException(status_code=404, detail="Not Found")
    return FileResponse(target)


@router.api_route("/garage-door-service-areas-kansas-city", methods=PAGE_METHODS)
def service_areas(settings: Settings = Depends(get_settings)):
    return serve(resolve_page(site_root(settings), "garage-door-service-areas-kansas-city", INDEX))


@router.api_route("/blog", methods=PAGE_METHODS)
def blog_index(settings: Settings = Depends(get_settings)):
    return serve(resolve_page(site_root(settings), "blog", INDEX))


@router.api_route("/blog/{slug}", methods=PAGE_METHODS)
def blog_post(slug: str, settings: Settings = Depends(get_settings)):
    root = site_root(settings)
    return serve(resolve_page(root, "blog", slug, INDEX), resolve_page(root, "blog", INDEX))


@router.api_route("/services/{slug}", methods=PAGE_METHODS)
def service_page(slug: str, settings: Settings = Depends(get_settings)):
    root = site_root(settings)
    return serve(resolve_page(root, "services", slug, INDEX), resolve_page(root, INDEX))


# Registered last: static assets, then the home page for everything else.
@router.api_route("/{path:path}", methods=ANY_METHOD, include_in_schema=False)
def static_or_home(path: str, settings: Settings = Depends(get_settings)):
    root = site_root(settings)
    return serve(resolve_page(root, path), resolve_page(root, INDEX))
