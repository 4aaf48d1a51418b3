"""Single-page app delivery; must be included after every API router."""

from __future__ import annotations

from pathlib import Path

from fastapi import APIRouter
from fastapi.responses import FileResponse

from .config import settings

router = APIRouter(include_in_schema=False)

ENTRY_POINT = "index.html"


def _resolve_asset(static_dir: Path, requested: str) -> Path | None:
    if not requested:
        return None
    try:
        root = static_dir.resolve()
        candidate = (root / requested).resolve()
        if root not in candidate.parents or not candidate.is_file():
            return None
    except (OSError, ValueError):
        # Null bytes or over-long names cannot be files; fall back to the entry page.
        return None
    return candidate


@router.get("/{full_path:path}")
def serve_frontend(full_path: str) -> FileResponse:
    """Serve a bundled asset, or the entry page so client-side routing can take over."""
    static_dir = Path(settings.static_dir)
    asset = _resolve_asset(static_dir, full_path)
    return FileResponse(asset or static_dir / ENTRY_POINT)
