"""
Entry page route.

``GET /`` returns ``index.html`` from the configured public directory.
Other files in that directory are served by the static mount set up
in ``main.create_app``.
"""

from fastapi import APIRouter, HTTPException, Request, status
from fastapi.responses import FileResponse

router = APIRouter()


@router.get("/", include_in_schema=False)
async def serve_index(request: Request) -> FileResponse:
    """Serve the entry page."""
    index_path = request.app.state.settings.public_path / "index.html"
    if not index_path.is_file():
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="index.html not found")
    return FileResponse(index_path)
