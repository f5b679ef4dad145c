"""
Exercise Tracker - Landing Page
=================================

What:  Serves the HTML landing page with the create-user and add-exercise
       forms. Static assets referenced by the page live under /public.
"""

from pathlib import Path

from fastapi import APIRouter
from fastapi.responses import FileResponse

PACKAGE_DIR = Path(__file__).resolve().parent.parent
VIEWS_DIR = PACKAGE_DIR / "views"
PUBLIC_DIR = PACKAGE_DIR / "public"

router = APIRouter(tags=["Pages"])


@router.get("/", include_in_schema=False)
async def index() -> FileResponse:
    return FileResponse(VIEWS_DIR / "index.html", media_type="text/html")
