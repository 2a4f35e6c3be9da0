"""Unmatched API Paths — JSON 404 for any method on an unknown /api route.

Invariants:
    - Registered after every other /api router, so only unmatched requests land here
    - Non-/api paths are left to the frontend routes
"""

from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse

router = APIRouter(tags=["errors"])

_ALL_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS", "HEAD"]


@router.api_route("/api/{path:path}", methods=_ALL_METHODS, include_in_schema=False)
async def api_not_found(request: Request, path: str):
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content={
            "success": False,
            "error": "API endpoint not found",
            "code": "ENDPOINT_NOT_FOUND",
            "path": request.url.path,
            "method": request.method,
        },
    )
