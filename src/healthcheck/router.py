import os
from typing import Any
from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse

from src.config import Settings, get_settings

router = APIRouter()


@router.get(
    "/healthcheck",
    tags=["Healthcheck"],
    status_code=status.HTTP_200_OK,
    responses={
        200: {
            "description": "Healthcheck status",
            "content": {
                "application/json": {
                    "example": {
                        "api": {"status": "ok"},
                        "pages": {"status": "ok"},
                        "templates": {"status": "ok"},
                    }
                }
            },
        },
        503: {
            "description": "Service unavailable",
            "content": {
                "application/json": {
                    "example": {
                        "api": {"status": "ok"},
                        "pages": {
                            "status": "error",
                            "message": "Pages directory './pages' is not writable",
                        },
                        "templates": {"status": "ok"},
                    }
                }
            },
        },
    },
)
def healthcheck(
    request: Request,
    settings: Settings = Depends(get_settings),
) -> JSONResponse:
    health_status: dict[str, Any] = {
        "api": {"status": "ok"},
        "pages": {"status": "ok"},
        "templates": {"status": "ok"},
    }
    has_error = False

    # Check the pages directory
    pages_dir = settings.PAGES_DIR
    try:
        if not pages_dir.is_dir():
            raise Exception(f"Pages directory '{pages_dir}' does not exist")
        if not os.access(pages_dir, os.R_OK | os.W_OK | os.X_OK):
            raise Exception(f"Pages directory '{pages_dir}' is not writable")
    except Exception as e:
        health_status["pages"].update({"status": "error", "message": str(e)})
        has_error = True

    # Check the template set loaded at startup
    if getattr(request.app.state, "templates", None) is None:
        health_status["templates"].update(
            {"status": "error", "message": "Templates are not loaded"}
        )
        has_error = True

    if has_error:
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE, content=health_status
        )

    return JSONResponse(status_code=status.HTTP_200_OK, content=health_status)
