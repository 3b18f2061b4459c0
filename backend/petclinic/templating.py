"""
PetClinic Backend - Template Rendering
======================================

What:  The shared Jinja2Templates instance and the helper that turns a
       service ViewResult into an HTTP response.
Who:   Used by route handlers, exception handlers and the rate limiter.

View names map to files: "owners/find_owners" → templates/owners/find_owners.html
"""

from typing import Any, Dict, Optional

from fastapi.responses import RedirectResponse
from starlette.requests import Request
from starlette.responses import Response
from starlette.templating import Jinja2Templates

from petclinic.config import settings
from petclinic.services.owner_service import ModelAndView, Redirect, ViewResult

templates = Jinja2Templates(directory=settings.templates_dir)


def render(request: Request, result: ViewResult, status_code: int = 200) -> Response:
    """
    Render a ModelAndView with its template, or answer a Redirect with 302.
    """
    if isinstance(result, Redirect):
        return RedirectResponse(url=result.location, status_code=302)
    if not isinstance(result, ModelAndView):
        raise TypeError(f"Cannot render {type(result).__name__}")
    return templates.TemplateResponse(
        request,
        f"{result.view_name}.html",
        result.model,
        status_code=status_code,
    )


def render_error(
    request: Request,
    status_code: int,
    message: str,
    headers: Optional[Dict[str, Any]] = None,
) -> Response:
    """
    Error page shared by the exception handlers and the rate limiter.

    The catch-all 500 handler runs outside every user middleware, so the
    X-Request-ID header is set here as well as in RequestIDMiddleware.
    """
    request_id = getattr(request.state, "request_id", "")
    headers = dict(headers or {})
    if request_id:
        headers.setdefault("X-Request-ID", request_id)
    return templates.TemplateResponse(
        request,
        "error.html",
        {
            "status_code": status_code,
            "message": message,
            "request_id": request_id,
        },
        status_code=status_code,
        headers=headers,
    )
