"""
PetClinic Backend - Welcome Route
=================================

What:  GET / renders the landing page with links to the owner search.
"""

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse
from starlette.responses import Response

from petclinic.services.owner_service import ModelAndView
from petclinic.templating import render

router = APIRouter(tags=["Welcome"], default_response_class=HTMLResponse)


@router.get("/", summary="Welcome page")
async def welcome(request: Request) -> Response:
    return render(request, ModelAndView("welcome"))
