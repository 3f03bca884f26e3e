from fastapi import APIRouter, Depends, Form, Request, status
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.templating import Jinja2Templates

from src.common.exceptions import (
    PageNotFoundException,
    internal_error_response,
    invalid_title_response,
    redirect_response,
)
from src.pages.dependencies import get_page_service, valid_title
from src.pages.service import PageService
from src.pages.templates import EDIT_TEMPLATE, VIEW_TEMPLATE, get_templates


router = APIRouter(
    tags=["Pages"],
    responses={**invalid_title_response, **internal_error_response},
)


def view_url(title: str) -> str:
    return f"/view/{title}"


def edit_url(title: str) -> str:
    return f"/edit/{title}"


@router.get(
    "/view/{title:path}",
    response_class=HTMLResponse,
    responses={**redirect_response("Page does not exist yet", edit_url("example"))},
)
def view_page(
    request: Request,
    title: str = Depends(valid_title),
    page_service: PageService = Depends(get_page_service),
    templates: Jinja2Templates = Depends(get_templates),
):
    try:
        page = page_service.get_page(title)
    except PageNotFoundException:
        return RedirectResponse(edit_url(title), status_code=status.HTTP_302_FOUND)

    return templates.TemplateResponse(request, VIEW_TEMPLATE, {"page": page})


@router.get("/edit/{title:path}", response_class=HTMLResponse)
def edit_page(
    request: Request,
    title: str = Depends(valid_title),
    page_service: PageService = Depends(get_page_service),
    templates: Jinja2Templates = Depends(get_templates),
):
    page = page_service.get_page_or_blank(title)
    return templates.TemplateResponse(request, EDIT_TEMPLATE, {"page": page})


@router.post(
    "/save/{title:path}",
    status_code=status.HTTP_302_FOUND,
    response_class=RedirectResponse,
    responses={**redirect_response("Page saved", view_url("example"))},
)
def save_page(
    title: str = Depends(valid_title),
    body: str = Form(""),
    page_service: PageService = Depends(get_page_service),
):
    page_service.save_page(title, body)
    return RedirectResponse(view_url(title), status_code=status.HTTP_302_FOUND)
