from pathlib import Path
from fastapi import Request
from fastapi.templating import Jinja2Templates
from jinja2 import TemplateError

from src.common.exceptions import TemplateLoadException

VIEW_TEMPLATE = "view.html"
EDIT_TEMPLATE = "edit.html"
TEMPLATE_NAMES = (EDIT_TEMPLATE, VIEW_TEMPLATE)


def load_templates(templates_dir: Path) -> Jinja2Templates:
    """Build the template set and parse every named template up front.

    A missing or malformed template raises ``TemplateLoadException`` so the
    server refuses to start instead of failing on the first request.
    """
    templates = Jinja2Templates(directory=str(templates_dir))
    for name in TEMPLATE_NAMES:
        try:
            templates.get_template(name)
        except TemplateError as e:
            raise TemplateLoadException(name, str(e) or type(e).__name__) from e
    return templates


def get_templates(request: Request) -> Jinja2Templates:
    return request.app.state.templates
