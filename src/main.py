import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from jinja2 import TemplateError

from src.common.exceptions import (
    PageSaveException,
    ResourceNotFoundException,
    page_save_exception_handler,
    resource_not_found_handler,
    template_exception_handler,
    unexpected_exception_handler,
)
from src.config import get_settings
from src.pages.router import router as pages_router
from src.pages.templates import load_templates
from src.healthcheck.router import router as health_router

settings = get_settings()

logging.basicConfig(
    level=settings.LOG_LEVEL,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    app.state.templates = load_templates(settings.TEMPLATES_DIR)
    logger.info(f"Serving pages from {settings.PAGES_DIR.resolve()}")
    yield


app = FastAPI(
    title=settings.API_NAME,
    summary=settings.API_SUMMARY,
    lifespan=lifespan,
    version=settings.FLATWIKI_VERSION,
)

app.exception_handler(ResourceNotFoundException)(resource_not_found_handler)
app.exception_handler(PageSaveException)(page_save_exception_handler)
app.exception_handler(TemplateError)(template_exception_handler)
app.exception_handler(Exception)(unexpected_exception_handler)


app.include_router(health_router)
app.include_router(pages_router)
