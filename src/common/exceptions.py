from enum import Enum
import logging
from typing import Any
from fastapi import Request, status
from fastapi.responses import PlainTextResponse
from jinja2 import TemplateError

logger = logging.getLogger(__name__)


class ResourceType(str, Enum):
    PAGE = "Page"


# Exceptions
class ResourceNotFoundException(Exception):
    def __init__(
        self, resource_type: ResourceType, identifier: str, message: str | None = None
    ):
        self.resource_type = resource_type.value
        self.identifier = identifier
        super().__init__(message or f"{self.resource_type} '{identifier}' not found")


class PageNotFoundException(ResourceNotFoundException):
    def __init__(self, title: str):
        super().__init__(ResourceType.PAGE, title)


class InvalidTitleException(ResourceNotFoundException):
    def __init__(self, title: str):
        super().__init__(
            ResourceType.PAGE, title, message=f"Invalid page title '{title}'"
        )


class PageSaveException(Exception):
    def __init__(self, title: str, message: str):
        self.title = title
        super().__init__(message)


class TemplateLoadException(Exception):
    def __init__(self, template_name: str, message: str):
        self.template_name = template_name
        super().__init__(f"Failed to load template '{template_name}': {message}")


# Exception handlers
def resource_not_found_handler(request: Request, exc: ResourceNotFoundException):
    logger.error(exc)
    return PlainTextResponse(
        "404 page not found",
        status_code=status.HTTP_404_NOT_FOUND,
    )


def page_save_exception_handler(request: Request, exc: PageSaveException):
    logger.error(f"Failed to save page '{exc.title}': {exc}")
    return PlainTextResponse(
        str(exc),
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )


def template_exception_handler(request: Request, exc: TemplateError):
    logger.error(f"Failed to render template: {exc}")
    return PlainTextResponse(
        str(exc),
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )


def unexpected_exception_handler(request: Request, exc: Exception):
    logger.error(exc)
    return PlainTextResponse(
        "An unexpected error occurred",
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )


# Response definitions for OpenAPI documentation
ResponseDict = dict[int | str, dict[str, Any]]


def redirect_response(description: str, location: str) -> ResponseDict:
    return {
        302: {
            "description": description,
            "headers": {"Location": {"schema": {"type": "string"}, "example": location}},
        }
    }


invalid_title_response: ResponseDict = {
    404: {
        "description": "Invalid page title",
        "content": {"text/plain": {"example": "404 page not found"}},
    }
}

internal_error_response: ResponseDict = {
    500: {
        "description": "Internal server error",
        "content": {"text/plain": {"example": "An unexpected error occurred"}},
    }
}
