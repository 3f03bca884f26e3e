from fastapi import Depends

from src.common.exceptions import InvalidTitleException
from src.config import Settings, get_settings
from src.pages.service import PageService
from src.pages.store import PageStore
from src.pages.title import is_valid_title


def valid_title(title: str) -> str:
    if not is_valid_title(title):
        raise InvalidTitleException(title)
    return title


def get_page_store(settings: Settings = Depends(get_settings)) -> PageStore:
    return PageStore(
        pages_dir=settings.PAGES_DIR,
        file_mode=settings.PAGE_FILE_MODE,
    )


def get_page_service(
    page_store: PageStore = Depends(get_page_store),
) -> PageService:
    return PageService(page_store=page_store)
