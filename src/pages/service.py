import logging

from src.common.exceptions import PageNotFoundException
from src.pages.schemas import Page
from src.pages.store import PageStore

logger = logging.getLogger(__name__)


class PageService:
    def __init__(self, page_store: PageStore):
        self.page_store = page_store

    def get_page(self, title: str) -> Page:
        return self.page_store.load(title)

    def get_page_or_blank(self, title: str) -> Page:
        try:
            return self.page_store.load(title)
        except PageNotFoundException:
            logger.debug(f"Page '{title}' not found, starting from a blank page")
            return Page(title=title)

    def save_page(self, title: str, body: str) -> Page:
        page = Page(title=title, body=body.encode("utf-8"))
        self.page_store.save(page)
        logger.info(f"Saved page '{title}' ({len(page.body)} bytes)")
        return page
