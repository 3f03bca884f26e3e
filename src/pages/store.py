import logging
import os
from pathlib import Path

from src.common.exceptions import PageNotFoundException, PageSaveException
from src.pages.schemas import Page

logger = logging.getLogger(__name__)

PAGE_FILE_SUFFIX = ".txt"


class PageStore:
    """Flat-file page storage: one ``<title>.txt`` file per page."""

    def __init__(self, pages_dir: Path, file_mode: int = 0o600):
        self.pages_dir = Path(pages_dir)
        self.file_mode = file_mode

    def filename(self, title: str) -> Path:
        return self.pages_dir / f"{title}{PAGE_FILE_SUFFIX}"

    def load(self, title: str) -> Page:
        """Read a page from disk.

        Any read failure is reported as ``PageNotFoundException``; callers
        don't distinguish a missing file from an unreadable one.
        """
        try:
            body = self.filename(title).read_bytes()
        except OSError as e:
            raise PageNotFoundException(title) from e

        return Page(title=title, body=body)

    def save(self, page: Page) -> None:
        """Write the page body, creating or truncating its file."""
        path = self.filename(page.title)
        try:
            fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, self.file_mode)
            with open(fd, "wb") as f:
                f.write(page.body)
        except OSError as e:
            raise PageSaveException(page.title, str(e)) from e

        logger.debug(f"Wrote {len(page.body)} bytes to {path}")
