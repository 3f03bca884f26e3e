import pytest
from pytest_mock import MockerFixture

from src.common.exceptions import PageNotFoundException, PageSaveException
from src.pages.schemas import Page
from src.pages.service import PageService
from src.pages.store import PageStore


@pytest.fixture
def mock_page_store(mocker: MockerFixture) -> PageStore:
    return mocker.Mock(spec=PageStore)


@pytest.fixture
def page_service(mock_page_store: PageStore) -> PageService:
    return PageService(page_store=mock_page_store)


@pytest.fixture
def sample_page() -> Page:
    return Page(title="Foo", body=b"Hello, world!")


def test_get_page(
    page_service: PageService, sample_page: Page, mocker: MockerFixture
) -> None:
    mock_load = mocker.patch.object(
        page_service.page_store, "load", return_value=sample_page
    )

    assert page_service.get_page("Foo") == sample_page
    mock_load.assert_called_once_with("Foo")


def test_get_page_not_found(page_service: PageService, mocker: MockerFixture) -> None:
    mocker.patch.object(
        page_service.page_store,
        "load",
        side_effect=PageNotFoundException("Missing"),
    )

    with pytest.raises(PageNotFoundException):
        page_service.get_page("Missing")


def test_get_page_or_blank_existing(
    page_service: PageService, sample_page: Page, mocker: MockerFixture
) -> None:
    mocker.patch.object(page_service.page_store, "load", return_value=sample_page)

    assert page_service.get_page_or_blank("Foo") == sample_page


def test_get_page_or_blank_missing(
    page_service: PageService, mocker: MockerFixture
) -> None:
    mocker.patch.object(
        page_service.page_store,
        "load",
        side_effect=PageNotFoundException("Missing"),
    )

    page = page_service.get_page_or_blank("Missing")

    assert page == Page(title="Missing", body=b"")


def test_save_page(page_service: PageService, mocker: MockerFixture) -> None:
    mock_save = mocker.patch.object(page_service.page_store, "save")

    page = page_service.save_page("Foo", "Grüße, world!")

    assert page == Page(title="Foo", body="Grüße, world!".encode("utf-8"))
    mock_save.assert_called_once_with(page)


def test_save_page_failure(page_service: PageService, mocker: MockerFixture) -> None:
    mocker.patch.object(
        page_service.page_store,
        "save",
        side_effect=PageSaveException("Foo", "disk full"),
    )

    with pytest.raises(PageSaveException, match="disk full"):
        page_service.save_page("Foo", "lost")
