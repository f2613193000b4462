"""End-to-end integration test using real Playwright against local HTML."""

from pathlib import Path

import pytest

from pomkit import (
    BasePage,
    BrowserError,
    BrowserManager,
    ElementCollection,
    PageElement,
    PompTimeoutError,
)


class ProductCard(PageElement):
    @property
    def name(self) -> PageElement:
        return self.css("h2")

    @property
    def price(self) -> PageElement:
        return self.xpath(".//span[@class='price']")

    @property
    def add_button(self) -> PageElement:
        return self.css("button.add")

    async def is_sold_out(self) -> bool:
        return "sold-out" in await self.classes()


class CatalogPage(BasePage):
    @property
    def heading(self) -> PageElement:
        return self.xpath("//header/h1")

    @property
    def cart_link(self) -> PageElement:
        return self.css("#cart-link")

    @property
    def products(self) -> ElementCollection[ProductCard]:
        return self.css("#products").css_all("li.card", ProductCard)

    @property
    def notice(self) -> PageElement:
        return self.css("#late-slot").css("p.notice")


@pytest.fixture
async def browser():
    mgr = BrowserManager()
    try:
        await mgr.start(headless=True)
    except BrowserError as exc:
        pytest.skip(f"Chromium not available: {exc}")
    yield mgr
    await mgr.stop()


@pytest.fixture
async def catalog(browser: BrowserManager, catalog_path: Path) -> CatalogPage:
    return await browser.open(CatalogPage, catalog_path.as_uri())


class TestCatalogPage:
    async def test_reads_text_and_attributes(self, catalog: CatalogPage) -> None:
        assert await catalog.heading.text() == "Product Catalog"
        assert await catalog.cart_link.get_attribute("href") == "/cart"

    async def test_collection_and_nested_items(self, catalog: CatalogPage) -> None:
        cards = await catalog.products.fetch(2000)
        assert [await card.name.text() for card in cards] == [
            "Keyboard",
            "Mouse",
            "Monitor",
        ]
        assert await cards[2].price.text() == "199"

    async def test_find_and_filter(self, catalog: CatalogPage) -> None:
        mouse = await catalog.products.find(ProductCard.is_sold_out)
        assert mouse is not None
        assert await mouse.get_attribute("data-sku") == "ms-2"

        in_stock = await catalog.products.filter(
            lambda card: _not(card.is_sold_out())
        )
        assert [await card.name.text() for card in in_stock] == ["Keyboard", "Monitor"]

    async def test_click_updates_dom(self, catalog: CatalogPage) -> None:
        first = (await catalog.products.fetch())[0]
        await first.add_button.click()
        await first.add_button.js_click()
        assert await catalog.cart_link.text() == "Cart (2)"
        assert await catalog.cart_link.get_attribute("data-count") == "2"

    async def test_styles(self, catalog: CatalogPage) -> None:
        mouse = (await catalog.products.fetch())[1]
        styles = await mouse.styles()
        assert styles["color"] == "rgb(128, 128, 128)"

    async def test_waits_for_late_element(self, catalog: CatalogPage) -> None:
        assert await catalog.notice.text() == "Free shipping today"

    async def test_missing_element(self, catalog: CatalogPage) -> None:
        missing = catalog.css("#products").css("li.discontinued")
        assert await missing.exists(200) is False
        with pytest.raises(PompTimeoutError, match="li.discontinued"):
            await missing.fetch(200)
        assert await catalog.css_all("table tr").fetch(200) == []


async def _not(result) -> bool:
    return not await result
