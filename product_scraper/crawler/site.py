"""
Listing site profiles: search URL layout and DOM selectors.
"""

from urllib.parse import quote

from pydantic import BaseModel, Field


class SiteProfile(BaseModel):
    """Where to find listings, detail links and pagination on a site."""

    name: str = Field(..., description="Human readable site name")
    search_url_template: str = Field(
        ..., description="Search URL with {keyword} and {page} placeholders"
    )
    listing_item_selector: str = Field(..., description="One element per listing item")
    title_selector: str = Field(..., description="Item title, relative to the item")
    price_selector: str = Field(..., description="Item price, relative to the item")
    link_selector: str = Field(..., description="Detail link, relative to the item")
    description_selector: str = Field(
        ..., description="Description region on the detail page"
    )
    pagination_selector: str = Field(..., description="Pagination container")
    next_page_selector: str = Field(
        ..., description="Next page link, relative to the pagination container"
    )

    def search_url(self, keyword: str, page: int) -> str:
        """Build the listing URL for a keyword and 1-based page number."""
        return self.search_url_template.format(keyword=quote(keyword, safe=""), page=page)


EBAY = SiteProfile(
    name="eBay",
    search_url_template=(
        "https://www.ebay.com/sch/i.html?_from=R40&_nkw={keyword}"
        "&_sacat=0&rt=nc&_pgn={page}"
    ),
    listing_item_selector=".srp-results .s-item",
    title_selector=".s-item__title",
    price_selector=".s-item__price",
    link_selector=".s-item__link",
    description_selector="#desc_ifr, .d-item-description, .item-desc",
    pagination_selector=".pagination",
    next_page_selector='a[aria-label="Next page"]',
)
