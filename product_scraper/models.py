"""
Pydantic models for scraped product data.
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

# Sentinel for any field whose real value is unavailable
PLACEHOLDER = "-"


class ListingSummary(BaseModel):
    """A product as it appears on a search listing page."""

    name: str = Field(PLACEHOLDER, description="Product title shown in the listing")
    price: str = Field(PLACEHOLDER, description="Price text shown in the listing")
    url: Optional[str] = Field(None, description="Link to the product detail page")


class ProductRecord(BaseModel):
    """Primary model for a scraped product."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Product title")
    price: str = Field(..., description="Price text as displayed")
    url: str = Field(..., description="URL of the product detail page")
    description: str = Field(..., description="Product description or placeholder")

    @classmethod
    def from_summary(cls, summary: ListingSummary, description: str) -> "ProductRecord":
        """Build a record from a listing summary and an extracted description."""
        return cls(
            name=summary.name,
            price=summary.price,
            url=summary.url,
            description=description,
        )


class CrawlRequest(BaseModel):
    """Caller supplied crawl parameters."""

    keyword: str = Field(..., min_length=1, description="Search keyword")
    max_pages: int = Field(3, ge=1, le=10, description="Maximum listing pages to visit")


class CrawlResponse(BaseModel):
    """Body returned by the products endpoint."""

    keyword: str
    pages_scraped: int
    total_products: int
    products: List[ProductRecord] = Field(default_factory=list)
