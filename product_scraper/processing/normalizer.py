"""
Normalization of scraped product records.
"""

import logging
from typing import Any, Iterable, List, Mapping, Union

from ..models import PLACEHOLDER, ProductRecord

logger = logging.getLogger(__name__)

RecordLike = Union[ProductRecord, Mapping[str, Any]]


def _text(value: Any) -> str:
    return str(value) if value else PLACEHOLDER


def normalize_record(record: RecordLike) -> ProductRecord:
    """Fill missing name, price and description with the placeholder."""
    data = record.model_dump() if isinstance(record, ProductRecord) else dict(record)
    url = data.get("url")
    return ProductRecord(
        name=_text(data.get("name")),
        price=_text(data.get("price")),
        url=str(url) if url else "",
        description=_text(data.get("description")),
    )


def normalize_records(records: Iterable[RecordLike]) -> List[ProductRecord]:
    """
    Bring every record into the canonical shape.

    The url is left untouched and order is preserved one-to-one.
    """
    normalized = [normalize_record(record) for record in records]
    logger.debug(f"Normalized {len(normalized)} records")
    return normalized
