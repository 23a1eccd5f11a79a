"""Bounded full scans over paginated upstream resources.

A full scan reads a resource page by page so the caller can filter or page
over every record in memory. The upstream promises no page count and its
``next`` cursor could chain forever, so the walk is a counted loop capped at
``max_pages`` requests (10 pages of 100 records by default). Anything beyond
the cap is never fetched: resources larger than ``page_size * max_pages``
records come back truncated, and the result says so.
"""

from dataclasses import dataclass, field
from time import monotonic
from typing import TYPE_CHECKING, Generic, TypeVar

from pydantic import BaseModel

from .constants import MAX_SCAN_PAGES, SCAN_PAGE_SIZE
from .decoder import decode_many
from .exceptions import HolocronError
from .log_config import logger

if TYPE_CHECKING:
    from .base_client import BaseApiClient
    from .unwrapper import ResponseUnwrapper

ModelT = TypeVar("ModelT", bound=BaseModel)


@dataclass
class ScanResult(Generic[ModelT]):
    """Outcome of a full scan.

    Attributes:
        items: Decoded records, in upstream order.
        pages_fetched: Number of upstream pages that answered successfully.
        truncated: The page cap was reached while the upstream still had more.
        aborted: The walk stopped early on an upstream failure or the time budget.
    """

    items: list[ModelT] = field(default_factory=list)
    pages_fetched: int = 0
    truncated: bool = False
    aborted: bool = False


class FullScanAggregator:
    """Walks upstream pages in sequence and concatenates the decoded records."""

    def __init__(
        self,
        api_client: "BaseApiClient",
        unwrapper: "ResponseUnwrapper",
        *,
        page_size: int = SCAN_PAGE_SIZE,
        max_pages: int = MAX_SCAN_PAGES,
        time_budget: float | None = None,
    ):
        if page_size <= 0 or max_pages <= 0:
            raise ValueError("page_size and max_pages must be positive")
        self._api_client = api_client
        self._unwrapper = unwrapper
        self.page_size = page_size
        self.max_pages = max_pages
        self.time_budget = time_budget

    async def walk(self, resource: str, model: type[ModelT]) -> ScanResult[ModelT]:
        """Fetch up to ``max_pages`` pages of ``resource``. Never raises.

        Stops at the first page without a continuation cursor (every flat-shape
        body is such a page). A failing page ends the walk and keeps what was
        already aggregated.
        """
        result: ScanResult[ModelT] = ScanResult()
        has_more = False
        started = monotonic()

        for page_number in range(1, self.max_pages + 1):
            if self.time_budget is not None and monotonic() - started >= self.time_budget:
                logger.warning(
                    f"Full scan of '{resource}' ran out of its {self.time_budget}s budget "
                    f"after {result.pages_fetched} page(s); returning {len(result.items)} record(s)."
                )
                result.aborted = True
                return result

            params = {"page": page_number, "limit": self.page_size}
            try:
                body = await self._api_client.get_json(resource, params=params)
            except HolocronError as e:
                logger.error(
                    f"Full scan of '{resource}' failed on page {page_number}: {e}. "
                    f"Returning {len(result.items)} record(s) aggregated so far."
                )
                result.aborted = True
                return result

            records = self._unwrapper.normalize(body)
            result.items.extend(decode_many(records, model))
            result.pages_fetched += 1

            has_more = self._unwrapper.get_next_page_token(body) is not None
            if not has_more:
                break

        if has_more:
            result.truncated = True
            logger.warning(
                f"Full scan of '{resource}' stopped at the {self.max_pages}-page cap while the "
                f"upstream still reports more pages; {len(result.items)} record(s) returned."
            )

        logger.info(
            f"Full scan of '{resource}' fetched {result.pages_fetched} page(s), "
            f"{len(result.items)} record(s)."
        )
        return result
