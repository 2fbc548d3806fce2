import logging
from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import Callable, Optional, Sequence

from core.models import EnrichedListing, ItemDetail, ItemId, ListingStub

logger = logging.getLogger(__name__)

DetailFetcher = Callable[[ItemId], ItemDetail]


def enrich_listings(
    stubs: Sequence[ListingStub],
    fetch_detail: DetailFetcher,
    max_workers: Optional[int] = None,
) -> list[EnrichedListing]:
    """
    Look up the detail of every stub in parallel and keep the ones for sale.

    - One detail request per stub, all in flight at once unless max_workers
      caps the pool.
    - A failed lookup never fails the batch: that stub gets price 0 and
      is_for_sale False, which the for-sale filter then drops.
    - Waits for every lookup before filtering. Results keep input order.
    """
    if not stubs:
        return []

    workers = len(stubs) if not max_workers else min(max_workers, len(stubs))
    slots: list[Optional[EnrichedListing]] = [None] * len(stubs)

    with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="enrich") as executor:
        future_to_index = {
            executor.submit(fetch_detail, stub.id): index
            for index, stub in enumerate(stubs)
        }

        for future in as_completed(future_to_index):
            index = future_to_index[future]
            stub = stubs[index]
            detail: Optional[ItemDetail]
            try:
                detail = future.result()
            except Exception as e:
                logger.warning(f"[API] Failed to get details for pass {stub.id}: {e}")
                detail = None

            slots[index] = EnrichedListing.merge(stub, detail)

    return [listing for listing in slots if listing is not None and listing.is_for_sale]
