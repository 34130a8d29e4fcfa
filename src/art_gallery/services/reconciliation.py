"""Derives artwork sale status from order payments."""

import logging
from dataclasses import dataclass

from art_gallery.domain.artworks import SALE_ALREADY_SOLD, SALE_MARKED
from art_gallery.domain.orders import Order, ReconciliationReport
from art_gallery.services.artworks import ArtworkService

_logger = logging.getLogger(__name__)


@dataclass
class ReconciliationService:
    """Marks the artworks of a paid order as sold.

    Each item is handled on its own. The order row is the source of truth, so a
    failure on one artwork is logged and the remaining items are still tried.
    Artworks that are no longer Available are left untouched, which makes
    repeated reconciliation of the same order a no-op and lets only one of two
    competing orders claim an artwork.
    """

    artwork_service: ArtworkService

    def reconcile(self, order: Order) -> ReconciliationReport:
        """Mark every item of a paid order as sold."""
        report = ReconciliationReport(order_id=order.order_id)
        for item in order.items:
            try:
                outcome = self.artwork_service.mark_sold(item.uid, order.order_id)
            except Exception:
                _logger.exception(
                    "Failed to mark artwork sold: uid=%s order_id=%s",
                    item.uid,
                    order.order_id,
                )
                report.failed.append(item.uid)
                continue
            if outcome == SALE_MARKED:
                report.marked.append(item.uid)
            elif outcome == SALE_ALREADY_SOLD:
                _logger.warning(
                    "Artwork not available, left as is: uid=%s order_id=%s",
                    item.uid,
                    order.order_id,
                )
                report.already_sold.append(item.uid)
            else:
                _logger.warning(
                    "Artwork missing from catalog: uid=%s order_id=%s",
                    item.uid,
                    order.order_id,
                )
                report.missing.append(item.uid)
        return report
