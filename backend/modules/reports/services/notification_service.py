# backend/modules/reports/services/notification_service.py

"""
Sales target notifications.

The target comes from an injected accessor so callers (and tests) decide
where it is read from; the total is recomputed over all sales on every
check.
"""

import logging
from decimal import Decimal
from typing import Callable, List, Optional, Union

from ..constants import TARGET_REACHED_MESSAGE
from ..schemas.report_schemas import FilterSpec, Notification, NotificationLevel
from .aggregation_service import AggregationService

logger = logging.getLogger(__name__)

TargetProvider = Callable[[], Optional[Union[Decimal, int, float]]]


class NotificationService:
    def __init__(self, aggregation: AggregationService, target_provider: TargetProvider):
        self.aggregation = aggregation
        self.target_provider = target_provider

    def check(self) -> List[Notification]:
        """Zero or one notification: one when the all-time total reaches the target"""
        target = self.target_provider()
        if target is None:
            return []

        target = Decimal(str(target))
        total = self.aggregation.grand_total(FilterSpec())

        if total >= target:
            logger.info(f"Sales target reached: {total} >= {target}")
            return [
                Notification(
                    level=NotificationLevel.INFO,
                    message=TARGET_REACHED_MESSAGE.format(total=total, target=target),
                )
            ]
        return []
