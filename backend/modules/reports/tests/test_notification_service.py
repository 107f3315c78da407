"""
Tests for sales target notifications.
"""

from decimal import Decimal
from unittest.mock import Mock

import pytest

from modules.reports.schemas.report_schemas import FilterSpec, NotificationLevel
from modules.reports.services.aggregation_service import AggregationService
from modules.reports.services.notification_service import NotificationService
from modules.settings.models.settings_models import Setting
from modules.settings.services.settings_service import SettingsService


class TestCheck:
    def test_no_target_means_no_notifications(self, db_session, sample_sales):
        service = NotificationService(AggregationService(db_session), lambda: None)

        assert service.check() == []

    def test_target_reached(self, db_session, sample_sales):
        service = NotificationService(AggregationService(db_session), lambda: Decimal("100"))

        notifications = service.check()

        assert len(notifications) == 1
        assert notifications[0].level == NotificationLevel.INFO
        assert notifications[0].message == "Target reached: 130.75 / 100"

    def test_exactly_at_target(self, db_session, sample_sales):
        service = NotificationService(AggregationService(db_session), lambda: Decimal("130.75"))

        assert len(service.check()) == 1

    def test_below_target(self, db_session, sample_sales):
        service = NotificationService(AggregationService(db_session), lambda: 500)

        assert service.check() == []

    def test_empty_store_against_positive_target(self, db_session):
        service = NotificationService(AggregationService(db_session), lambda: 1)

        assert service.check() == []

    def test_total_covers_all_sales(self):
        aggregation = Mock(spec=AggregationService)
        aggregation.grand_total.return_value = Decimal("10")

        NotificationService(aggregation, lambda: 5).check()

        aggregation.grand_total.assert_called_once_with(FilterSpec())

    def test_total_is_recomputed_each_check(self):
        aggregation = Mock(spec=AggregationService)
        aggregation.grand_total.side_effect = [Decimal("4"), Decimal("6")]
        service = NotificationService(aggregation, lambda: 5)

        assert service.check() == []
        assert len(service.check()) == 1


class TestSettingsTarget:
    """Target read from the settings store"""

    @pytest.mark.parametrize("raw", [None, "", "   ", "lots", "0", "0.00"])
    def test_unusable_targets_disable_notifications(self, db_session, sample_sales, raw):
        settings_service = SettingsService(db_session)
        if raw is not None:
            # Bypass write validation to simulate legacy data
            db_session.add(Setting(key="target_total", value=raw))
            db_session.commit()

        service = NotificationService(
            AggregationService(db_session), settings_service.target_provider()
        )

        assert service.check() == []

    def test_numeric_target_from_settings(self, db_session, sample_sales):
        settings_service = SettingsService(db_session)
        settings_service.set_value("target_total", "120.5")

        service = NotificationService(
            AggregationService(db_session), settings_service.target_provider()
        )

        assert [n.message for n in service.check()] == ["Target reached: 130.75 / 120.5"]
