"""
Tests for filter parsing and predicate construction.
"""

import pytest
from datetime import date

from core.error_handling import InvalidFilter
from modules.reports.schemas.report_schemas import FilterSpec
from modules.reports.services.filter_builder import (
    FilterField,
    FilterOperator,
    FilterPredicate,
    bound_values,
    build_predicates,
    parse_filter,
)
from modules.reports.services.reporting_store import to_clause


class TestBuildPredicates:
    def test_empty_filter_produces_no_predicates(self):
        assert build_predicates(FilterSpec()) == []
        assert build_predicates(None) == []

    def test_full_filter_keeps_fixed_order(self):
        filters = FilterSpec(
            date_from=date(2024, 1, 1),
            date_to=date(2024, 1, 31),
            user_id=7,
            product_id=3,
        )

        predicates = build_predicates(filters)

        assert predicates == [
            FilterPredicate(FilterField.CREATED_DATE, FilterOperator.GTE, date(2024, 1, 1)),
            FilterPredicate(FilterField.CREATED_DATE, FilterOperator.LTE, date(2024, 1, 31)),
            FilterPredicate(FilterField.USER_ID, FilterOperator.EQ, 7),
            FilterPredicate(FilterField.PRODUCT_ID, FilterOperator.EQ, 3),
        ]
        assert bound_values(predicates) == (date(2024, 1, 1), date(2024, 1, 31), 7, 3)

    def test_absent_fields_are_skipped(self):
        predicates = build_predicates(FilterSpec(date_to=date(2024, 2, 1), product_id=9))

        assert [p.field for p in predicates] == [FilterField.CREATED_DATE, FilterField.PRODUCT_ID]
        assert all(p.value is not None for p in predicates)

    def test_builder_is_pure(self):
        filters = FilterSpec(user_id=2)
        assert build_predicates(filters) == build_predicates(filters)


class TestParseFilter:
    def test_parses_query_values(self):
        filters = parse_filter("2024-01-01", "2024-01-02", "4", "5")

        assert filters.date_from == date(2024, 1, 1)
        assert filters.date_to == date(2024, 1, 2)
        assert filters.user_id == 4
        assert filters.product_id == 5

    def test_blank_values_are_absent(self):
        filters = parse_filter("", "  ", None, "")

        assert filters.is_empty

    @pytest.mark.parametrize(
        "bad_date", ["2024-13-01", "yesterday", "01/02/2024", "1704067200", "2024-1-1"]
    )
    def test_malformed_date_rejected(self, bad_date):
        with pytest.raises(InvalidFilter) as exc_info:
            parse_filter(date_from=bad_date)

        assert exc_info.value.status_code == 400
        assert exc_info.value.details == {"field": "from"}
        assert bad_date in exc_info.value.message

    @pytest.mark.parametrize(
        "bad_id", ["abc", "0", "-3", "1.5", "2147483648", "99999999999999999999"]
    )
    def test_malformed_identifier_rejected(self, bad_id):
        with pytest.raises(InvalidFilter) as exc_info:
            parse_filter(user_id=bad_id)

        assert exc_info.value.error_code == "INVALID_FILTER"
        assert exc_info.value.details == {"field": "user_id"}

    def test_largest_column_value_accepted(self):
        assert parse_filter(product_id="2147483647").product_id == 2147483647

    def test_inverted_range_is_not_an_error(self):
        filters = parse_filter("2024-02-01", "2024-01-01")

        assert filters.date_from > filters.date_to


class TestClauseTranslation:
    def test_values_are_bound_not_inlined(self):
        predicate = FilterPredicate(
            FilterField.USER_ID, FilterOperator.EQ, "1; DROP TABLE sales"
        )

        clause = to_clause(predicate)
        compiled = clause.compile()

        assert "DROP TABLE" not in str(compiled)
        assert "1; DROP TABLE sales" in compiled.params.values()

    def test_date_predicates_use_date_portion(self):
        clause = to_clause(
            FilterPredicate(FilterField.CREATED_DATE, FilterOperator.GTE, date(2024, 1, 1))
        )

        assert "date(sales.created_at)" in str(clause.compile())

    def test_unknown_field_rejected(self):
        with pytest.raises(ValueError):
            to_clause(FilterPredicate("password_hash", FilterOperator.EQ, "x"))
