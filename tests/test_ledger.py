"""Tests for ledger aggregation."""

from datetime import date, datetime, UTC
from decimal import Decimal

import pytest

from ermay.domain.entities import TransactionType
from ermay.domain.ledger import (
    build_unified_timeline,
    compute_balances,
    filter_transactions,
    finite_amount,
    parse_record_date,
    sort_transactions,
)

from builders import D, make_payment, make_sale, make_purchase, make_supplier_payment


class TestComputeBalances:
    """Tests for compute_balances."""

    def test_sale_and_payment_scenario(self):
        debits = [make_sale(1, D("1000"), "TRY", "2024-03-01")]
        credits = [make_payment(2, D("400"), "TRY", "2024-03-05")]

        assert compute_balances(debits, credits) == {"TRY": D("600"), "USD": D("0")}

    def test_empty_inputs_are_seeded(self):
        assert compute_balances([], []) == {"TRY": D("0"), "USD": D("0")}

    def test_custom_seed(self):
        assert compute_balances([], [], seed_currencies=("TRY", "USD", "EUR")) == {
            "TRY": D("0"),
            "USD": D("0"),
            "EUR": D("0"),
        }
        assert compute_balances([], [], seed_currencies=()) == {}

    def test_single_currency_is_debits_minus_credits(self):
        debits = [make_sale(i, D(amount)) for i, amount in enumerate(["10.50", "200", "0.25"])]
        credits = [make_payment(i, D(amount)) for i, amount in enumerate(["100", "5.75"])]

        balances = compute_balances(debits, credits)

        assert balances["TRY"] == D("10.50") + D("200") + D("0.25") - D("100") - D("5.75")
        assert balances["USD"] == 0

    def test_currencies_are_isolated(self):
        balances = compute_balances(
            [make_sale(1, D("100"), "USD")],
            [make_payment(2, D("50"), "TRY")],
        )

        assert balances["USD"] == D("100")
        assert balances["TRY"] == D("-50")

    def test_eur_appears_when_present(self):
        balances = compute_balances([make_purchase(1, D("75"), "EUR")], [])

        assert balances == {"TRY": D("0"), "USD": D("0"), "EUR": D("75")}

    def test_unknown_currency_is_passed_through(self):
        balances = compute_balances([make_sale(1, D("12"), "GBP")], [])

        assert balances["GBP"] == D("12")

    def test_enum_currency_is_stored_as_code(self):
        from ermay.domain.entities import Currency

        balances = compute_balances([make_sale(1, D("5"), Currency.USD)], [])

        assert balances["USD"] == D("5")

    def test_float_amounts_are_exact(self):
        balances = compute_balances([make_sale(1, 0.1), make_sale(2, 0.2)], [])

        assert balances["TRY"] == D("0.3")

    @pytest.mark.parametrize(
        "amount", [float("nan"), float("inf"), None, "100", True, Decimal("NaN")]
    )
    def test_non_finite_amount_is_skipped(self, amount):
        balances = compute_balances([make_sale(1, amount), make_sale(2, D("10"))], [])

        assert balances == {"TRY": D("10"), "USD": D("0")}

    @pytest.mark.parametrize("currency", [None, ""])
    def test_missing_currency_is_skipped(self, currency):
        balances = compute_balances(
            [make_sale(1, D("10"), currency)],
            [make_payment(2, D("3"), currency)],
        )

        assert balances == {"TRY": D("0"), "USD": D("0")}

    def test_skip_hook_receives_skipped_records(self):
        bad_amount = make_sale(1, float("nan"))
        bad_currency = make_payment(2, D("5"), None)
        skipped = []

        compute_balances(
            [bad_amount, make_sale(3, D("1"))],
            [bad_currency],
            on_skip=lambda record, reason: skipped.append((record.id, reason)),
        )

        assert [record_id for record_id, _ in skipped] == [1, 2]
        assert "amount" in skipped[0][1]
        assert "currency" in skipped[1][1]

    def test_idempotent(self):
        debits = [make_sale(1, D("100"), "USD"), make_sale(2, D("7"), "TRY")]
        credits = [make_payment(3, D("30"), "USD")]

        first = compute_balances(debits, credits)
        second = compute_balances(debits, credits)

        assert first == second
        assert first is not second

    def test_dates_are_ignored(self):
        balances = compute_balances(
            [make_sale(1, D("10"), date="not-a-date"), make_sale(2, D("5"), date=None)],
            [],
        )

        assert balances["TRY"] == D("15")

    def test_negative_stored_amount_is_trusted(self):
        balances = compute_balances([make_sale(1, D("-20"))], [])

        assert balances["TRY"] == D("-20")


class TestBuildUnifiedTimeline:
    """Tests for build_unified_timeline."""

    def test_scenario_order_and_tags(self):
        debit = make_sale(1, D("1000"), "TRY", "2024-03-01")
        credit = make_payment(2, D("400"), "TRY", "2024-03-05")

        timeline = build_unified_timeline([debit], [credit], "sale", "payment")

        assert [txn.record for txn in timeline] == [debit, credit]
        assert [txn.transaction_type for txn in timeline] == ["sale", "payment"]

    def test_empty(self):
        assert build_unified_timeline([], [], "sale", "payment") == []

    def test_invalid_dates_sort_last(self):
        a = make_sale(1, D("1"), date="2024-01-01")
        b = make_sale(2, D("1"), date="not-a-date")
        c = make_payment(3, D("1"), date="2023-06-15")

        timeline = build_unified_timeline([a, b], [c], "sale", "payment")

        assert [txn.id for txn in timeline] == [3, 1, 2]

    def test_invalid_dates_keep_relative_order(self):
        x = make_sale(1, D("1"), date="garbage")
        y = make_sale(2, D("1"), date=None)
        z = make_payment(3, D("1"), date="")
        valid = make_payment(4, D("1"), date="2020-01-01")

        timeline = build_unified_timeline([x, y], [z, valid], "sale", "payment")

        assert [txn.id for txn in timeline] == [4, 1, 2, 3]

    def test_same_date_keeps_debits_first(self):
        sale_1 = make_sale(1, D("1"), date="2024-05-01")
        sale_2 = make_sale(2, D("2"), date="2024-05-01")
        payment = make_payment(3, D("3"), date="2024-05-01")

        timeline = build_unified_timeline([sale_1, sale_2], [payment], "sale", "payment")

        assert [txn.id for txn in timeline] == [1, 2, 3]

    def test_duplicates_are_retained(self):
        sale = make_sale(1, D("1"), date="2024-05-01")

        timeline = build_unified_timeline([sale, sale], [], "sale", "payment")

        assert len(timeline) == 2

    def test_timestamps_with_offsets_compare_as_instants(self):
        # 10:00+03:00 is 07:00 UTC, earlier than a naive 08:00
        naive = make_sale(1, D("1"), date="2024-01-01T08:00:00")
        offset = make_payment(2, D("1"), date="2024-01-01T10:00:00+03:00")

        timeline = build_unified_timeline([naive], [offset], "sale", "payment")

        assert [txn.id for txn in timeline] == [2, 1]

    def test_enum_tags_are_plain_strings(self):
        purchase = make_purchase(1, D("1"))
        payment = make_supplier_payment(2, D("1"), date="2024-02-01")

        timeline = build_unified_timeline(
            [purchase], [payment], TransactionType.PURCHASE, TransactionType.PAYMENT_TO_SUPPLIER
        )

        assert [txn.transaction_type for txn in timeline] == ["purchase", "paymentToSupplier"]

    def test_unified_transaction_exposes_record_fields(self):
        payment = make_payment(7, D("12.5"), "USD", "2024-02-01", description="Avans")

        (txn,) = build_unified_timeline([], [payment], "sale", "payment")

        assert txn.id == 7
        assert txn.amount == D("12.5")
        assert txn.currency == "USD"
        assert txn.description == "Avans"
        assert txn.method == "nakit"

    def test_sale_has_no_method(self):
        (txn,) = build_unified_timeline([make_sale(1, D("1"))], [], "sale", "payment")

        assert txn.method is None


class TestSortTransactions:
    """Tests for sort_transactions."""

    def test_descending_keeps_invalid_last(self):
        timeline = build_unified_timeline(
            [
                make_sale(1, D("1"), date="2024-01-01"),
                make_sale(2, D("1"), date="bad"),
                make_sale(3, D("1"), date="2024-06-01"),
            ],
            [make_payment(4, D("1"), date="2023-01-01")],
            "sale",
            "payment",
        )

        newest_first = sort_transactions(timeline, descending=True)

        assert [txn.id for txn in newest_first] == [3, 1, 4, 2]

    def test_does_not_mutate_input(self):
        timeline = build_unified_timeline(
            [make_sale(1, D("1"), date="2024-01-01"), make_sale(2, D("1"), date="2024-06-01")],
            [],
            "sale",
            "payment",
        )
        original = list(timeline)

        sort_transactions(timeline, descending=True)

        assert timeline == original


class TestFilterTransactions:
    """Tests for filter_transactions."""

    @pytest.fixture
    def timeline(self):
        return build_unified_timeline(
            [
                make_sale(1, D("1000"), date="2024-01-15", description="Kumaş satışı"),
                make_sale(2, D("50"), date="not-a-date", description="Eski kayıt"),
                make_sale(3, D("300"), date="2024-03-10", description="Genel Satış"),
            ],
            [make_payment(4, D("400"), date="2024-02-01", method="havale")],
            "sale",
            "payment",
        )

    def test_no_filters(self, timeline):
        assert filter_transactions(timeline) == timeline

    def test_date_range_is_inclusive(self, timeline):
        result = filter_transactions(timeline, start=date(2024, 2, 1), end=date(2024, 3, 10))

        assert [txn.id for txn in result] == [4, 3, 2]

    def test_invalid_dates_are_not_dropped_by_range(self, timeline):
        result = filter_transactions(timeline, start=date(2030, 1, 1))

        assert [txn.id for txn in result] == [2]

    def test_search_description_ignores_case(self, timeline):
        result = filter_transactions(timeline, search="KUMAŞ")

        assert [txn.id for txn in result] == [1]

    def test_search_method(self, timeline):
        result = filter_transactions(timeline, search="havale")

        assert [txn.id for txn in result] == [4]

    def test_search_amount(self, timeline):
        result = filter_transactions(timeline, search="1000")

        assert [txn.id for txn in result] == [1]


class TestParsing:
    """Tests for amount and date parsing helpers."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            (D("1.5"), D("1.5")),
            (3, D("3")),
            (2.25, D("2.25")),
            (float("-inf"), None),
            (False, None),
            ("12", None),
            (None, None),
        ],
    )
    def test_finite_amount(self, value, expected):
        assert finite_amount(value) == expected

    def test_parse_record_date_iso_string(self):
        assert parse_record_date("2024-03-01") == datetime(2024, 3, 1, tzinfo=UTC)

    def test_parse_record_date_date_object(self):
        assert parse_record_date(date(2024, 3, 1)) == datetime(2024, 3, 1, tzinfo=UTC)

    @pytest.mark.parametrize("value", ["not-a-date", "2024-02-30", "", "   ", None, 20240101])
    def test_parse_record_date_invalid(self, value):
        assert parse_record_date(value) is None
