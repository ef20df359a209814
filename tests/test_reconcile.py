"""Property-based tests for journal entry parsing and reconciliation.

**Feature: trading-dashboard**
"""

from datetime import date

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st
from pydantic import ValidationError

from tradepilot.journal.parsing import (
    parse_money,
    parse_non_neg_int,
    parse_or_default,
    parse_trades,
)
from tradepilot.journal.reconcile import (
    CountReconciler,
    build_entry,
    clamp_complement,
    reconcile_counts,
)
from tradepilot.models import Bias, Direction


raw_input = st.one_of(st.none(), st.text(max_size=20))
directions = st.sampled_from(list(Direction))
biases = st.sampled_from(list(Bias))


class TestParseOrDefault:
    """Parse helpers never raise and fall back to their defaults."""

    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("0", 0.0),
            ("-150", -150.0),
            ("$92.50", 92.5),
            ("-$1,250.75", -1250.75),
            ("+12", 12.0),
            ("1.2.3", 1.2),
            (".5", 0.5),
            ("5.", 5.0),
            ("5-3", 5.0),
            ("", 0.0),
            ("abc", 0.0),
            ("--5", 0.0),
            ("-", 0.0),
            (None, 0.0),
        ],
    )
    def test_parse_money(self, raw, expected):
        assert parse_money(raw) == expected

    @pytest.mark.parametrize(
        "raw, expected",
        [("3", 3), ("12 trades", 12), ("0", 1), ("", 1), ("x", 1), (None, 1), ("-4", 4)],
    )
    def test_parse_trades(self, raw, expected):
        assert parse_trades(raw) == expected

    @pytest.mark.parametrize(
        "raw, expected",
        [("0", 0), ("7", 7), ("", 0), ("n/a", 0), (None, 0), ("-2", 2), ("007", 7)],
    )
    def test_parse_non_neg_int(self, raw, expected):
        assert parse_non_neg_int(raw) == expected

    def test_parser_value_error_uses_default(self):
        def boom(_text):
            raise ValueError("bad")

        assert parse_or_default("x", boom, 42) == 42

    def test_overlong_digit_runs_use_default(self):
        digits = "9" * 5000
        assert parse_trades(digits) == 1
        assert parse_non_neg_int(digits) == 0

    @given(raw=raw_input)
    @settings(max_examples=200)
    def test_parsers_are_total(self, raw):
        assert isinstance(parse_money(raw), float)
        assert parse_trades(raw) >= 1
        assert parse_non_neg_int(raw) >= 0


class TestReconciliationInvariant:
    """
    **Feature: trading-dashboard, Property 3: Reconciliation Invariant**

    *For any* reconciler output with trades > 1, long + short == trades;
    with trades == 1 exactly one count is 1 and it matches direction.
    """

    @given(
        trades=raw_input,
        long_raw=raw_input,
        short_raw=raw_input,
        direction=directions,
        bias=biases,
        pnl=raw_input,
    )
    @settings(max_examples=200)
    def test_built_entries_satisfy_invariant(
        self, trades, long_raw, short_raw, direction, bias, pnl
    ):
        entry = build_entry(
            date(2025, 1, 1),
            pnl=pnl,
            trades=trades,
            long_count=long_raw,
            short_count=short_raw,
            direction=direction,
            bias=bias,
        )

        assert entry.trades >= 1
        assert entry.long_count >= 0 and entry.short_count >= 0
        if entry.trades > 1:
            assert entry.long_count + entry.short_count == entry.trades
        else:
            expected = (1, 0) if direction is Direction.LONG else (0, 1)
            assert (entry.long_count, entry.short_count) == expected

    def test_single_trade_ignores_supplied_counts(self):
        assert reconcile_counts(1, 5, 5, Direction.SHORT) == (0, 1)
        assert reconcile_counts(1, 0, 3, Direction.LONG) == (1, 0)

    def test_consistent_pair_is_kept(self):
        assert reconcile_counts(5, 2, 3, Direction.LONG) == (2, 3)

    def test_long_wins_when_counts_disagree(self):
        assert reconcile_counts(5, 4, 4, Direction.SHORT) == (4, 1)
        assert reconcile_counts(3, 10, 0, Direction.LONG) == (3, 0)
        assert reconcile_counts(3, 0, 0, Direction.LONG) == (0, 3)

    @given(trades=st.integers(min_value=1, max_value=500), edited=st.integers(-10, 1000))
    @settings(max_examples=100)
    def test_clamp_complement(self, trades, edited):
        kept, other = clamp_complement(trades, edited)
        assert 0 <= kept <= trades
        assert kept + other == trades


class TestBuildEntry:
    """Entries are fully populated and never rejected."""

    def test_fields_are_populated(self):
        entry = build_entry(
            "2025-03-04",
            pnl="-$150",
            trades="3",
            long_count="2",
            short_count="1",
            direction=Direction.LONG,
            bias=Bias.BEARISH,
            reason="Faded the open",
            image="shots/2025-03-04.png",
        )

        assert entry.date == date(2025, 3, 4)
        assert entry.pnl == -150.0
        assert entry.trades == 3
        assert (entry.long_count, entry.short_count) == (2, 1)
        assert entry.bias is Bias.BEARISH
        assert entry.reason == "Faded the open"
        assert entry.image == "shots/2025-03-04.png"

    def test_malformed_input_defaults(self):
        entry = build_entry(date(2025, 1, 1), pnl="oops", trades="none")
        assert entry.pnl == 0.0
        assert entry.trades == 1
        assert (entry.long_count, entry.short_count) == (1, 0)
        assert entry.image is None

    def test_invalid_date_is_rejected(self):
        with pytest.raises(ValidationError):
            build_entry("not-a-date", pnl="10")

    def test_iso_date_string_is_accepted(self):
        assert build_entry("2025-02-03").date == date(2025, 2, 3)

    def test_ids_are_unique(self):
        ids = {build_entry(date(2025, 1, 1)).id for _ in range(50)}
        assert len(ids) == 50

    def test_record_uses_persisted_field_names(self):
        record = build_entry(date(2025, 1, 1), trades="2", long_count="1").to_record()
        assert record["date"] == "2025-01-01"
        assert record["longCount"] == 1
        assert record["shortCount"] == 1
        assert record["direction"] == "long"


class TestCountReconciler:
    """
    **Feature: trading-dashboard, Property: Edit Transitions**

    Each edit source clamps the edited field and recomputes the other as
    its complement.
    """

    def test_initial_state_follows_direction(self):
        assert CountReconciler(Direction.LONG).counts == (1, 0)
        assert CountReconciler(Direction.SHORT).counts == (0, 1)

    def test_trades_change_preserves_long(self):
        form = CountReconciler(Direction.LONG)
        form.on_trades_changed("5")
        form.on_long_changed("3")
        assert form.counts == (3, 2)

        # Shrinking the trade count caps long; short absorbs the remainder
        assert form.on_trades_changed("2") == (2, 0)
        assert form.on_trades_changed("6") == (2, 4)

    def test_long_edit_clamps_and_complements(self):
        form = CountReconciler(Direction.LONG)
        form.on_trades_changed("4")
        assert form.on_long_changed("9") == (4, 0)
        assert form.on_long_changed("x") == (0, 4)

    def test_short_edit_clamps_and_complements(self):
        form = CountReconciler(Direction.LONG)
        form.on_trades_changed("4")
        assert form.on_short_changed("3") == (1, 3)
        assert form.on_short_changed("10") == (0, 4)

    def test_dropping_to_one_trade_follows_direction(self):
        form = CountReconciler(Direction.SHORT)
        form.on_trades_changed("3")
        form.on_long_changed("2")
        assert form.on_trades_changed("1") == (0, 1)
        assert not form.split_visible

    def test_direction_change_only_matters_for_single_trade(self):
        form = CountReconciler(Direction.LONG)
        assert form.on_direction_changed(Direction.SHORT) == (0, 1)

        form.on_trades_changed("3")
        before = form.counts
        assert form.on_direction_changed(Direction.LONG) == before

    @given(
        edits=st.lists(
            st.tuples(
                st.sampled_from(["trades", "long", "short", "direction"]),
                st.text(alphabet="0123456789-x", max_size=4),
                directions,
            ),
            max_size=30,
        )
    )
    @settings(max_examples=200)
    def test_invariant_after_any_edit_sequence(self, edits):
        form = CountReconciler()
        for source, raw, direction in edits:
            if source == "trades":
                form.on_trades_changed(raw)
            elif source == "long":
                form.on_long_changed(raw)
            elif source == "short":
                form.on_short_changed(raw)
            else:
                form.on_direction_changed(direction)

            longs, shorts = form.counts
            assert longs >= 0 and shorts >= 0
            if form.trades > 1:
                assert longs + shorts == form.trades
            else:
                assert longs + shorts == 1
                assert (longs == 1) == (form.direction is Direction.LONG)
