"""
Unit tests for PriceResolver selection rules.

Covers the fold directly: ordering independence, tie-breaks and the
in-memory applicability check on storage results.
"""
from datetime import datetime
from itertools import permutations

from prices.domain.pricing.services import PriceResolver

INSTANT = datetime(2020, 6, 14, 16, 0, 0)


class TestPriceResolver:

    def test_empty_candidates_resolve_to_none(self):
        assert PriceResolver.resolve([], INSTANT, 35455, 1) is None

    def test_single_candidate_inside_window_is_selected(self, make_price):
        record = make_price(start="2020-06-14T00:00:00", end="2020-06-14T23:59:59")

        assert PriceResolver.resolve([record], INSTANT, 35455, 1) is record

    def test_highest_priority_wins_in_any_order(self, make_price):
        base = make_price(price_list=1, priority=0)
        promo = make_price(price_list=2, priority=1,
                           start="2020-06-14T15:00:00", end="2020-06-14T18:30:00")
        flash = make_price(price_list=3, priority=4,
                           start="2020-06-14T15:30:00", end="2020-06-14T16:30:00")

        for ordering in permutations([base, promo, flash]):
            assert PriceResolver.resolve(ordering, INSTANT, 35455, 1) is flash

    def test_equal_priority_resolves_to_lowest_price_list(self, make_price):
        candidates = [
            make_price(price_list=8, priority=1, amount="20.00"),
            make_price(price_list=3, priority=1, amount="21.00"),
            make_price(price_list=5, priority=1, amount="22.00"),
        ]

        for ordering in permutations(candidates):
            assert PriceResolver.resolve(ordering, INSTANT, 35455, 1).price_list == 3

    def test_identical_rank_keeps_first_candidate(self, make_price):
        first = make_price(price_id=10, price_list=2, priority=1, amount="10.00")
        second = make_price(price_id=11, price_list=2, priority=1, amount="11.00")

        assert PriceResolver.resolve([first, second], INSTANT, 35455, 1) is first
        assert PriceResolver.resolve([second, first], INSTANT, 35455, 1) is second

    def test_candidates_outside_window_are_dropped(self, make_price):
        expired = make_price(price_list=2, priority=9,
                             start="2020-06-14T15:00:00", end="2020-06-14T15:59:59")
        base = make_price(price_list=1, priority=0)

        assert PriceResolver.resolve([expired, base], INSTANT, 35455, 1) is base

    def test_candidates_for_other_product_or_brand_are_dropped(self, make_price):
        other_brand = make_price(brand_id=2, priority=5)
        other_product = make_price(product_id=1, priority=5)
        base = make_price(priority=0)

        selected = PriceResolver.resolve([other_brand, other_product, base], INSTANT, 35455, 1)

        assert selected is base

    def test_accepts_any_iterable(self, make_price):
        record = make_price()

        assert PriceResolver.resolve(iter([record]), INSTANT, 35455, 1) is record

    def test_outranks_compares_priority_before_price_list(self, make_price):
        high = make_price(price_list=9, priority=2)
        low = make_price(price_list=1, priority=1)

        assert PriceResolver.outranks(high, low)
        assert not PriceResolver.outranks(low, high)
