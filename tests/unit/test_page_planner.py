"""Page planner unit tests.

Covers:
- calendar year gap arithmetic
- seed pages and the min(year gap, total pages) extension
- monotonicity in the end date
- metadata failure
- the provider page limit
"""

from datetime import date, timedelta

import pytest

from guess_the_frame.core.config import settings
from guess_the_frame.modules.rounds.application.page_planner import (
    SEED_PAGES,
    PagePlanner,
    plan_page_count,
    year_gap,
)
from guess_the_frame.modules.rounds.domain.exceptions import PlanningFailedError

pytestmark = pytest.mark.anyio


class TestYearGap:
    def test_same_day_is_zero(self):
        assert year_gap(date(2020, 1, 1), date(2020, 1, 1)) == 0

    def test_full_years(self):
        assert year_gap(date(2000, 1, 1), date(2024, 1, 1)) == 24

    def test_partial_final_year_counts_one_less(self):
        assert year_gap(date(2020, 6, 15), date(2023, 6, 14)) == 2
        assert year_gap(date(2020, 6, 15), date(2023, 5, 30)) == 2

    def test_anniversary_counts_full_year(self):
        assert year_gap(date(2020, 6, 15), date(2023, 6, 15)) == 3

    def test_default_range(self):
        assert year_gap(date(2000, 1, 1), date(2024, 12, 31)) == 24

    def test_reversed_range_is_negative(self):
        assert year_gap(date(2024, 1, 1), date(2020, 1, 1)) == -4


class TestPlanPageCount:
    def test_seed_pages_when_gap_is_zero(self):
        assert plan_page_count(0, 1) == SEED_PAGES == 2

    def test_negative_gap_still_fetches_seed_pages(self):
        assert plan_page_count(-3, 50) == 2

    def test_gap_bounded_by_total_pages(self):
        assert plan_page_count(24, 10) == 10

    def test_total_pages_bounded_by_gap(self):
        assert plan_page_count(5, 500) == 5

    def test_monotonic_in_end_date(self):
        start = date(2010, 3, 20)
        total_pages = 12
        previous = 0
        end = start
        for _ in range(0, 20 * 365, 17):
            end = end + timedelta(days=17)
            count = plan_page_count(year_gap(start, end), total_pages)
            assert count >= previous
            previous = count
        assert previous == total_pages


class TestPagePlanner:
    async def test_short_range_requests_seed_pages(self, provider_factory):
        provider = provider_factory(pages={}, total_pages=1)
        planner = PagePlanner(provider)

        count = await planner.plan("en", date(2020, 1, 1), date(2020, 1, 2), 5)

        assert count == 2
        assert len(provider.discover_calls) == 1
        spec = provider.discover_calls[0]
        assert spec.page == 1
        assert spec.language == "en"
        assert spec.start_date == date(2020, 1, 1)
        assert spec.end_date == date(2020, 1, 2)

    async def test_wide_range_uses_year_gap(self, provider_factory):
        provider = provider_factory(pages={}, total_pages=300)
        planner = PagePlanner(provider)

        count = await planner.plan("hi", date(2000, 1, 1), date(2024, 12, 31), 10)

        assert count == 24

    async def test_metadata_failure_raises_planning_failed(self, provider_factory):
        provider = provider_factory(pages={}, total_pages=5, failing_pages=[1])
        planner = PagePlanner(provider)

        with pytest.raises(PlanningFailedError):
            await planner.plan("en", date(2000, 1, 1), date(2010, 1, 1), 5)

    async def test_declared_total_is_capped_at_provider_limit(self, provider_factory):
        provider = provider_factory(pages={}, total_pages=40000)
        planner = PagePlanner(provider)

        count = await planner.plan("en", date(1000, 1, 1), date(2024, 12, 31), 5)

        assert count == settings.TMDB_MAX_PAGE

    async def test_explicit_page_limit(self, provider_factory):
        provider = provider_factory(pages={}, total_pages=300)
        planner = PagePlanner(provider, max_pages=12)

        count = await planner.plan("hi", date(1950, 1, 1), date(2024, 12, 31), 5)

        assert count == 12
