"""
Tests for occupancy based pricing
"""

import pytest

from seat_booking.core.exceptions import EmptySeatClassError, NotFoundError, SeatNotFoundError
from seat_booking.models.price_tier import PriceTier
from seat_booking.services.pricing import (
    PricingService,
    occupancy_percent,
    select_tier_price,
)
from tests.conftest import create_seats, create_price_tier


def tier(min_price="", normal_price="", max_price=""):
    return PriceTier(seat_class="A", min_price=min_price, normal_price=normal_price, max_price=max_price)


@pytest.mark.unit
class TestOccupancyPercent:
    """Test occupancy computation"""

    def test_partial_occupancy(self):
        assert occupancy_percent(3, 10) == 30

    def test_band_edges_are_exact(self):
        assert occupancy_percent(2, 5) == 40
        assert occupancy_percent(3, 5) == 60

    def test_range(self):
        assert occupancy_percent(0, 7) == 0
        assert occupancy_percent(7, 7) == 100

    def test_empty_class_raises(self):
        with pytest.raises(EmptySeatClassError) as exc_info:
            occupancy_percent(0, 0, "ghost")
        assert exc_info.value.details == {"seat_class": "ghost"}

    def test_booked_above_total_rejected(self):
        with pytest.raises(ValueError):
            occupancy_percent(5, 4)


@pytest.mark.unit
class TestSelectTierPrice:
    """Band x preferred-tier-set combinations"""

    @pytest.mark.parametrize("occupancy, price_tier, expected", [
        # below 40: min, else normal
        (20, tier("10", "50", "90"), "10"),
        (20, tier("", "50", "90"), "50"),
        # 40..60 inclusive: normal, else max
        (50, tier("10", "50", "80"), "50"),
        (50, tier("10", "", "80"), "80"),
        # above 60: max, else normal
        (70, tier("10", "50", "100"), "100"),
        (70, tier("10", "50", ""), "50"),
    ])
    def test_band_selection(self, occupancy, price_tier, expected):
        assert select_tier_price(occupancy, price_tier) == expected

    def test_lower_edge_belongs_to_middle_band(self):
        assert select_tier_price(40, tier("10", "50", "90")) == "50"
        assert select_tier_price(39.9, tier("10", "50", "90")) == "10"

    def test_upper_edge_belongs_to_middle_band(self):
        assert select_tier_price(60, tier("10", "50", "90")) == "50"
        assert select_tier_price(60.1, tier("10", "50", "90")) == "90"

    def test_none_treated_as_unset(self):
        assert select_tier_price(10, PriceTier(seat_class="A", min_price=None, normal_price="50")) == "50"

    def test_fallback_returned_even_when_unset(self):
        assert select_tier_price(10, tier("", "", "90")) == ""


@pytest.mark.asyncio
class TestPricingService:
    """Pricing against the database"""

    async def test_thirty_percent_uses_min_price(self, db_session, class_a_seats):
        """10 seats, 3 booked"""
        result = await PricingService().price_seat(db_session, 5)

        assert result["price"] == "100"
        assert result["id"] == 5
        assert result["seat_class"] == "A"
        assert result["seat_identifier"] == "A-5"
        assert result["is_booked"] is False

    async def test_thirty_percent_falls_back_to_normal(self, db_session):
        await create_price_tier(db_session, "A", "", "150", "200")
        await create_seats(db_session, "A", 10, booked=3)

        result = await PricingService().price_seat(db_session, 8)
        assert result["price"] == "150"

    async def test_occupancy_read_at_call_time(self, db_session, class_a_tier):
        seats = await create_seats(db_session, "A", 5, booked=1)
        service = PricingService()

        assert (await service.price_seat(db_session, 5))["price"] == "100"

        seats[1].is_booked = True
        await db_session.commit()
        assert (await service.price_seat(db_session, 5))["price"] == "150"  # 40%

        seats[2].is_booked = True
        seats[3].is_booked = True
        await db_session.commit()
        assert (await service.price_seat(db_session, 5))["price"] == "200"  # 80%

    async def test_occupancy_only_counts_own_class(self, db_session, class_a_tier):
        await create_seats(db_session, "A", 4, start_id=1)
        await create_seats(db_session, "B", 4, booked=4, start_id=10)

        booked, total = await PricingService().class_occupancy(db_session, "A")
        assert (booked, total) == (0, 4)

    async def test_unknown_seat(self, db_session, class_a_seats):
        with pytest.raises(SeatNotFoundError):
            await PricingService().price_seat(db_session, 999)

    async def test_missing_price_tier(self, db_session):
        await create_seats(db_session, "Z", 2)

        with pytest.raises(NotFoundError) as exc_info:
            await PricingService().price_seat(db_session, 1)
        assert exc_info.value.status_code == 404
