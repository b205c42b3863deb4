from datetime import UTC, datetime

import pytest

from pycampusparking import Client
from pycampusparking.exceptions import ConfigError
from pycampusparking.models import (
    LotCategory,
    ParkingLot,
    PeriodBoundaries,
    RouteSchedule,
    ScheduleStop,
    StatusColor,
    SubSchedule,
    UserLocation,
)

# Monday 2024-03-04 06:35 on campus.
MONDAY_0635 = datetime(2024, 3, 4, 11, 35, tzinfo=UTC)

LOTS = [
    ParkingLot("far", "Far Student Lot", LotCategory.STUDENT, False, (42.830, -75.535)),
    ParkingLot("near", "Near Student Lot", LotCategory.STUDENT, False, (42.818, -75.535)),
    ParkingLot("staff", "Staff Lot", LotCategory.EMPLOYEE, False, (42.817, -75.535)),
    ParkingLot("exempt", "Exempt Lot", LotCategory.STUDENT, True, (42.840, -75.535)),
]


def test_client_lot_statuses() -> None:
    statuses = Client().lot_statuses(LOTS, MONDAY_0635)
    assert statuses["near"].color is StatusColor.YELLOW
    assert statuses["staff"].color is StatusColor.RED
    assert statuses["exempt"].color is StatusColor.GREEN


def test_client_next_transition_and_label() -> None:
    client = Client()
    transition = client.next_transition(MONDAY_0635)
    assert transition.label == "Business hours start"
    assert transition.minutes_until == 25
    assert client.period_label(MONDAY_0635) == "Overnight (3:00 AM-7:00 AM)"


def test_client_injected_boundaries() -> None:
    client = Client(boundaries=PeriodBoundaries(overnight_start=60, business_start=300, open_start=900))
    statuses = client.lot_statuses(LOTS, MONDAY_0635)
    assert statuses["near"].color is StatusColor.GREEN


def test_client_rejects_bad_config() -> None:
    with pytest.raises(ConfigError):
        Client(boundaries={"overnight_start": 1})  # type: ignore[arg-type]
    with pytest.raises(ConfigError):
        Client(timezone="Nowhere/Special")


def test_client_route_summaries_default_schedules() -> None:
    summaries = Client().route_summaries(MONDAY_0635)
    by_name = {summary.name: summary for summary in summaries}
    assert by_name["Bookstore-Apartments"].next_departure == "7:04 AM"
    assert by_name["Bookstore-Apartments"].minutes_until == 29
    assert by_name["Wellness"].running is False


def test_client_route_summaries_injected_schedules() -> None:
    route = RouteSchedule(
        name="Night Owl",
        color="000000",
        sub_schedules=(
            SubSchedule(
                label="Late",
                days_of_week=frozenset({1}),
                stops=(ScheduleStop("Start", 0),),
                departures=("6:40 AM",),
            ),
        ),
    )
    summaries = Client(schedules=[route]).route_summaries(MONDAY_0635)
    assert len(summaries) == 1
    assert summaries[0].running is True
    assert summaries[0].next_departure == "6:40 AM"


def test_client_list_lots_orders_by_status() -> None:
    rows = Client().list_lots(LOTS, MONDAY_0635)
    assert [lot.id for lot, _, _ in rows] == ["exempt", "far", "near", "staff"]
    assert all(distance is None for _, _, distance in rows)


def test_client_list_lots_near_me() -> None:
    rows = Client().list_lots(
        LOTS,
        MONDAY_0635,
        location=UserLocation.resolved(42.817, -75.535),
        near_me=True,
    )
    assert [lot.id for lot, _, _ in rows] == ["near", "far", "exempt"]
    assert rows[0][2] is not None


def test_client_list_lots_near_me_without_location() -> None:
    rows = Client().list_lots(LOTS, MONDAY_0635, near_me=True)
    assert [lot.id for lot, _, _ in rows] == ["exempt", "far", "near"]
