import pytest

from pycampusparking.data import loader as loader_module
from pycampusparking.exceptions import DataError, ValidationError
from pycampusparking.models import LotCategory


def test_load_route_schedules() -> None:
    loader_module.clear_schedule_cache()
    routes = loader_module.load_route_schedules()
    assert [route.name for route in routes] == [
        "Bookstore-Apartments",
        "Townhouse",
        "Shopping",
        "Wellness",
    ]
    shopping = loader_module.get_route_schedule("Shopping")
    assert shopping.route_id == 12625
    assert shopping.sub_schedules[1].days_of_week == frozenset({2, 4})


def test_load_route_schedules_uses_cache(monkeypatch: pytest.MonkeyPatch) -> None:
    loader_module.clear_schedule_cache()
    calls = {"count": 0}
    original = loader_module.read_schedule_file

    def wrapped():
        calls["count"] += 1
        return original()

    monkeypatch.setattr(loader_module, "read_schedule_file", wrapped)

    first = loader_module.load_route_schedules()
    second = loader_module.load_route_schedules()

    assert calls["count"] == 1
    assert first == second


def test_clear_schedule_cache_forces_reload(monkeypatch: pytest.MonkeyPatch) -> None:
    loader_module.clear_schedule_cache()
    calls = {"count": 0}
    original = loader_module.read_schedule_file

    def wrapped():
        calls["count"] += 1
        return original()

    monkeypatch.setattr(loader_module, "read_schedule_file", wrapped)

    loader_module.load_route_schedules()
    loader_module.clear_schedule_cache()
    loader_module.load_route_schedules()

    assert calls["count"] == 2


def test_invalid_table_is_a_data_error(monkeypatch: pytest.MonkeyPatch) -> None:
    loader_module.clear_schedule_cache()
    monkeypatch.setattr(
        loader_module,
        "read_schedule_file",
        lambda: {"routes": [{"name": "Broken", "color": "ffffff", "schedules": [
            {"label": "Daytime", "days_of_week": [1], "stops": [], "departures": ["noon"]}
        ]}]},
    )
    with pytest.raises(DataError):
        loader_module.load_route_schedules()
    loader_module.clear_schedule_cache()


def test_get_route_schedule_missing() -> None:
    with pytest.raises(DataError):
        loader_module.get_route_schedule("Moon Shuttle")


def test_build_route_schedule_rejects_missing_keys() -> None:
    with pytest.raises(ValidationError):
        loader_module.build_route_schedule(
            {"name": "Partial", "color": "ffffff", "schedules": [{"label": "Daytime"}]}
        )


def test_build_route_schedule_rejects_non_integer_days() -> None:
    for days in ([[1]], ["1"], [True]):
        with pytest.raises(ValidationError):
            loader_module.build_route_schedule(
                {
                    "name": "Odd Days",
                    "color": "ffffff",
                    "schedules": [
                        {"label": "Daytime", "days_of_week": days, "stops": [], "departures": []}
                    ],
                }
            )


def test_build_parking_lot() -> None:
    lot = loader_module.build_parking_lot(
        {
            "id": "lot-7",
            "name": "Lot 7",
            "category": "employee",
            "overnight_exempt": True,
            "lat": "42.81",
            "lng": -75.53,
            "polygon": [[42.81, -75.53], [42.82, -75.53], [42.82, -75.52]],
        }
    )
    assert lot.category is LotCategory.EMPLOYEE
    assert lot.location == (42.81, -75.53)
    assert len(lot.boundary) == 3


def test_build_parking_lot_rejects_unknown_category() -> None:
    with pytest.raises(ValidationError):
        loader_module.build_parking_lot({"id": "x", "category": "visitor", "lat": 1, "lng": 2})
