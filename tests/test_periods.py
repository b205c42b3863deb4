import pytest

from pycampusparking.exceptions import ValidationError
from pycampusparking.models import Period, PeriodBoundaries, TimeDescriptor
from pycampusparking.periods import classify, next_transition, period_label


def _expected_period(minutes: int) -> Period:
    if 180 <= minutes < 420:
        return Period.OVERNIGHT
    if 420 <= minutes < 990:
        return Period.BUSINESS
    return Period.OPEN


def test_classify_covers_every_minute() -> None:
    for minutes in range(1440):
        assert classify(minutes) is _expected_period(minutes)


@pytest.mark.parametrize(
    ("minutes", "expected"),
    [
        (0, Period.OPEN),
        (179, Period.OPEN),
        (180, Period.OVERNIGHT),
        (419, Period.OVERNIGHT),
        (420, Period.BUSINESS),
        (989, Period.BUSINESS),
        (990, Period.OPEN),
        (1439, Period.OPEN),
    ],
)
def test_classify_boundaries(minutes: int, expected: Period) -> None:
    assert classify(minutes) is expected


def test_classify_rejects_out_of_domain() -> None:
    with pytest.raises(ValidationError):
        classify(1440)
    with pytest.raises(ValidationError):
        classify(-1)


def test_classify_with_alternate_boundaries() -> None:
    boundaries = PeriodBoundaries(overnight_start=60, business_start=120, open_start=600)
    assert classify(90, boundaries) is Period.OVERNIGHT
    assert classify(300, boundaries) is Period.BUSINESS
    assert classify(30, boundaries) is Period.OPEN


def test_next_transition_overnight_weekday() -> None:
    transition = next_transition(TimeDescriptor(395, 2))
    assert transition.label == "Business hours start"
    assert transition.minutes_until == 25


def test_next_transition_overnight_weekend() -> None:
    transition = next_transition(TimeDescriptor(395, 6))
    assert transition.label == "All lots open"
    assert transition.minutes_until == 25


def test_next_transition_business_hours() -> None:
    transition = next_transition(TimeDescriptor(500, 3))
    assert transition.label == "Open hours start"
    assert transition.minutes_until == 490


def test_next_transition_wraps_to_overnight() -> None:
    transition = next_transition(TimeDescriptor(1000, 3))
    assert transition.label == "Overnight restriction"
    assert transition.minutes_until == 620


def test_next_transition_on_boundary_looks_ahead() -> None:
    transition = next_transition(TimeDescriptor(420, 3))
    assert transition.label == "Open hours start"
    assert transition.minutes_until == 570


def test_period_label() -> None:
    assert period_label(200, False) == "Overnight (3:00 AM-7:00 AM)"
    assert period_label(200, True) == "Overnight (3:00 AM-7:00 AM)"
    assert period_label(600, False) == "Business hours (7:00 AM-4:30 PM)"
    assert period_label(1000, False) == "Open hours (4:30 PM-3:00 AM)"
    assert period_label(600, True) == "Weekend, all lots open"


def test_next_transition_weekend_daytime_skips_open_start() -> None:
    transition = next_transition(TimeDescriptor(600, 6))
    assert transition.label == "Overnight restriction"
    assert transition.minutes_until == 1020
    transition = next_transition(TimeDescriptor(1000, 0))
    assert transition.label == "Overnight restriction"
    assert transition.minutes_until == 620
