"""Tests for interview slot generation."""
from datetime import date, datetime, timezone

from jobportal.features.scheduling.scheduler import InterviewScheduler
from jobportal.features.scheduling.slots import (
    DURATIONS,
    combine_slot,
    generate_date_options,
    generate_time_slots,
    today_in,
)


def test_date_options_skip_weekends():
    # 2024-01-05 is a Friday
    options = generate_date_options(date(2024, 1, 5))
    assert options[0] == date(2024, 1, 8)
    assert options[-1] == date(2024, 1, 19)
    assert len(options) == 10
    assert all(day.weekday() < 5 for day in options)


def test_date_options_exclude_today():
    today = date(2024, 1, 10)
    assert today not in generate_date_options(today)
    assert generate_date_options(today)[0] == date(2024, 1, 11)


def test_time_slots():
    slots = generate_time_slots()
    assert slots[:3] == ["09:00", "09:30", "10:00"]
    assert slots[-1] == "16:30"
    assert len(slots) == 16


def test_durations():
    assert DURATIONS == (15, 30, 45, 60)


def test_combine_slot_utc():
    assert combine_slot(date(2024, 1, 8), "14:30") == datetime(2024, 1, 8, 14, 30, tzinfo=timezone.utc)


def test_combine_slot_converts_local_time():
    combined = combine_slot(date(2024, 1, 8), "09:00", "America/New_York")
    assert combined == datetime(2024, 1, 8, 14, 0, tzinfo=timezone.utc)


def test_today_follows_time_zone():
    # UTC+14 and UTC-11 are always on different dates
    assert today_in("Pacific/Kiritimati") > today_in("Pacific/Pago_Pago")
    assert today_in() == datetime.now(timezone.utc).date()


def test_scheduler_counts_days_in_its_time_zone():
    scheduler = InterviewScheduler(backend=None, time_zone="Pacific/Kiritimati")
    assert scheduler.date_options() == generate_date_options(today_in("Pacific/Kiritimati"))
