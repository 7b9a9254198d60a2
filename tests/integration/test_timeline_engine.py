# File: tests/integration/test_timeline_engine.py
"""
Integration tests for the TimelineEngine pipeline.
Runs full layout passes the way the rendering layer does.
"""

import pytest
from datetime import date, datetime, timedelta

import pytz

from day_timeline import TimelineEngine, VisibleWindow, block_from_dict


AMSTERDAM = "Europe/Amsterdam"


@pytest.fixture
def engine():
    """Normal-mode engine on Amsterdam time."""
    return TimelineEngine(compact=False, timezone=AMSTERDAM)


class TestLayoutDay:
    """Full layout pass for one day."""

    def test_class_schedule_today(self, engine, class_schedule, view_date, fixed_now):
        layout = engine.layout_day(class_schedule, view_date, container_width=456, now=fixed_now)

        assert layout.is_today is True
        assert layout.is_empty is False
        assert (layout.window.start_hour, layout.window.end_hour) == (8, 18)
        assert layout.total_height == 640
        assert len(layout.hour_markers) == 11

        lecture = layout.geometry_for("lecture")
        lab = layout.geometry_for("lab")
        gym = layout.geometry_for("gym")
        assert lecture.total_columns == lab.total_columns == 2
        assert lecture.right <= lab.left
        assert gym.total_columns == 1
        assert gym.width == pytest.approx(400)

        assert layout.now_marker is not None
        assert layout.now_marker.top == pytest.approx((14 * 60 + 25 - 8 * 60) / 60 * 64)
        assert layout.now_marker.label == "2:25 PM"

    def test_other_day_has_no_now_marker(self, engine, class_schedule, view_date, fixed_now):
        tomorrow = view_date + timedelta(days=1)
        layout = engine.layout_day(class_schedule, tomorrow, container_width=456, now=fixed_now)

        assert layout.is_today is False
        assert layout.now_marker is None

    def test_unmeasured_container(self, engine, class_schedule, view_date, fixed_now):
        layout = engine.layout_day(class_schedule, view_date, container_width=0, now=fixed_now)

        assert layout.blocks == []
        assert layout.hour_markers  # grid still renders
        assert layout.window.end_hour > layout.window.start_hour

    def test_empty_day_today(self, engine, view_date, fixed_now):
        layout = engine.layout_day([], view_date, container_width=456, now=fixed_now)

        assert layout.is_empty is True
        assert layout.blocks == []
        assert (layout.window.start_hour, layout.window.end_hour) == (12, 22)
        assert layout.now_marker is not None

    def test_window_override(self, engine, class_schedule, view_date, fixed_now):
        window = VisibleWindow(6, 22)
        layout = engine.layout_day(
            class_schedule, view_date, container_width=456, now=fixed_now, window=window
        )

        assert layout.window == window
        assert layout.geometry_for("lecture").top == pytest.approx(3 * 64)

    def test_naive_now_is_local_time(self, engine, class_schedule, view_date):
        layout = engine.layout_day(
            class_schedule, view_date, container_width=456, now=datetime(2025, 1, 15, 9, 0)
        )
        assert layout.now_marker.minutes == 9 * 60

    def test_aware_now_is_converted(self, engine, view_date):
        # 23:30 UTC on the 14th is already the 15th in Amsterdam
        utc_now = pytz.utc.localize(datetime(2025, 1, 14, 23, 30))
        assert engine.is_today(view_date, utc_now) is True
        assert engine.is_today("2025-01-14", utc_now) is False

    def test_repeated_passes_are_identical(self, engine, class_schedule, view_date, fixed_now):
        first = engine.layout_day(class_schedule, view_date, container_width=700, now=fixed_now)
        second = engine.layout_day(class_schedule, view_date, container_width=700, now=fixed_now)
        assert first == second

    def test_blocks_from_api_payload(self, engine, view_date, fixed_now):
        payload = [
            {'id': 'b1', 'start_time': '09:00:00', 'end_time': '10:00:00', 'color': '#f00'},
            {'id': 'b2', 'start_time': '09:30:00', 'end_time': '11:00:00', 'is_completable': True},
        ]
        blocks = [block_from_dict(item) for item in payload]
        layout = engine.layout_day(blocks, view_date, container_width=456, now=fixed_now)

        assert {g.block_id for g in layout.blocks} == {"b1", "b2"}
        assert all(g.total_columns == 2 for g in layout.blocks)


class TestEngineSettings:
    """Engine construction and helpers."""

    def test_compact_mode_dimensions(self, class_schedule, view_date, fixed_now):
        engine = TimelineEngine(compact=True, timezone=AMSTERDAM)
        layout = engine.layout_day(class_schedule, view_date, container_width=248, now=fixed_now)

        assert layout.total_height == layout.window.span_hours * 40
        assert layout.geometry_for("gym").left == pytest.approx(48)
        assert layout.geometry_for("gym").width == pytest.approx(200)

    def test_unknown_timezone_rejected(self):
        with pytest.raises(ValueError, match="Unknown timezone"):
            TimelineEngine(timezone="Mars/Olympus_Mons")

    def test_seconds_until_next_tick(self, engine):
        now = pytz.timezone(AMSTERDAM).localize(datetime(2025, 1, 15, 14, 25, 45))
        assert engine.seconds_until_next_tick(now) == pytest.approx(15)

    def test_window_for(self, engine, class_schedule, fixed_now):
        window = engine.window_for(class_schedule, date(2025, 1, 15), fixed_now)
        assert window.start_hour <= 9 and window.end_hour >= 17


class TestHover:
    """Hover slots through the engine."""

    def test_hover_slot_and_ghost(self, engine, class_schedule, view_date):
        window = VisibleWindow(8, 18)
        # 16:30 is free after the study block
        offset = 8.5 * 64
        slot = engine.hover_slot(offset, class_schedule, view_date, window)

        assert slot is not None
        assert slot.to_block_defaults() == {
            'start_time': "16:30",
            'end_time': "17:30",
            'days_of_week': [3],
        }

        ghost = engine.hover_ghost(slot, window, container_width=456)
        assert ghost.width == pytest.approx(400)
        assert ghost.top == pytest.approx(offset)

    def test_hover_on_block_is_rejected(self, engine, class_schedule, view_date):
        window = VisibleWindow(8, 18)
        assert engine.hover_slot(64, class_schedule, view_date, window) is None
