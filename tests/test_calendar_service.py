import datetime
import threading

import pytest

from conftest import add_sticker, create_user
from souldiary.core.exceptions import NotFoundError, StickerNotOwnedError, ValidationError
from souldiary.services.calendar_service import CalendarService
from souldiary.services.sticker_service import StickerService

DAY = datetime.date(2024, 3, 14)


def _buy(session_factory, sticker_id, user_id="alice"):
    db = session_factory()
    try:
        StickerService(db).purchase_sticker(user_id, sticker_id)
    finally:
        db.close()


@pytest.fixture
def alice(session_factory, settings):
    return create_user(session_factory, settings)


@pytest.fixture
def calendar_service(db, settings):
    return CalendarService(db, settings)


class TestMoodColor:
    def test_setting_color_twice_keeps_one_row_with_latest_value(self, alice, calendar_service):
        calendar_service.set_mood_color("alice", DAY, "#FFABAB")
        day = calendar_service.set_mood_color("alice", DAY, "#ABCDEF")

        assert day.color == "#ABCDEF"
        assert calendar_service.calendar_repo.count_days("alice", DAY) == 1
        assert calendar_service.get_day("alice", DAY).color == "#ABCDEF"

    def test_day_without_state_is_none(self, alice, calendar_service):
        assert calendar_service.get_day("alice", DAY) is None

    def test_color_without_sticker_keeps_existing_sticker(
        self, alice, calendar_service, session_factory
    ):
        sun = add_sticker(session_factory, "Sun", 1000)
        _buy(session_factory, sun)
        calendar_service.apply_sticker("alice", DAY, sun)

        day = calendar_service.set_mood_color("alice", DAY, "#000000")

        assert day.color == "#000000"
        assert day.sticker_id == sun

    def test_days_are_per_user(self, alice, calendar_service, session_factory, settings):
        create_user(session_factory, settings, user_id="bob", name="Bob")

        calendar_service.set_mood_color("alice", DAY, "#111111")
        calendar_service.set_mood_color("bob", DAY, "#222222")

        assert calendar_service.get_day("alice", DAY).color == "#111111"
        assert calendar_service.get_day("bob", DAY).color == "#222222"


class TestApplySticker:
    def test_color_then_sticker_gives_row_with_both(self, alice, calendar_service, session_factory):
        add_sticker(session_factory, "Seven", 700, sticker_id=7)
        _buy(session_factory, 7)

        calendar_service.set_mood_color("alice", DAY, "#FFABAB")
        day = calendar_service.apply_sticker("alice", DAY, 7)

        assert day.color == "#FFABAB"
        assert day.sticker_id == 7
        assert calendar_service.calendar_repo.count_days("alice", DAY) == 1

    def test_sticker_on_empty_day_creates_row_without_color(
        self, alice, calendar_service, session_factory
    ):
        add_sticker(session_factory, "Seven", 700, sticker_id=7)
        _buy(session_factory, 7)

        day = calendar_service.apply_sticker("alice", DAY, 7)

        assert day.color is None
        assert day.sticker_id == 7

    def test_sticker_must_be_owned(self, alice, calendar_service, session_factory):
        moon = add_sticker(session_factory, "Moon", 1000)

        with pytest.raises(StickerNotOwnedError):
            calendar_service.apply_sticker("alice", DAY, moon)

        assert calendar_service.get_day("alice", DAY) is None

    def test_ownership_check_can_be_disabled(self, alice, db, settings, session_factory):
        moon = add_sticker(session_factory, "Moon", 1000)
        service = CalendarService(db, settings.model_copy(update={"REQUIRE_STICKER_OWNERSHIP": False}))

        assert service.apply_sticker("alice", DAY, moon).sticker_id == moon

    def test_unknown_sticker(self, alice, calendar_service):
        with pytest.raises(NotFoundError):
            calendar_service.apply_sticker("alice", DAY, 404)


class TestGetCalendar:
    def test_days_are_ordered_and_filtered_by_month(self, alice, calendar_service):
        calendar_service.set_mood_color("alice", datetime.date(2024, 4, 2), "#222222")
        calendar_service.set_mood_color("alice", datetime.date(2024, 3, 31), "#111111")
        calendar_service.set_mood_color("alice", datetime.date(2023, 12, 31), "#333333")

        assert [d.date for d in calendar_service.get_calendar("alice")] == [
            datetime.date(2023, 12, 31),
            datetime.date(2024, 3, 31),
            datetime.date(2024, 4, 2),
        ]
        assert [d.color for d in calendar_service.get_calendar("alice", 2024, 3)] == ["#111111"]
        assert len(calendar_service.get_calendar("alice", 2024)) == 2
        assert len(calendar_service.get_calendar("alice", 2023, 12)) == 1

    def test_month_requires_year(self, alice, calendar_service):
        with pytest.raises(ValidationError):
            calendar_service.get_calendar("alice", month=3)


class TestConcurrentUpsert:
    def test_concurrent_color_sets_for_one_day_keep_one_row(self, alice, session_factory, settings):
        colors = ["#111111", "#222222", "#333333", "#444444"]
        barrier = threading.Barrier(len(colors))
        errors = []

        def set_color(color):
            db = session_factory()
            try:
                barrier.wait()
                CalendarService(db, settings).set_mood_color("alice", DAY, color)
            except Exception as e:
                errors.append(e)
            finally:
                db.close()

        threads = [threading.Thread(target=set_color, args=(c,)) for c in colors]
        for t in threads:
            t.start()
        for t in threads:
            t.join(timeout=30)

        assert errors == []
        db = session_factory()
        try:
            service = CalendarService(db, settings)
            assert service.calendar_repo.count_days("alice", DAY) == 1
            assert service.get_day("alice", DAY).color in colors
        finally:
            db.close()
