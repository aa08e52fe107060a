"""Tests for the per-user balance service."""

from datetime import UTC, date, datetime
from uuid import uuid4

import pytest

from fitsync.domain.errors import InvalidAmountError
from fitsync.services.balance import BalanceService
from fitsync.services.user_settings import UserSettingsService
from tests.conftest import (
    FakeClock,
    InMemoryDiaryRepository,
    InMemoryUserSettingsRepository,
)


def test_today_uses_user_timezone(
    balance_service: BalanceService,
    user_settings_repository: InMemoryUserSettingsRepository,
    clock: FakeClock,
) -> None:
    user_id = uuid4()
    user_settings_repository.timezones[user_id] = "America/Los_Angeles"
    clock.current = datetime(2024, 6, 11, 3, 0, tzinfo=UTC)

    assert balance_service.today(user_id) == date(2024, 6, 10)
    assert balance_service.today(uuid4()) == date(2024, 6, 11)


def test_unknown_stored_timezone_falls_back_to_default(
    balance_service: BalanceService,
    user_settings_repository: InMemoryUserSettingsRepository,
) -> None:
    user_id = uuid4()
    user_settings_repository.timezones[user_id] = "Not/AZone"

    assert balance_service.get_today(user_id).date == "2024-06-10"


def test_first_read_loads_stored_totals(
    balance_service: BalanceService,
    diary_repository: InMemoryDiaryRepository,
) -> None:
    user_id = uuid4()
    diary_repository.add_food_entry(
        user_id, date(2024, 6, 10), "oats", 150, 2, "breakfast"
    )
    diary_repository.add_food_entry(user_id, date(2024, 6, 9), "pizza", 800, 1, None)

    balance = balance_service.get_today(user_id)

    assert balance.date == "2024-06-10"
    assert balance.consumed_calories == 300
    assert balance.remaining_calories == 1700


def test_services_sharing_storage_see_each_others_writes(
    diary_repository: InMemoryDiaryRepository,
    user_settings_repository: InMemoryUserSettingsRepository,
    clock: FakeClock,
) -> None:
    first = BalanceService(
        diary_repository, UserSettingsService(user_settings_repository), now=clock
    )
    second = BalanceService(
        diary_repository, UserSettingsService(user_settings_repository), now=clock
    )
    user_id = uuid4()
    assert first.get_today(user_id).consumed_calories == 0

    diary_repository.add_food_entry(user_id, date(2024, 6, 10), "pasta", 500, 1, None)
    second.set_goal(user_id, 1800)

    balance = first.get_today(user_id)
    assert balance.consumed_calories == 500
    assert balance.goal_calories == 1800
    assert balance.remaining_calories == 1300


def test_uses_stored_goal(
    balance_service: BalanceService,
    user_settings_repository: InMemoryUserSettingsRepository,
) -> None:
    user_id = uuid4()
    user_settings_repository.goals[user_id] = 1850

    assert balance_service.get_today(user_id).remaining_calories == 1850


def test_set_goal_persists_and_updates_balance(
    balance_service: BalanceService,
    diary_repository: InMemoryDiaryRepository,
    user_settings_repository: InMemoryUserSettingsRepository,
) -> None:
    user_id = uuid4()
    diary_repository.add_food_entry(user_id, date(2024, 6, 10), "curry", 500, 1, None)

    balance = balance_service.set_goal(user_id, 1100)

    assert user_settings_repository.goals[user_id] == 1100
    assert balance.goal_calories == 1100
    assert balance.remaining_calories == 600


@pytest.mark.parametrize("goal", [-1, 1800.5])
def test_set_goal_rejects_invalid_without_storing(
    balance_service: BalanceService,
    user_settings_repository: InMemoryUserSettingsRepository,
    goal: float,
) -> None:
    user_id = uuid4()

    with pytest.raises(InvalidAmountError):
        balance_service.set_goal(user_id, goal)

    assert user_id not in user_settings_repository.goals


def test_set_goal_stores_whole_float_as_int(
    balance_service: BalanceService,
    user_settings_repository: InMemoryUserSettingsRepository,
) -> None:
    user_id = uuid4()

    balance = balance_service.set_goal(user_id, 1800.0)

    assert isinstance(user_settings_repository.goals[user_id], int)
    assert isinstance(balance.goal_calories, int)


def test_new_day_reads_new_days_rows(
    balance_service: BalanceService,
    diary_repository: InMemoryDiaryRepository,
    clock: FakeClock,
) -> None:
    user_id = uuid4()
    diary_repository.add_food_entry(user_id, date(2024, 6, 10), "stew", 800, 1, None)
    diary_repository.add_food_entry(user_id, date(2024, 6, 11), "toast", 120, 1, None)
    assert balance_service.get_today(user_id).consumed_calories == 800

    clock.current = datetime(2024, 6, 11, 0, 5, tzinfo=UTC)
    balance = balance_service.get_today(user_id)

    assert balance.date == "2024-06-11"
    assert balance.consumed_calories == 120
    assert balance.burned_calories == 0
    assert balance.remaining_calories == 1880


def test_balances_are_per_user(
    balance_service: BalanceService,
    diary_repository: InMemoryDiaryRepository,
) -> None:
    first, second = uuid4(), uuid4()
    diary_repository.add_food_entry(first, date(2024, 6, 10), "rice", 400, 1, None)

    assert balance_service.get_today(first).consumed_calories == 400
    assert balance_service.get_today(second).consumed_calories == 0
