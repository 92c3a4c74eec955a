"""
Tests for GetWorkoutUseCase.
"""
from datetime import datetime, timedelta, timezone
from unittest.mock import MagicMock

import pytest

from application.use_cases.get_workout import GetWorkoutUseCase
from domain.models import Workout, WorkoutCategory, WorkoutType

from tests.fakes import OTHER_USER_ID, TEST_COACH_ID, TEST_USER_ID

BASE_TIME = datetime(2024, 1, 1, 8, 0, tzinfo=timezone.utc)


@pytest.mark.unit
class TestGetWorkoutUseCase:
    """Tests for GetWorkoutUseCase.get_workout()."""

    @pytest.fixture
    def use_case(self, workout_repo, test_settings):
        """Create use case with fake dependencies."""
        return GetWorkoutUseCase(workout_repo=workout_repo, settings=test_settings)

    def test_get_own_workout(self, use_case, stored_workout):
        result = use_case.get_workout(stored_workout.id, TEST_USER_ID)

        assert result.success is True
        assert result.workout.id == stored_workout.id
        assert result.workout.total_exercises == 2

    def test_get_workout_not_found(self, use_case):
        result = use_case.get_workout("nonexistent", TEST_USER_ID)

        assert result.success is False
        assert result.error_code == "not_found"
        assert result.workout is None

    def test_other_users_workout_forbidden(self, use_case, stored_workout):
        result = use_case.get_workout(stored_workout.id, OTHER_USER_ID)

        assert result.success is False
        assert result.error_code == "forbidden"
        assert result.workout is None

    def test_anonymous_can_view_template(self, use_case, workout_repo):
        template = workout_repo.add(Workout.create_template("Starter"))

        result = use_case.get_workout(template.id, None)

        assert result.success is True


@pytest.mark.unit
class TestListWorkouts:
    """Tests for GetWorkoutUseCase.list_workouts()."""

    @pytest.fixture
    def use_case(self, workout_repo, test_settings):
        return GetWorkoutUseCase(workout_repo=workout_repo, settings=test_settings)

    @pytest.fixture
    def seeded(self, workout_repo):
        workouts = [
            Workout.create_user_workout("Mine", user_id=TEST_USER_ID, category=WorkoutCategory.STRENGTH),
            Workout.create_user_workout("Theirs", user_id=OTHER_USER_ID),
            Workout.create_coach_workout("Coach", coach_id=TEST_COACH_ID, category=WorkoutCategory.CARDIO),
            Workout.create_template("Starter", category=WorkoutCategory.STRENGTH),
        ]
        return [workout_repo.add(w) for w in workouts]

    def test_only_visible_workouts_listed(self, use_case, seeded):
        result = use_case.list_workouts(TEST_USER_ID, limit=10)

        assert result.success is True
        names = sorted(w.name for w in result.workouts)
        assert names == ["Coach", "Mine", "Starter"]
        assert result.count == 3
        assert result.total_count == 3

    def test_anonymous_sees_public_workouts(self, use_case, seeded):
        result = use_case.list_workouts(None, limit=10)
        assert sorted(w.name for w in result.workouts) == ["Coach", "Starter"]

    def test_empty_actor_is_anonymous(self, use_case, seeded):
        result = use_case.list_workouts("", limit=10)
        assert sorted(w.name for w in result.workouts) == ["Coach", "Starter"]

    def test_default_limit_from_settings(self, use_case, seeded):
        """test_settings sets the default page size to 2."""
        result = use_case.list_workouts(TEST_USER_ID)

        assert result.count == 2
        assert result.total_count == 3

    def test_filters_passed_through(self, use_case, seeded):
        result = use_case.list_workouts(
            TEST_USER_ID, category=WorkoutCategory.STRENGTH, workout_type=WorkoutType.TEMPLATE
        )
        assert [w.name for w in result.workouts] == ["Starter"]

    def test_inactive_hidden_by_default(self, use_case, workout_repo):
        workout = Workout.create_user_workout("Old", user_id=TEST_USER_ID)
        workout.deactivate()
        workout_repo.add(workout)

        assert use_case.list_workouts(TEST_USER_ID).count == 0
        assert use_case.list_workouts(TEST_USER_ID, active_only=False).count == 1

    def test_hidden_workouts_do_not_shrink_page(self, use_case, workout_repo):
        """Private workouts of others are skipped before the limit is applied."""
        for i in range(5):
            workout_repo.add(Workout.create_user_workout(f"Theirs {i}", user_id=OTHER_USER_ID))
        workout_repo.add(Workout.create_template("A"))
        workout_repo.add(Workout.create_template("B"))

        result = use_case.list_workouts(TEST_USER_ID, limit=2)

        assert sorted(w.name for w in result.workouts) == ["A", "B"]

    def test_more_hidden_workouts_than_max_limit(self, use_case, workout_repo, test_settings):
        """An older visible workout is still found behind a full page of newer private ones."""
        workout_repo.add(
            Workout.create_user_workout("Mine", user_id=TEST_USER_ID, created_at=BASE_TIME)
        )
        for i in range(test_settings.workout_list_max_limit + 1):
            workout_repo.add(
                Workout.create_user_workout(
                    f"Theirs {i}",
                    user_id=OTHER_USER_ID,
                    created_at=BASE_TIME + timedelta(minutes=i + 1),
                )
            )

        result = use_case.list_workouts(TEST_USER_ID)

        assert [w.name for w in result.workouts] == ["Mine"]
        assert result.total_count == 1

    def test_offset_pages_through_visible_workouts(self, use_case, workout_repo):
        for i in range(5):
            workout_repo.add(
                Workout.create_template(f"Template {i}", created_at=BASE_TIME + timedelta(minutes=i))
            )
            workout_repo.add(
                Workout.create_user_workout(
                    f"Theirs {i}",
                    user_id=OTHER_USER_ID,
                    created_at=BASE_TIME + timedelta(minutes=i, seconds=30),
                )
            )

        first = use_case.list_workouts(TEST_USER_ID, limit=2)
        second = use_case.list_workouts(TEST_USER_ID, limit=2, offset=2)
        last = use_case.list_workouts(TEST_USER_ID, limit=2, offset=4)

        assert [w.name for w in first.workouts] == ["Template 4", "Template 3"]
        assert [w.name for w in second.workouts] == ["Template 2", "Template 1"]
        assert [w.name for w in last.workouts] == ["Template 0"]
        assert first.total_count == second.total_count == last.total_count == 5

    def test_search_matches_name_or_description(self, use_case, workout_repo):
        workout_repo.add(Workout.create_template("HIIT Blast"))
        workout_repo.add(Workout.create_template("Yoga Flow", description="Gentle hiit finisher"))
        workout_repo.add(Workout.create_template("Long Run"))
        workout_repo.add(Workout.create_user_workout("Private HIIT", user_id=OTHER_USER_ID))

        result = use_case.list_workouts(TEST_USER_ID, search="  hiit ", limit=10)

        assert sorted(w.name for w in result.workouts) == ["HIIT Blast", "Yoga Flow"]
        assert result.total_count == 2

    def test_blank_search_is_ignored(self, use_case, seeded):
        assert use_case.list_workouts(TEST_USER_ID, search="   ", limit=10).count == 3

    def test_owner_filters(self, use_case, seeded):
        own = use_case.list_workouts(TEST_USER_ID, created_by_user_id=TEST_USER_ID, limit=10)
        coach = use_case.list_workouts(None, created_by_coach_id=TEST_COACH_ID, limit=10)
        other = use_case.list_workouts(TEST_USER_ID, created_by_user_id=OTHER_USER_ID, limit=10)

        assert [w.name for w in own.workouts] == ["Mine"]
        assert [w.name for w in coach.workouts] == ["Coach"]
        assert other.workouts == []

    def test_search_term_too_long(self, use_case):
        result = use_case.list_workouts(TEST_USER_ID, search="x" * 101)

        assert result.success is False
        assert result.error_code == "validation_error"

    def test_negative_offset_rejected(self, use_case):
        result = use_case.list_workouts(TEST_USER_ID, offset=-1)

        assert result.success is False
        assert result.error_code == "validation_error"

    def test_repository_scoped_to_actor(self, test_settings):
        repo = MagicMock()
        repo.list_workouts.return_value = []
        repo.count_workouts.return_value = 0
        use_case = GetWorkoutUseCase(workout_repo=repo, settings=test_settings)

        use_case.list_workouts(TEST_USER_ID, limit=50, offset=4)

        kwargs = repo.list_workouts.call_args.kwargs
        assert kwargs["visible_to"] == TEST_USER_ID
        assert kwargs["limit"] == test_settings.workout_list_max_limit
        assert kwargs["offset"] == 4
        assert repo.count_workouts.call_args.kwargs["visible_to"] == TEST_USER_ID

    def test_repository_failure(self, test_settings):
        repo = MagicMock()
        repo.list_workouts.side_effect = RuntimeError("boom")
        use_case = GetWorkoutUseCase(workout_repo=repo, settings=test_settings)

        result = use_case.list_workouts(TEST_USER_ID)

        assert result.success is False
        assert result.error == "boom"
        assert result.error_code == "internal_error"
