"""
Unit tests for ScheduleStore.

Tests for:
- add/update/remove/reset_day/clear_week semantics
- Copy-on-write snapshots (previous values never change)
- No-op handling for unknown day and plan ids
- Listener notification and stats memoization
"""

import pytest
from pydantic import ValidationError

from application.services import ScheduleStore
from backend.core.seed_template import build_seed
from domain.models import Intensity, PlannedWorkoutPatch


@pytest.fixture
def sprint(catalog):
    return catalog.lookup("wrk-sprint-intervals")


@pytest.mark.unit
class TestInitialState:
    """Tests for the store's starting value."""

    def test_starts_from_seed(self, store, catalog):
        assert store.schedule == build_seed(catalog)

    def test_accepts_initial_schedule(self, catalog):
        initial = build_seed(catalog)
        assert ScheduleStore(catalog, initial=initial).schedule is initial

    def test_day_lookup(self, store):
        assert store.day("wed").focus == "Active Recovery"
        assert store.day("xyz") is None


@pytest.mark.unit
class TestAddWorkout:
    """Tests for add_workout()."""

    def test_appends_with_catalog_defaults(self, store, sprint):
        plan = store.add_workout("sun", sprint)

        assert plan is not None
        assert plan.workout_id == "wrk-sprint-intervals"
        assert plan.duration == 25
        assert plan.intensity == Intensity.MODERATE
        assert plan.sets is None
        assert plan.reps is None
        assert plan.interval == "30s sprint / 90s walk"
        assert plan.notes is None
        assert store.schedule["sun"].workouts[-1] == plan
        assert store.schedule["sun"].session_count == 2

    def test_id_uses_day_workout_and_clock(self, store, sprint):
        plan = store.add_workout("sun", sprint)
        assert plan.id == "sun-wrk-sprint-intervals-1700000000000"

    def test_ids_unique_when_clock_stalls(self, catalog, sprint):
        store = ScheduleStore(catalog, clock=lambda: 1.0)
        first = store.add_workout("sun", sprint)
        second = store.add_workout("sun", sprint)

        assert first.id != second.id
        assert len(set(store.schedule["sun"].plan_ids)) == 3

    def test_id_skips_existing_ids(self, catalog, sprint):
        # Clock reading 0.001s would produce the seeded ordinal-style id "...-1"
        seeded = build_seed(catalog)
        taken = seeded["sun"].with_workout(
            seeded["sun"].workouts[0].model_copy(update={"id": "sun-wrk-sprint-intervals-1"})
        )
        store = ScheduleStore(catalog, initial=seeded.with_day(taken), clock=lambda: 0.001)

        plan = store.add_workout("sun", sprint)
        assert plan.id == "sun-wrk-sprint-intervals-2"

    def test_unknown_day_is_noop(self, store, sprint):
        before = store.schedule
        assert store.add_workout("xyz", sprint) is None
        assert store.schedule is before

    def test_previous_snapshot_unchanged(self, store, sprint):
        before = store.schedule
        store.add_workout("sun", sprint)

        assert before["sun"].session_count == 1
        assert store.schedule is not before
        assert store.schedule["mon"] is before["mon"]

    def test_add_then_remove_restores_day(self, store, sprint):
        before = store.schedule["sun"].workouts
        plan = store.add_workout("sun", sprint)
        store.remove_workout("sun", plan.id)
        assert store.schedule["sun"].workouts == before


@pytest.mark.unit
class TestUpdateWorkout:
    """Tests for update_workout()."""

    def test_patches_only_provided_fields(self, store):
        store.update_workout("mon", "mon-wrk-bench-press-1", {"sets": 5, "notes": "Pause reps"})
        plan = store.schedule["mon"].find("mon-wrk-bench-press-1")

        assert plan.sets == 5
        assert plan.notes == "Pause reps"
        assert plan.reps == 6
        assert plan.intensity == Intensity.POWER

    def test_accepts_patch_model(self, store):
        store.update_workout(
            "wed", "wed-wrk-yoga-flow-1", PlannedWorkoutPatch(intensity="Power", duration=40)
        )
        plan = store.schedule["wed"].find("wed-wrk-yoga-flow-1")
        assert plan.intensity == Intensity.POWER
        assert plan.duration == 40

    def test_unknown_plan_is_noop(self, store):
        before = store.schedule
        result = store.update_workout("mon", "missing", {"sets": 9})
        assert result is before
        assert store.schedule == build_seed(store.catalog)

    def test_unknown_day_is_noop(self, store):
        before = store.schedule
        assert store.update_workout("xyz", "mon-wrk-bench-press-1", {"sets": 9}) is before

    def test_unknown_target_ignores_invalid_patch(self, store):
        before = store.schedule
        assert store.update_workout("mon", "missing", {"sets": -1}) is before
        assert store.update_workout("xyz", "mon-wrk-bench-press-1", {"bogus": 1}) is before

    def test_idempotent_under_repetition(self, store):
        first = store.update_workout("tue", "tue-wrk-deadlift-1", {"reps": 3})
        second = store.update_workout("tue", "tue-wrk-deadlift-1", {"reps": 3})
        assert first == second
        assert second is first

    def test_previous_snapshot_unchanged(self, store):
        before = store.schedule
        store.update_workout("mon", "mon-wrk-bench-press-1", {"sets": 8})
        assert before["mon"].find("mon-wrk-bench-press-1").sets == 4

    def test_invalid_patch_raises(self, store):
        with pytest.raises(ValidationError):
            store.update_workout("mon", "mon-wrk-bench-press-1", {"duration": -1})
        with pytest.raises(ValidationError):
            store.update_workout("mon", "mon-wrk-bench-press-1", {"workoutId": "wrk-deadlift"})


@pytest.mark.unit
class TestRemoveResetClear:
    """Tests for remove_workout(), reset_day() and clear_week()."""

    def test_remove(self, store):
        store.remove_workout("mon", "mon-wrk-dumbbell-shoulder-press-2")
        assert store.schedule["mon"].plan_ids == [
            "mon-wrk-bench-press-1",
            "mon-wrk-core-ladder-3",
        ]

    def test_remove_unknown_is_noop(self, store):
        before = store.schedule
        assert store.remove_workout("mon", "missing") is before
        assert store.remove_workout("xyz", "mon-wrk-bench-press-1") is before

    def test_reset_day_restores_seed_day_only(self, store, catalog, sprint):
        store.add_workout("wed", sprint)
        store.update_workout("wed", "wed-wrk-yoga-flow-1", {"duration": 10})
        store.remove_workout("mon", "mon-wrk-bench-press-1")

        store.reset_day("wed")

        seed = build_seed(catalog)
        assert store.schedule["wed"] == seed["wed"]
        assert store.schedule["mon"].plan_ids == [
            "mon-wrk-dumbbell-shoulder-press-2",
            "mon-wrk-core-ladder-3",
        ]

    def test_reset_unknown_day_is_noop(self, store):
        before = store.schedule
        assert store.reset_day("xyz") is before

    def test_clear_week(self, store, catalog, sprint):
        store.add_workout("sat", sprint)
        store.remove_workout("tue", "tue-wrk-deadlift-1")

        assert store.clear_week() == build_seed(catalog)
        assert store.schedule == build_seed(catalog)

    def test_orphaned_entries_survive_until_removed(self, catalog):
        from backend.core.catalog import WorkoutCatalog

        seeded = build_seed(catalog)
        smaller = WorkoutCatalog(w for w in catalog.all() if w.id != "wrk-soft-tissue")
        store = ScheduleStore(smaller, initial=seeded)

        assert smaller.orphans(store.schedule["sun"])
        store.update_workout("sun", "sun-wrk-soft-tissue-1", {"notes": "still here"})
        assert store.schedule["sun"].find("sun-wrk-soft-tissue-1").notes == "still here"

        store.remove_workout("sun", "sun-wrk-soft-tissue-1")
        assert store.schedule["sun"].is_rest_day


@pytest.mark.unit
class TestListenersAndStats:
    """Tests for change notification and memoized stats."""

    def test_listener_receives_each_new_schedule(self, store, sprint):
        seen = []
        store.subscribe(seen.append)

        store.add_workout("sun", sprint)
        store.update_workout("mon", "mon-wrk-bench-press-1", {"reps": 5})

        assert len(seen) == 2
        assert seen[-1] is store.schedule
        assert seen[0] is not seen[1]

    def test_noops_do_not_notify(self, store):
        seen = []
        store.subscribe(seen.append)

        store.update_workout("mon", "missing", {"sets": 1})
        store.remove_workout("mon", "missing")
        store.reset_day("mon")
        store.clear_week()

        assert seen == []

    def test_unsubscribe(self, store, sprint):
        seen = []
        unsubscribe = store.subscribe(seen.append)
        unsubscribe()
        unsubscribe()

        store.add_workout("sun", sprint)
        assert seen == []

    def test_load_notifies(self, store, catalog, sprint):
        other = ScheduleStore(catalog, clock=lambda: 5.0)
        other.add_workout("fri", sprint)

        seen = []
        store.subscribe(seen.append)
        store.load(other.schedule)

        assert store.schedule is other.schedule
        assert seen == [other.schedule]

    def test_week_stats_memoized_per_schedule(self, store, sprint):
        first = store.week_stats()
        assert store.week_stats() is first
        assert first.sessions == 12

        store.add_workout("sun", sprint)
        second = store.week_stats()
        assert second is not first
        assert second.sessions == 13
        assert second.minutes == first.minutes + 25

    def test_day_stats(self, store):
        assert store.day_stats("mon").total_duration == 53
        assert store.day_stats("xyz") is None
