"""Workout session service.

The in-process boundary the UI talks to. It owns the single active guided
session, consults the coaching helpers, appends logs through the injected log
store and grants badges through the injected achievement store. None of the
session calls raise for invalid use; they are ignored instead.
"""

from dataclasses import dataclass, field

from loguru import logger

from fitgenius.catalog.lookup import ExerciseDetails, ExerciseLookup
from fitgenius.config.settings import Settings
from fitgenius.config.settings import settings as default_settings
from fitgenius.errors import FitGeniusError
from fitgenius.progress.achievements import Achievement, evaluate_achievements
from fitgenius.progress.overload import OverloadSuggestion, suggest_overload
from fitgenius.progress.records import detect_personal_record
from fitgenius.session.announcer import Announcer, SpeechOutput
from fitgenius.session.machine import Clock, SessionStateMachine
from fitgenius.session.scheduler import ManualTickScheduler, TickScheduler
from fitgenius.session.state import SessionState
from fitgenius.session.summary import SessionSummary, summarize_day
from fitgenius.stores.interfaces import AchievementStore, LogStore
from fitgenius.utils.timezone import get_timezone, local_date, now_local
from fitgenius.workouts.types import ExerciseLog, ManualLogEntry, WorkoutExercise, WorkoutPlan, new_exercise_log


@dataclass
class SessionFinishResult:
    logs: list[ExerciseLog] = field(default_factory=list)
    unlocked: list[Achievement] = field(default_factory=list)


@dataclass
class ManualLogResult:
    log: ExerciseLog
    is_new_pr: bool
    message: str | None = None
    unlocked: list[Achievement] = field(default_factory=list)


class WorkoutSessionService:
    def __init__(
        self,
        *,
        log_store: LogStore,
        achievement_store: AchievementStore,
        speech: SpeechOutput | None = None,
        scheduler: TickScheduler | None = None,
        exercise_lookup: ExerciseLookup | None = None,
        settings: Settings | None = None,
        clock: Clock | None = None,
    ) -> None:
        self.settings = settings or default_settings
        self.log_store = log_store
        self.achievement_store = achievement_store
        self.exercise_lookup = exercise_lookup
        self._tz = get_timezone(self.settings.timezone)
        self._clock = clock or (lambda: now_local(self._tz))

        self.announcer = Announcer(speech)
        self.machine = SessionStateMachine(
            scheduler=scheduler or ManualTickScheduler(),
            announcer=self.announcer,
            settings=self.settings,
            clock=self._clock,
            on_exercise_ready=self._refresh_overload_suggestion,
        )
        self.overload_suggestion: OverloadSuggestion | None = None

    # ------------------------------------------------------------------
    # Guided session
    # ------------------------------------------------------------------

    @property
    def active_session(self) -> SessionState | None:
        return self.machine.state

    @property
    def work_seconds(self) -> int:
        return self.machine.work_timer.seconds

    @property
    def rest_seconds_remaining(self) -> int:
        return self.machine.rest_timer.seconds

    def start_session(self, plan: WorkoutPlan, day_index: int) -> SessionState | None:
        """Start a guided session on one day of a plan.

        Any active session is discarded first, saved or not.

        Returns:
            The new session state, or None when the day does not exist or has no exercises
        """
        self.discard_session()
        if not 0 <= day_index < len(plan.days):
            logger.warning("[SESSION] Unknown day index", plan_id=plan.id, day_index=day_index)
            return None
        return self.machine.start(
            plan.days[day_index],
            plan_id=plan.id,
            day_index=day_index,
            duration_minutes=plan.duration_minutes,
        )

    def advance_session(self) -> SessionState | None:
        return self.machine.advance()

    def adjust_rest_timer(self, delta_seconds: int) -> None:
        self.machine.adjust_rest_timer(delta_seconds)

    def toggle_work_timer(self) -> None:
        self.machine.toggle_work_timer()

    def reset_work_timer(self) -> None:
        self.machine.reset_work_timer()

    def finish_session(self, save: bool) -> SessionFinishResult:
        """End the active session, optionally saving the whole day as logs.

        Saved logs are appended before achievements are re-evaluated.
        """
        logs = self.machine.finish(save)
        self.overload_suggestion = None
        if not logs:
            return SessionFinishResult()

        for log in logs:
            self.log_store.append_log(log)
        unlocked = self.evaluate_achievements()
        return SessionFinishResult(logs=logs, unlocked=unlocked)

    def discard_session(self) -> None:
        if self.machine.active:
            self.machine.finish(save=False)
        self.overload_suggestion = None

    def session_summary(self) -> SessionSummary | None:
        if self.machine.day is None:
            return None
        return summarize_day(self.machine.day)

    def _refresh_overload_suggestion(self, exercise: WorkoutExercise) -> None:
        try:
            history = self.log_store.read_all_logs()
        except FitGeniusError as e:
            logger.warning(f"Failed to read history for overload hint on '{exercise.name}': {e}")
            self.overload_suggestion = None
            return
        self.overload_suggestion = suggest_overload(
            exercise.name,
            history,
            increment_kg=self.settings.overload_increment_kg,
            language=self.settings.language,
        )

    # ------------------------------------------------------------------
    # Logs and achievements
    # ------------------------------------------------------------------

    def submit_manual_log(self, entry: ManualLogEntry) -> ManualLogResult:
        """Store a user-entered log, flagging personal records.

        The record check runs against the history before the new log is added.
        """
        history = self.log_store.read_all_logs()
        record = detect_personal_record(entry, history, language=self.settings.language)

        timestamp = self._clock()
        log = new_exercise_log(
            exercise_name=entry.exercise_name,
            sets=entry.sets,
            reps=entry.reps,
            weight=entry.weight,
            duration_minutes=entry.duration_minutes,
            timestamp=timestamp,
            calendar_date=local_date(timestamp, self._tz),
            source="manual",
        )
        self.log_store.append_log(log)
        if record.is_new_pr:
            logger.info("[RECORDS] New personal record", exercise=log.exercise_name, weight=log.weight)

        unlocked = self.evaluate_achievements()
        return ManualLogResult(log=log, is_new_pr=record.is_new_pr, message=record.message, unlocked=unlocked)

    def delete_log(self, log_id: str) -> bool:
        """Remove a log. Badges it helped unlock stay unlocked."""
        return self.log_store.delete_log(log_id)

    def evaluate_achievements(self) -> list[Achievement]:
        unlocked = evaluate_achievements(
            self.log_store.read_all_logs(),
            self.achievement_store.unlocked_badge_ids(),
            now=self._clock(),
            tz=self._tz,
        )
        for achievement in unlocked:
            self.achievement_store.persist_unlocked_badge(achievement)
        return unlocked

    # ------------------------------------------------------------------
    # Exercise guide
    # ------------------------------------------------------------------

    def view_exercise_guide(self, name: str) -> ExerciseDetails | None:
        if self.exercise_lookup is None:
            return None
        try:
            results = self.exercise_lookup.lookup_exercise_details(name, self.settings.language)
        except Exception as e:
            logger.warning(f"Failed to fetch details for '{name}': {e}")
            return None
        if not results:
            logger.info(f"No details found for '{name}'")
            return None
        return results[0]
