"""Guided workout session state machine.

Walks a user through one workout day:

    ready --advance--> work --advance--> rest --advance--> work   (more sets)
                                             \\--advance--> ready  (next exercise)
    work --advance--> complete                                     (last set, last exercise)

Rules:
- advance() is the only transition; it is a no-op once complete
- At most one timer runs at a time (work counts up, rest counts down)
- A rest countdown reaching zero chimes but never leaves the rest step
- Calls that do not apply to the current step are ignored
"""

import math
from collections import defaultdict
from collections.abc import Callable
from datetime import datetime

from loguru import logger

from fitgenius.config.settings import Settings
from fitgenius.config.settings import settings as default_settings
from fitgenius.phrases import phrase
from fitgenius.session.announcer import Announcer
from fitgenius.session.scheduler import TickScheduler
from fitgenius.session.state import SessionState, SessionStep
from fitgenius.session.timer import SessionTimer, TimerKind
from fitgenius.utils.timezone import get_timezone, local_date, now_local
from fitgenius.workouts.parsing import parse_target_reps, parse_target_sets
from fitgenius.workouts.types import ExerciseLog, WorkoutDay, WorkoutExercise, new_exercise_log

Clock = Callable[[], datetime]


class SessionStateMachine:
    def __init__(
        self,
        *,
        scheduler: TickScheduler,
        announcer: Announcer | None = None,
        settings: Settings | None = None,
        clock: Clock | None = None,
        on_exercise_ready: Callable[[WorkoutExercise], None] | None = None,
    ) -> None:
        self.settings = settings or default_settings
        self.announcer = announcer or Announcer()
        self._tz = get_timezone(self.settings.timezone)
        self._clock = clock or (lambda: now_local(self._tz))
        self._on_exercise_ready = on_exercise_ready

        interval = self.settings.tick_interval_seconds
        self.work_timer = SessionTimer(TimerKind.COUNT_UP, scheduler, interval=interval)
        self.rest_timer = SessionTimer(
            TimerKind.COUNTDOWN,
            scheduler,
            interval=interval,
            on_expire=self._on_rest_expired,
        )

        self.state: SessionState | None = None
        self.day: WorkoutDay | None = None
        self.day_duration_minutes: int | None = None
        self._work_seconds: dict[int, int] = defaultdict(int)

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def active(self) -> bool:
        return self.state is not None

    @property
    def current_exercise(self) -> WorkoutExercise | None:
        if self.state is None or self.day is None:
            return None
        return self.day.exercises[self.state.exercise_index]

    @property
    def next_exercise(self) -> WorkoutExercise | None:
        if self.state is None or self.day is None:
            return None
        next_index = self.state.exercise_index + 1
        if next_index >= len(self.day.exercises):
            return None
        return self.day.exercises[next_index]

    def target_sets(self, exercise: WorkoutExercise) -> int:
        return parse_target_sets(exercise.sets, self.settings.default_sets)

    def target_reps(self, exercise: WorkoutExercise) -> int:
        return parse_target_reps(exercise.reps, self.settings.default_reps)

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------

    def start(
        self,
        day: WorkoutDay,
        *,
        plan_id: str | None = None,
        day_index: int = 0,
        duration_minutes: int | None = None,
    ) -> SessionState | None:
        """Begin a session on the first exercise of the day.

        Any session already running is discarded first. A day without
        exercises does not start.
        """
        if self.active:
            logger.info("[SESSION] Discarding active session for new start", plan_id=self.state.plan_id)
        self.discard()

        if not day.exercises:
            logger.warning("[SESSION] Cannot start a day without exercises", plan_id=plan_id, day_index=day_index)
            return None

        self.day = day
        self.day_duration_minutes = duration_minutes
        self.state = SessionState(plan_id=plan_id, day_index=day_index)
        logger.info("[SESSION] Started", plan_id=plan_id, day_index=day_index, exercises=len(day.exercises))

        first = day.exercises[0]
        self.announcer.announce(phrase("get_ready", self.settings.language, exercise=first.name))
        self._notify_ready(first)
        return self.state

    def advance(self) -> SessionState | None:
        """Move to the next step in response to the user's "next" action."""
        if self.state is None:
            logger.debug("[SESSION] advance() without an active session")
            return None
        if self.state.step == SessionStep.COMPLETE:
            return self.state

        previous = self.state.step
        if previous == SessionStep.READY:
            self._advance_from_ready()
        elif previous == SessionStep.WORK:
            self._advance_from_work()
        elif previous == SessionStep.REST:
            self._advance_from_rest()

        logger.info(
            "[SESSION] Step transition",
            from_step=str(previous),
            to_step=str(self.state.step),
            exercise_index=self.state.exercise_index,
            current_set=self.state.current_set,
        )
        return self.state

    def _advance_from_ready(self) -> None:
        exercise = self.current_exercise
        self.state = self.state.replace(step=SessionStep.WORK)
        self.work_timer.reset(0)
        self.work_timer.start()
        self.announcer.announce(phrase("start", self.settings.language, exercise=exercise.name))

    def _advance_from_work(self) -> None:
        self._finish_work_interval()
        exercise = self.current_exercise
        if self.state.current_set < self.target_sets(exercise):
            self._enter_rest()
            self.announcer.announce(phrase("rest", self.settings.language))
        elif self.next_exercise is not None:
            self._enter_rest()
            self.announcer.announce(phrase("rest_next_exercise", self.settings.language))
        else:
            self._enter_complete()

    def _advance_from_rest(self) -> None:
        self.rest_timer.stop()
        exercise = self.current_exercise
        if self.state.current_set < self.target_sets(exercise):
            next_set = self.state.current_set + 1
            self.state = self.state.replace(current_set=next_set, step=SessionStep.WORK)
            self.work_timer.reset(0)
            self.work_timer.start()
            self.announcer.announce(phrase("set_number", self.settings.language, number=next_set))
            return

        upcoming = self.next_exercise
        if upcoming is None:
            self._enter_complete()
            return
        self.state = self.state.replace(
            exercise_index=self.state.exercise_index + 1,
            current_set=1,
            step=SessionStep.READY,
        )
        self.announcer.announce(phrase("get_ready", self.settings.language, exercise=upcoming.name))
        self._notify_ready(upcoming)

    def _enter_rest(self) -> None:
        self.state = self.state.replace(step=SessionStep.REST)
        self.rest_timer.reset(self.settings.rest_seconds)
        self.rest_timer.start()

    def _enter_complete(self) -> None:
        self._stop_timers()
        self.state = self.state.replace(step=SessionStep.COMPLETE)
        self.announcer.announce(phrase("workout_complete", self.settings.language))

    def _finish_work_interval(self) -> None:
        self._work_seconds[self.state.exercise_index] += self.work_timer.seconds
        self.work_timer.stop()

    def _on_rest_expired(self) -> None:
        if self.state is None or self.state.step != SessionStep.REST:
            return
        logger.debug("[SESSION] Rest countdown reached zero")
        self.announcer.chime()
        self.announcer.announce(phrase("rest_complete", self.settings.language))

    def _notify_ready(self, exercise: WorkoutExercise) -> None:
        if self._on_exercise_ready is not None:
            self._on_exercise_ready(exercise)

    # ------------------------------------------------------------------
    # Timer controls
    # ------------------------------------------------------------------

    def adjust_rest_timer(self, delta_seconds: int) -> bool:
        if self.state is None or self.state.step != SessionStep.REST:
            logger.debug("[SESSION] Ignoring rest adjustment outside rest", delta=delta_seconds)
            return False
        self.rest_timer.adjust(delta_seconds)
        return True

    def toggle_work_timer(self) -> bool:
        if self.state is None or self.state.step != SessionStep.WORK:
            logger.debug("[SESSION] Ignoring work timer toggle outside work")
            return False
        self.work_timer.toggle()
        return True

    def reset_work_timer(self) -> bool:
        if self.state is None or self.state.step != SessionStep.WORK:
            logger.debug("[SESSION] Ignoring work timer reset outside work")
            return False
        self.work_timer.reset(0)
        return True

    def _stop_timers(self) -> None:
        self.work_timer.stop()
        self.rest_timer.stop()

    # ------------------------------------------------------------------
    # Ending
    # ------------------------------------------------------------------

    def finish(self, save: bool) -> list[ExerciseLog]:
        """End the session, from complete or as an early abort.

        Args:
            save: When True, one completed log is synthesized per exercise of
                the day, including exercises never reached

        Returns:
            Logs to append (empty when discarding or when no session is active)
        """
        if self.state is None:
            logger.debug("[SESSION] finish() without an active session")
            return []

        if self.state.step == SessionStep.WORK:
            self._finish_work_interval()

        logs = self._completion_logs() if save else []
        logger.info(
            "[SESSION] Finished",
            saved=save,
            step=str(self.state.step),
            log_count=len(logs),
        )
        self.discard()
        return logs

    def discard(self) -> None:
        """Drop the session and cancel every pending timer tick."""
        self._stop_timers()
        self.work_timer.reset(0)
        self.rest_timer.reset(0)
        self.state = None
        self.day = None
        self.day_duration_minutes = None
        self._work_seconds = defaultdict(int)

    def _completion_logs(self) -> list[ExerciseLog]:
        exercises = self.day.exercises
        timestamp = self._clock()
        calendar_date = local_date(timestamp, self._tz)
        if self.day_duration_minutes:
            apportioned = math.floor(self.day_duration_minutes / len(exercises))
        else:
            apportioned = self.settings.default_exercise_minutes

        logs = []
        for index, exercise in enumerate(exercises):
            tracked = self._work_seconds.get(index, 0)
            tracked_minutes = round(tracked / 60, 1)
            duration = tracked_minutes if tracked_minutes > 0 else apportioned
            logs.append(
                new_exercise_log(
                    exercise_name=exercise.name,
                    sets=self.target_sets(exercise),
                    reps=self.target_reps(exercise),
                    weight=0.0,
                    duration_minutes=duration,
                    timestamp=timestamp,
                    calendar_date=calendar_date,
                    source="session",
                )
            )
        return logs
