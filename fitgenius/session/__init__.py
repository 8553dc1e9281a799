"""Session module - guided workout runner.

This module provides:
- The session state machine and its immutable state snapshots
- Work/rest timers on pluggable tick schedulers
- Best-effort voice announcements
- The service facade used by the UI
"""

from fitgenius.session.announcer import Announcer, SpeechOutput
from fitgenius.session.machine import SessionStateMachine
from fitgenius.session.scheduler import AsyncioTickScheduler, ManualTickScheduler, TickHandle, TickScheduler
from fitgenius.session.service import ManualLogResult, SessionFinishResult, WorkoutSessionService
from fitgenius.session.state import SessionState, SessionStep
from fitgenius.session.summary import SessionSummary, summarize_day
from fitgenius.session.timer import SessionTimer, TimerKind

__all__ = [
    "Announcer",
    "AsyncioTickScheduler",
    "ManualLogResult",
    "ManualTickScheduler",
    "SessionFinishResult",
    "SessionState",
    "SessionStateMachine",
    "SessionStep",
    "SessionSummary",
    "SessionTimer",
    "SpeechOutput",
    "TickHandle",
    "TickScheduler",
    "TimerKind",
    "WorkoutSessionService",
    "summarize_day",
]
