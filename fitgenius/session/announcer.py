from typing import Protocol

from loguru import logger


class SpeechOutput(Protocol):
    """Host speech/audio capability. Calls are fire-and-forget."""

    def speak(self, text: str) -> None: ...

    def cancel(self) -> None: ...

    def beep(self) -> None: ...


class Announcer:
    """Best-effort voice coach.

    Every announcement cancels whatever is still being spoken so only the
    latest one is audible. Output failures never reach the session.
    """

    def __init__(self, output: SpeechOutput | None = None) -> None:
        self._output = output
        self.last_announcement: str | None = None

    def announce(self, text: str) -> None:
        self.last_announcement = text
        logger.debug("[ANNOUNCE] Speaking", text=text)
        if self._output is None:
            return
        try:
            self._output.cancel()
            self._output.speak(text)
        except Exception as e:
            logger.warning(f"Speech output failed, continuing without audio: {e}")

    def chime(self) -> None:
        if self._output is None:
            return
        try:
            self._output.beep()
        except Exception as e:
            logger.warning(f"Audio chime failed: {e}")
