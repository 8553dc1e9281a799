from fitgenius.session.announcer import Announcer


class BrokenSpeech:
    def speak(self, text: str) -> None:
        raise RuntimeError("speech synthesis unavailable")

    def cancel(self) -> None:
        pass

    def beep(self) -> None:
        raise OSError("no audio device")


def test_announce_cancels_before_speaking(speech):
    announcer = Announcer(speech)

    announcer.announce("Rest")
    announcer.announce("Set 2")

    assert speech.spoken == ["Rest", "Set 2"]
    assert speech.cancels == 2
    assert announcer.last_announcement == "Set 2"


def test_announcer_without_output_is_noop():
    announcer = Announcer()

    announcer.announce("Rest")
    announcer.chime()

    assert announcer.last_announcement == "Rest"


def test_speech_failures_are_swallowed():
    announcer = Announcer(BrokenSpeech())

    announcer.announce("Start Squat")
    announcer.chime()

    assert announcer.last_announcement == "Start Squat"
