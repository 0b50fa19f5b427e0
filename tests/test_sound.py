import io
import subprocess
import wave

from wheeltimer.services import sound


def test_beep_falls_back_to_terminal_bell(monkeypatch, capsys):
    monkeypatch.setattr(sound, "which", lambda _name: None)
    assert sound.find_player() is None
    assert sound.play_beep() is False
    assert capsys.readouterr().out == "\a"


def test_first_available_player_wins(monkeypatch):
    monkeypatch.setattr(sound, "which", lambda name: f"/usr/bin/{name}" if name != "aplay" else None)
    assert sound.find_player() == ["/usr/bin/paplay"]


def test_beep_pipes_tone_to_player(monkeypatch):
    calls = []

    def fake_run(cmd, input, check, timeout):
        calls.append((cmd, input))

    monkeypatch.setattr(sound, "which", lambda name: f"/usr/bin/{name}")
    monkeypatch.setattr(sound.subprocess, "run", fake_run)

    assert sound.play_beep(duration_ms=50) is True
    (cmd, payload), = calls
    assert cmd == ["/usr/bin/aplay", "-q", "-"]
    assert payload[:4] == b"RIFF"


def test_failing_player_rings_bell(monkeypatch, capsys):
    def fake_run(cmd, **_kwargs):
        raise subprocess.CalledProcessError(1, cmd)

    monkeypatch.setattr(sound, "which", lambda name: f"/usr/bin/{name}")
    monkeypatch.setattr(sound.subprocess, "run", fake_run)

    assert sound.play_beep() is False
    assert capsys.readouterr().out == "\a"


def test_tone_wav_length():
    with wave.open(io.BytesIO(sound.tone_wav(440, 100)), "rb") as wav_file:
        assert wav_file.getnframes() == sound.SAMPLE_RATE // 10
        assert wav_file.getframerate() == sound.SAMPLE_RATE
        assert wav_file.getsampwidth() == 2
