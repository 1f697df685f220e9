import logging

from conftest import RecordingBackgroundHost

from theme_engine.design.background import BackgroundKind, classify_background, show_background


def test_classification():
    assert classify_background("assets/bg.webm").kind == BackgroundKind.MOTION
    assert classify_background("clip.mp4").is_motion
    assert classify_background("data:video/webm;base64,AAA").is_motion
    assert classify_background("assets/bg.jpg").kind == BackgroundKind.IMAGE
    assert classify_background("data:image/png;base64,AAA").kind == BackgroundKind.IMAGE
    none = classify_background("")
    assert none.kind == BackgroundKind.NONE and none.value is None
    assert classify_background("none").kind == BackgroundKind.NONE


def test_show_background_contains_host_failures(caplog):
    class Broken:
        def show_background(self, reference):
            raise OSError("codec missing")

    host = RecordingBackgroundHost()
    ref = classify_background("a.webm")
    assert show_background(host, ref)
    assert host.shown == [ref]
    assert not show_background(None, ref)
    with caplog.at_level(logging.WARNING):
        assert not show_background(Broken(), ref)
    assert "codec missing" in caplog.text
