import io
import json

import pytest
from pydantic import ValidationError

from spotify_controls.config import WaybarConfig
from spotify_controls.render import Controls, StatusMessage, TrackInfo, WaybarRenderer
from spotify_controls.render.waybar import truncate


@pytest.fixture
def stream():
    return io.StringIO()


@pytest.fixture
def renderer(stream):
    return WaybarRenderer(WaybarConfig(max_length=20), stream)


@pytest.fixture
def controls(mocker):
    return Controls(toggle=mocker.Mock(), next=mocker.Mock(), previous=mocker.Mock())


def _lines(stream: io.StringIO) -> list[dict]:
    return [json.loads(line) for line in stream.getvalue().splitlines()]


def test_render_track(renderer, stream, controls):
    renderer.render(TrackInfo("Song A", "Artist B", "art://1"), controls)
    assert _lines(stream) == [
        {
            "text": "Artist B - Song A",
            "tooltip": "Song A\nArtist B\nart://1",
            "class": "playing",
            "alt": "closed",
        }
    ]
    controls.toggle.assert_not_called()


def test_render_status(renderer, stream, controls):
    renderer.render(StatusMessage("Spotify not running"), controls)
    renderer.render(TrackInfo("Song A"), controls)
    assert _lines(stream) == [
        {
            "text": "Spotify not running",
            "tooltip": "Spotify not running",
            "class": "stopped",
            "alt": "closed",
        },
        {
            "text": "Song A",
            "tooltip": "Song A",
            "class": "playing",
            "alt": "closed",
        },
    ]


def test_popup(renderer, stream, controls):
    renderer.set_popup_visible(True)
    assert stream.getvalue() == ""
    renderer.render(TrackInfo("Song A"), controls)
    renderer.set_popup_visible(False)
    assert [line["alt"] for line in _lines(stream)] == ["open", "closed"]


@pytest.mark.parametrize(
    ("text", "length", "expected"),
    [
        ("Song A", 10, "Song A"),
        ("Song A", 6, "Song A"),
        ("Artist B - Song A", 10, "Artist B …"),
        ("Pink Floyd - Money", 5, "Pink…"),
    ],
)
def test_truncate(text, length, expected):
    assert truncate(text, length) == expected


def test_truncate_empty():
    assert truncate("Song A", 0) == ""


def test_max_length():
    with pytest.raises(ValidationError):
        WaybarConfig(max_length=0)
