import pytest

from spotify_controls.commands import CommandRunner
from spotify_controls.config import PlayerConfig
from spotify_controls.model import CommandOutcome
from spotify_controls.player import Player


@pytest.fixture
def runner(mocker):
    runner = mocker.Mock(spec=CommandRunner)
    runner.run.return_value = CommandOutcome(True, "value\n")
    return runner


@pytest.fixture
def player(runner):
    return Player(runner, PlayerConfig(name="vlc"))


@pytest.mark.parametrize(
    ("query", "command"),
    [
        ("is_running", "pgrep vlc"),
        ("title", "playerctl -p vlc metadata title"),
        ("artist", "playerctl -p vlc metadata artist"),
        ("art_url", "playerctl -p vlc metadata mpris:artUrl"),
    ],
)
async def test_queries(player, runner, query, command):
    assert await getattr(player, query)() == CommandOutcome(True, "value\n")
    runner.run.assert_awaited_once_with(command)


@pytest.mark.parametrize(
    ("control", "command"),
    [
        ("play_pause", "playerctl -p vlc play-pause"),
        ("next", "playerctl -p vlc next"),
        ("previous", "playerctl -p vlc previous"),
    ],
)
def test_controls(player, runner, control, command):
    getattr(player, control)()
    runner.spawn.assert_called_once_with(command)
    runner.run.assert_not_called()
