import pytest

from spotify_controls.config import PlayerConfig, PollerConfig, SpotifyControlsConfig
from spotify_controls.render import Renderer


@pytest.fixture
def renderer(mocker):
    return mocker.Mock(spec=Renderer)


@pytest.fixture
def config():
    # Short delays so that tests run fast, the player is not running.
    return SpotifyControlsConfig(
        player=PlayerConfig(
            presence_command="exit 1",
            command_timeout=0.2,
        ),
        poller=PollerConfig(interval=10, debounce=0.01),
    )
