from typing import ClassVar

import zenconfig
from pydantic import BaseModel, Field


class PlayerConfig(BaseModel):
    # Player name, substituted for `{name}` in commands.
    name: str = "spotify"
    presence_command: str = "pgrep {name}"
    title_command: str = "playerctl -p {name} metadata title"
    artist_command: str = "playerctl -p {name} metadata artist"
    art_url_command: str = "playerctl -p {name} metadata mpris:artUrl"
    play_pause_command: str = "playerctl -p {name} play-pause"
    next_command: str = "playerctl -p {name} next"
    previous_command: str = "playerctl -p {name} previous"
    # Number of seconds after which a command is killed.
    command_timeout: float = 1

    def command(self, template: str) -> str:
        return template.format(name=self.name)


class PollerConfig(BaseModel):
    # Number of seconds between two polls.
    interval: float = 2
    # Number of seconds to wait for more results before rendering.
    debounce: float = 0.1


class MessagesConfig(BaseModel):
    not_running: str = "Spotify not running"
    no_track: str = "No song playing"
    render_error: str = "Error updating menu"


class WaybarConfig(BaseModel):
    # Maximum number of characters of the module text.
    max_length: int = Field(default=40, gt=0)


class SpotifyControlsConfig(BaseModel, zenconfig.Config):
    ENV_PATH: ClassVar[str] = "SPOTIFY_CONTROLS_CONFIG"
    PATH: ClassVar[str] = "~/.config/spotify-controls.json"

    player: PlayerConfig = PlayerConfig()
    poller: PollerConfig = PollerConfig()
    messages: MessagesConfig = MessagesConfig()
    waybar: WaybarConfig = WaybarConfig()
    logging: dict = Field(
        default_factory=lambda: {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "formatter": {
                    "validate": True,
                    "format": "%(asctime)s %(levelname)-5.5s [%(name)s] %(message)s",
                },
            },
            "handlers": {
                # Standard output is used for rendering.
                "console": {
                    "class": "logging.StreamHandler",
                    "formatter": "formatter",
                    "stream": "ext://sys.stderr",
                },
            },
            "root": {
                "level": "INFO",
                "handlers": ["console"],
            },
        }
    )
