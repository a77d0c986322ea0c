from spotify_controls.commands import CommandRunner
from spotify_controls.config import PlayerConfig
from spotify_controls.model import CommandOutcome


class Player:
    """Query and control the media player through shell commands."""

    def __init__(self, runner: CommandRunner, config: PlayerConfig):
        self._runner = runner
        self._presence = config.command(config.presence_command)
        self._title = config.command(config.title_command)
        self._artist = config.command(config.artist_command)
        self._art_url = config.command(config.art_url_command)
        self._play_pause = config.command(config.play_pause_command)
        self._next = config.command(config.next_command)
        self._previous = config.command(config.previous_command)

    async def is_running(self) -> CommandOutcome:
        return await self._runner.run(self._presence)

    async def title(self) -> CommandOutcome:
        return await self._runner.run(self._title)

    async def artist(self) -> CommandOutcome:
        return await self._runner.run(self._artist)

    async def art_url(self) -> CommandOutcome:
        return await self._runner.run(self._art_url)

    def play_pause(self) -> None:
        self._runner.spawn(self._play_pause)

    def next(self) -> None:
        self._runner.spawn(self._next)

    def previous(self) -> None:
        self._runner.spawn(self._previous)
