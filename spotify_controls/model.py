from dataclasses import dataclass


@dataclass(frozen=True)
class CommandOutcome:
    succeeded: bool
    output: str | None = None

    @property
    def text(self) -> str:
        """Stripped output, empty if the command failed."""
        if not self.succeeded or self.output is None:
            return ""
        return self.output.strip()


@dataclass(kw_only=True, frozen=True)
class PollResult:
    """Outcome of one poll chain.

    When the player is not running, every other field is left empty.
    A running player with no title means nothing is playing.
    """

    player_running: bool = False
    title: str | None = None
    artist: str = ""
    art_url: str = ""
