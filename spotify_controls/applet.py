import logging
from contextlib import AsyncExitStack
from dataclasses import dataclass
from typing import Callable, Self

from spotify_controls.commands import CommandRunner
from spotify_controls.config import SpotifyControlsConfig
from spotify_controls.player import Player
from spotify_controls.poller import PollScheduler
from spotify_controls.projector import DisplayProjector
from spotify_controls.render import Controls, Renderer

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Rect:
    x1: float
    y1: float
    x2: float
    y2: float

    def contains(self, x: float, y: float) -> bool:
        return self.x1 <= x <= self.x2 and self.y1 <= y <= self.y2


def _logged(func: Callable[[], None]) -> Callable[[], None]:
    def wrapper() -> None:
        try:
            func()
        except Exception:
            logger.exception("error during teardown")

    return wrapper


class Applet(AsyncExitStack):
    """Panel applet showing what the player is playing.

    Hooks for the host:
    - attach/detach: start polling, tear everything down
    - activate: toggle the popup
    - hover: open the popup
    - outside_interaction: close the popup on interactions outside of it
    """

    def __init__(self, config: SpotifyControlsConfig, renderer: Renderer):
        super().__init__()
        self._renderer = renderer
        self._runner = CommandRunner(config.player.command_timeout)
        self._player = Player(self._runner, config.player)
        self.controls = Controls(
            toggle=self._player.play_pause,
            next=self._player.next,
            previous=self._player.previous,
        )
        self._projector = DisplayProjector(
            renderer,
            self.controls,
            config.messages,
            debounce=config.poller.debounce,
        )
        self._scheduler = PollScheduler(
            self._player,
            self._projector,
            interval=config.poller.interval,
        )
        self._attached = False
        self._popup_visible = False

    @property
    def attached(self) -> bool:
        return self._attached

    @property
    def popup_visible(self) -> bool:
        return self._popup_visible

    async def __aenter__(self) -> Self:
        await self.attach()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.detach()
        return False

    async def attach(self) -> None:
        if self._attached:
            return
        self.callback(_logged(self._renderer.close))
        await self.enter_async_context(self._runner)
        self.callback(_logged(self._projector.cancel))
        self.callback(_logged(self._scheduler.detach))
        self._attached = True
        self._scheduler.attach()
        logger.info("attached")

    async def detach(self) -> None:
        if not self._attached:
            return
        self._attached = False
        self._popup_visible = False
        try:
            await super().__aexit__(None, None, None)
        except Exception:
            logger.exception("error while detaching")
        logger.info("detached")

    def activate(self) -> None:
        self._set_popup_visible(not self._popup_visible)

    def hover(self) -> None:
        self._set_popup_visible(True)

    def outside_interaction(self, x: float, y: float, trigger: Rect, popup: Rect) -> None:
        if (
            self._popup_visible
            and not trigger.contains(x, y)
            and not popup.contains(x, y)
        ):
            self._set_popup_visible(False)

    def _set_popup_visible(self, visible: bool) -> None:
        if not self._attached or visible == self._popup_visible:
            return
        try:
            self._renderer.set_popup_visible(visible)
        except Exception:
            logger.exception("could not %s popup", "open" if visible else "close")
            return
        self._popup_visible = visible
