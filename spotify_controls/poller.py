import asyncio
import logging

from concurrent_tasks import BackgroundTask

from spotify_controls.model import PollResult
from spotify_controls.player import Player
from spotify_controls.projector import DisplayProjector

logger = logging.getLogger(__name__)


class PollScheduler:
    """Poll the player on a fixed delay and hand results to the projector.

    A poll chain queries presence, then title, artist and artwork.
    Only one chain runs at a time, and a chain is not started again before
    the interval has elapsed since the previous start, whoever calls `tick`.
    The timer is re-armed on every tick so polling never stalls.
    """

    def __init__(
        self,
        player: Player,
        projector: DisplayProjector,
        *,
        interval: float = 2,
    ):
        self._player = player
        self._projector = projector
        self._interval = interval
        self._chain = BackgroundTask(self._poll)
        self._timer: asyncio.TimerHandle | None = None
        self._in_flight = False
        self._last_poll = float("-inf")
        self._attached = False

    @property
    def in_flight(self) -> bool:
        return self._in_flight

    def attach(self) -> None:
        if self._attached:
            return
        logger.debug("started polling every %ss", self._interval)
        self._attached = True
        self.tick()

    def detach(self) -> None:
        self._attached = False
        if self._timer:
            self._timer.cancel()
            self._timer = None
        self._chain.cancel()

    def tick(self) -> None:
        if not self._attached:
            return
        try:
            self._start()
        except Exception:
            logger.exception("could not start polling")
            self._in_flight = False
            self._projector.project(PollResult())
        finally:
            self._rearm()

    def _start(self) -> None:
        now = asyncio.get_running_loop().time()
        if self._in_flight or now - self._last_poll < self._interval:
            logger.debug("skipping poll")
            return
        self._in_flight = True
        self._last_poll = now
        self._chain.create()

    def _rearm(self) -> None:
        if self._timer:
            self._timer.cancel()
        self._timer = asyncio.get_running_loop().call_later(
            self._interval, self.tick
        )

    async def _poll(self) -> None:
        try:
            try:
                result = await self._query()
            except Exception:
                logger.exception("error while polling")
                result = PollResult()
            if self._attached:
                self._projector.project(result)
        finally:
            self._in_flight = False

    async def _query(self) -> PollResult:
        presence = await self._player.is_running()
        if not presence.text:
            logger.debug("player is not running")
            return PollResult()
        title = await self._player.title()
        if not title.text:
            logger.debug("nothing playing")
            return PollResult(player_running=True)
        artist = await self._player.artist()
        art_url = await self._player.art_url()
        result = PollResult(
            player_running=True,
            title=title.text,
            artist=artist.text,
            art_url=art_url.text,
        )
        logger.debug("now playing %r", result)
        return result
