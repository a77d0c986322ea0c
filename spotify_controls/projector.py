import asyncio
import logging

from spotify_controls.config import MessagesConfig
from spotify_controls.model import PollResult
from spotify_controls.render import (
    Controls,
    Renderer,
    RenderPayload,
    StatusMessage,
    TrackInfo,
)

logger = logging.getLogger(__name__)


class DisplayProjector:
    """Turn poll results into render payloads.

    Rendering is debounced: a new result replaces the pending one,
    only the last of a burst reaches the renderer.
    """

    def __init__(
        self,
        renderer: Renderer,
        controls: Controls,
        messages: MessagesConfig,
        *,
        debounce: float = 0.1,
    ):
        self._renderer = renderer
        self._controls = controls
        self._messages = messages
        self._debounce = debounce
        self._handle: asyncio.TimerHandle | None = None

    def payload_for(self, result: PollResult) -> RenderPayload:
        if not result.player_running:
            return StatusMessage(self._messages.not_running)
        if not result.title:
            return StatusMessage(self._messages.no_track)
        return TrackInfo(result.title, result.artist, result.art_url)

    def project(self, result: PollResult) -> None:
        payload = self.payload_for(result)
        self.cancel()
        self._handle = asyncio.get_running_loop().call_later(
            self._debounce, self._deliver, payload
        )

    def cancel(self) -> None:
        if self._handle:
            self._handle.cancel()
            self._handle = None

    def _deliver(self, payload: RenderPayload) -> None:
        self._handle = None
        try:
            self._renderer.render(payload, self._controls)
        except Exception:
            logger.exception("could not render %r", payload)
            try:
                self._renderer.render(
                    StatusMessage(self._messages.render_error), self._controls
                )
            except Exception:
                logger.exception("could not render error message")
