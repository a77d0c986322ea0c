import json
import logging
import sys
from typing import TextIO

from spotify_controls.config import WaybarConfig
from spotify_controls.render.interface import (
    Controls,
    Renderer,
    RenderPayload,
    StatusMessage,
    TrackInfo,
)

logger = logging.getLogger(__name__)


class WaybarRenderer(Renderer):
    """Output for a Waybar custom module with `"return-type": "json"`.

    Each render writes one JSON object on its own line. Clicks are configured
    on the Waybar side, controls are not rendered.
    """

    def __init__(self, config: WaybarConfig, stream: TextIO = sys.stdout):
        self._max_length = config.max_length
        self._stream = stream
        self._payload: RenderPayload | None = None
        self._popup_visible = False

    def render(self, payload: RenderPayload, controls: Controls) -> None:
        self._payload = payload
        self._write()

    def set_popup_visible(self, visible: bool) -> None:
        self._popup_visible = visible
        if self._payload:
            self._write()

    def close(self) -> None:
        self._stream.flush()

    def _write(self) -> None:
        match self._payload:
            case TrackInfo(title=title, artist=artist, art_url=art_url):
                text = f"{artist} - {title}" if artist else title
                tooltip = "\n".join(filter(None, (title, artist, art_url)))
                css_class = "playing"
            case StatusMessage(text=text):
                tooltip = text
                css_class = "stopped"
            case _:
                return
        data = {
            "text": truncate(text, self._max_length),
            "tooltip": tooltip,
            "class": css_class,
            "alt": "open" if self._popup_visible else "closed",
        }
        logger.debug("rendering %r", data)
        self._stream.write(json.dumps(data, ensure_ascii=False) + "\n")
        self._stream.flush()


def truncate(text: str, length: int) -> str:
    if len(text) <= length:
        return text
    if length <= 0:
        return ""
    return text[: length - 1] + "…"
