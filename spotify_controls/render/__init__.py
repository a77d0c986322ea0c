from spotify_controls.render.interface import (
    Controls,
    Renderer,
    RenderPayload,
    StatusMessage,
    TrackInfo,
)
from spotify_controls.render.waybar import WaybarRenderer

__all__ = [
    "Controls",
    "Renderer",
    "RenderPayload",
    "StatusMessage",
    "TrackInfo",
    "WaybarRenderer",
]
