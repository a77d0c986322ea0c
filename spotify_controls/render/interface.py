from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Callable


@dataclass(frozen=True)
class StatusMessage:
    text: str


@dataclass(frozen=True)
class TrackInfo:
    title: str
    artist: str = ""
    art_url: str = ""


RenderPayload = StatusMessage | TrackInfo


@dataclass(frozen=True)
class Controls:
    toggle: Callable[[], None]
    next: Callable[[], None]
    previous: Callable[[], None]


class Renderer(ABC):
    @abstractmethod
    def render(self, payload: RenderPayload, controls: Controls) -> None:
        """Rebuild everything visible from the payload."""

    @abstractmethod
    def set_popup_visible(self, visible: bool) -> None: ...
    @abstractmethod
    def close(self) -> None: ...
