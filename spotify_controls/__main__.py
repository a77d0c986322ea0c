import asyncio
import logging.config
import signal
import sys
from typing import Callable

from concurrent_tasks import LoopExceptionHandler

from spotify_controls.applet import Applet
from spotify_controls.config import SpotifyControlsConfig
from spotify_controls.render import Controls, WaybarRenderer

logger = logging.getLogger("spotify_controls")

stop_event = asyncio.Event()


async def stop() -> None:
    logger.debug("stopping...")
    stop_event.set()


def _control_signals(controls: Controls) -> dict[int, Callable[[], None]]:
    # Waybar `on-click` actions can signal the running process, e.g.
    # `pkill -USR1 -f spotify_controls` to play or pause.
    return {
        signal.SIGUSR1: controls.toggle,
        signal.SIGUSR2: controls.next,
        signal.SIGRTMIN + 1: controls.previous,
    }


async def run(cfg: SpotifyControlsConfig) -> None:
    logger.debug("starting...")
    loop = asyncio.get_running_loop()
    for sig in (signal.SIGINT, signal.SIGTERM):
        loop.add_signal_handler(sig, stop_event.set)
    async with LoopExceptionHandler(stop_func=stop):
        async with Applet(cfg, WaybarRenderer(cfg.waybar)) as applet:
            for sig, control in _control_signals(applet.controls).items():
                loop.add_signal_handler(sig, control)
            logger.info("started")
            await stop_event.wait()
    logger.debug("stopped")


def main() -> None:
    cfg = SpotifyControlsConfig.load()
    if "--init-config" in sys.argv:
        cfg.save()
        sys.exit(0)

    logging.config.dictConfig(cfg.logging)
    if "-v" in sys.argv:
        logging.getLogger().setLevel(logging.DEBUG)

    asyncio.run(run(cfg))


if __name__ == "__main__":
    main()
