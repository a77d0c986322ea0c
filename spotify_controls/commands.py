import asyncio
import logging
from contextlib import AsyncExitStack
from typing import Callable, Self

from concurrent_tasks import TaskPool

from spotify_controls.model import CommandOutcome

logger = logging.getLogger(__name__)

_FAILED = CommandOutcome(False)


class CommandRunner(AsyncExitStack):
    """Run shell commands bounded by a watchdog timeout.

    Every running process is tracked so that it can be killed on shutdown.
    Failures never propagate: spawn errors, non-zero exit codes and timeouts
    all resolve to a failed outcome.
    """

    def __init__(self, timeout: float = 1):
        super().__init__()
        self._timeout = timeout
        self._processes: set[asyncio.subprocess.Process] = set()
        # Controls are run one at a time in the background.
        self._pool = TaskPool(size=1, timeout=timeout * 2)
        self._open = False

    async def __aenter__(self) -> Self:
        await self.enter_async_context(self._pool)
        self.callback(self._close)
        self.callback(self.shutdown)
        self._open = True
        return self

    def _close(self) -> None:
        self._open = False

    async def run(self, command: str) -> CommandOutcome:
        try:
            process = await asyncio.create_subprocess_shell(
                command,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
        except Exception as e:
            logger.warning("could not run %r: %r", command, e)
            return _FAILED
        self._processes.add(process)
        try:
            stdout, stderr = await asyncio.wait_for(
                process.communicate(), self._timeout
            )
        except TimeoutError:
            logger.warning("%r timed out after %ss", command, self._timeout)
            self._kill(process)
            return _FAILED
        except asyncio.CancelledError:
            self._kill(process)
            raise
        except Exception as e:
            logger.warning("error while running %r: %r", command, e)
            self._kill(process)
            return _FAILED
        finally:
            self._processes.discard(process)
        if process.returncode != 0:
            logger.debug(
                "%r exited with %s: %s",
                command,
                process.returncode,
                stderr.decode("utf-8", "replace").strip(),
            )
            return _FAILED
        return CommandOutcome(True, stdout.decode("utf-8", "replace"))

    def spawn(
        self,
        command: str,
        on_done: Callable[[CommandOutcome], None] | None = None,
    ) -> None:
        """Run a command in the background, `on_done` receives the outcome."""
        if not self._open:
            logger.warning("runner is closed, not running %r", command)
            if on_done:
                on_done(_FAILED)
            return
        self._pool.create_task(self._run_and_notify(command, on_done))

    async def _run_and_notify(
        self,
        command: str,
        on_done: Callable[[CommandOutcome], None] | None,
    ) -> None:
        outcome = await self.run(command)
        if on_done:
            try:
                on_done(outcome)
            except Exception:
                logger.exception("error handling outcome of %r", command)

    def shutdown(self) -> None:
        """Kill all running processes."""
        if self._processes:
            logger.debug("killing %d running process(es)", len(self._processes))
        for process in self._processes:
            self._kill(process)
        self._processes.clear()

    @staticmethod
    def _kill(process: asyncio.subprocess.Process) -> None:
        if process.returncode is not None:
            return
        try:
            process.kill()
        except OSError as e:
            logger.debug("could not kill process %s: %r", process.pid, e)
