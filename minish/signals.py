"""Signal handling for the prompt, running commands and here-documents."""

import signal
import sys
from dataclasses import dataclass
from typing import Callable, Dict

INTERRUPTED_STATUS = 130
QUIT_STATUS = 131


@dataclass
class SignalState:
    """The last signal the shell reacted to; 0 when none since the last reset."""

    last: int = 0

    @property
    def interrupted(self) -> bool:
        """True if an interrupt was received at the prompt or while running."""
        return self.last in (signal.SIGINT, INTERRUPTED_STATUS)

    def reset(self) -> None:
        """Forget the last signal."""
        self.last = 0


def _install(handlers: Dict[int, object]) -> Dict[int, object]:
    return {signum: signal.signal(signum, handler) for signum, handler in handlers.items()}


def _write(stream, text: str) -> None:
    stream.write(text)
    stream.flush()


def install_prompt_handlers(state: SignalState) -> Dict[int, object]:
    """Handlers for waiting at the prompt.

    An interrupt records SIGINT, moves to a new line and raises
    KeyboardInterrupt so the prompt starts over; quit is ignored.
    Returns the handlers that were replaced.
    """

    def on_interrupt(signum: int, frame: object) -> None:
        state.last = signal.SIGINT
        _write(sys.stdout, "\n")
        raise KeyboardInterrupt

    return _install({signal.SIGQUIT: signal.SIG_IGN, signal.SIGINT: on_interrupt})


def install_exec_handlers(state: SignalState) -> Dict[int, object]:
    """Handlers while commands run: note the signal and keep waiting for the children.

    Returns the handlers that were replaced.
    """

    def on_interrupt(signum: int, frame: object) -> None:
        state.last = INTERRUPTED_STATUS
        _write(sys.stderr, "\n")

    def on_quit(signum: int, frame: object) -> None:
        state.last = QUIT_STATUS
        _write(sys.stderr, "Quit (core dumped)\n")

    handlers: Dict[int, Callable] = {signal.SIGQUIT: on_quit, signal.SIGINT: on_interrupt}
    return _install(handlers)


def install_heredoc_handlers(state: SignalState) -> Dict[int, object]:
    """Handlers while a here-document is read: an interrupt records SIGINT
    and raises KeyboardInterrupt to abandon it. Returns the replaced handlers."""

    def on_interrupt(signum: int, frame: object) -> None:
        state.last = signal.SIGINT
        raise KeyboardInterrupt

    return _install({signal.SIGINT: on_interrupt})