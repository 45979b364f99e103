import signal

import pytest

from minish.signals import (
    SignalState,
    install_exec_handlers,
    install_heredoc_handlers,
    install_prompt_handlers,
)


@pytest.fixture
def restore_signals():
    saved = {s: signal.getsignal(s) for s in (signal.SIGINT, signal.SIGQUIT)}
    yield
    for signum, handler in saved.items():
        signal.signal(signum, handler)


def test_reset_clears_last_signal():
    state = SignalState(last=signal.SIGINT)
    assert state.interrupted
    state.reset()
    assert state.last == 0
    assert not state.interrupted


def test_interrupted_for_exec_status():
    assert SignalState(last=130).interrupted
    assert not SignalState(last=131).interrupted


def test_prompt_handlers_ignore_quit(restore_signals):
    before = signal.getsignal(signal.SIGQUIT)
    previous = install_prompt_handlers(SignalState())
    assert previous[signal.SIGQUIT] == before
    assert signal.getsignal(signal.SIGQUIT) == signal.SIG_IGN


def test_prompt_interrupt_raises_and_records(restore_signals, capsys):
    state = SignalState()
    install_prompt_handlers(state)
    handler = signal.getsignal(signal.SIGINT)
    with pytest.raises(KeyboardInterrupt):
        handler(signal.SIGINT, None)
    assert state.last == signal.SIGINT
    assert capsys.readouterr().out == "\n"


def test_install_returns_previous_handlers(restore_signals):
    before = signal.getsignal(signal.SIGINT)
    previous = install_prompt_handlers(SignalState())
    assert previous[signal.SIGINT] == before
    assert set(previous) == {signal.SIGINT, signal.SIGQUIT}


def test_exec_interrupt_records_130(restore_signals, capsys):
    state = SignalState()
    install_exec_handlers(state)
    handler = signal.getsignal(signal.SIGINT)
    assert handler(signal.SIGINT, None) is None
    assert state.last == 130
    assert capsys.readouterr().err == "\n"


def test_exec_quit_records_131(restore_signals, capsys):
    state = SignalState()
    install_exec_handlers(state)
    signal.getsignal(signal.SIGQUIT)(signal.SIGQUIT, None)
    assert state.last == 131
    assert capsys.readouterr().err == "Quit (core dumped)\n"


def test_heredoc_interrupt_raises(restore_signals):
    state = SignalState()
    previous = install_heredoc_handlers(state)
    assert list(previous) == [signal.SIGINT]
    with pytest.raises(KeyboardInterrupt):
        signal.getsignal(signal.SIGINT)(signal.SIGINT, None)
    assert state.interrupted