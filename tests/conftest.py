"""
Pytest fixtures for kilo tests.

Terminal tests run against a real pseudo-terminal so termios calls hit
an actual line discipline. Failures are injected with monkeypatch.
"""

import os
import pty
import termios
import threading

import pytest

from kilo.utils.print_utils import Printer
from kilo.utils.term_manager import TerminalContext


@pytest.fixture(autouse=True)
def reset_globals():
    """Printer keeps class-level state between tests."""
    Printer.set_raw(False)
    Printer.verbose = False
    Printer.debug = False
    yield
    Printer.set_raw(False)
    Printer.verbose = False
    Printer.debug = False


@pytest.fixture
def pty_pair():
    """A (master, slave) pseudo-terminal, the slave plays the user's terminal."""
    master, slave = pty.openpty()
    yield master, slave
    os.close(slave)
    os.close(master)


@pytest.fixture
def slave_fd(pty_pair):
    return pty_pair[1]


@pytest.fixture
def master_fd(pty_pair):
    return pty_pair[0]


@pytest.fixture
def context(slave_fd):
    return TerminalContext(slave_fd)


@pytest.fixture
def original_attributes(slave_fd):
    """Attributes of the pseudo-terminal before any test touches it."""
    return termios.tcgetattr(slave_fd)


@pytest.fixture
def type_later(master_fd):
    """
    Type bytes on the terminal once the program had time to go raw.
    Entering raw mode discards pending input, so typing must happen after it.
    """
    timers = []

    def _type(data, delay=0.3):
        timer = threading.Timer(delay, os.write, (master_fd, data))
        timers.append(timer)
        timer.start()
        return timer

    yield _type
    for timer in timers:
        timer.cancel()
        timer.join()


@pytest.fixture
def failing_tcsetattr(monkeypatch):
    """
    Make termios.tcsetattr fail after a number of successful calls.
    Returns the list of recorded calls as (fd, when, attributes).
    """
    real_tcsetattr = termios.tcsetattr
    calls = []

    def _install(successes=0):
        def _tcsetattr(fd, when, attributes):
            calls.append((fd, when, attributes))
            if len(calls) > successes:
                raise termios.error(5, "Input/output error")
            real_tcsetattr(fd, when, attributes)

        monkeypatch.setattr(termios, "tcsetattr", _tcsetattr)
        return calls

    return _install
