import os
from enum import Enum, auto
from kilo.utils.exceptions import FatalDeviceError
from kilo.utils.print_utils import Printer

class LoopState(Enum):
    Running    = auto()
    Terminated = auto()

def is_control_byte(byte):
    """C0 controls, DEL and C1 controls"""
    return byte < 0x20 or 0x7f <= byte < 0xa0

def describe_byte(byte):
    """
    Render a byte read from the terminal
    Control bytes are shown by their value only, they would move the cursor or worse

    python:
    >>> describe_byte(3)
    '3'
    >>> describe_byte(97)
    "97 ('a')"
    """
    if is_control_byte(byte):
        return str(byte)
    return "{} ('{}')".format(byte, chr(byte))


class InputLoop:
    """
    Read the terminal one byte at a time until the quit key is pressed
    The terminal must already be in raw mode, a read returns b'' when nothing
    was typed before the timeout
    """
    def __init__(self, fd, quit_key=b"q"):
        self.fd = fd
        self.quit_key = quit_key[0]
        self.state = LoopState.Running

    @property
    def is_running(self):
        return self.state is LoopState.Running

    def read_byte(self):
        """
        Recover at most one byte from the terminal
        Would-block and interrupted reads count as an empty read
        """
        try:
            return os.read(self.fd, 1)
        except (BlockingIOError, InterruptedError):
            return b""
        except OSError as e:
            self.state = LoopState.Terminated
            raise FatalDeviceError.from_error("read", e) from e

    def handle_byte(self, byte):
        Printer.print(describe_byte(byte), colorized=False, end=Printer.CRLF)
        if byte == self.quit_key:
            Printer.vdbg("Quit key received")
            self.state = LoopState.Terminated

    def step(self):
        """One iteration of the loop, return the new state"""
        if not self.is_running:
            return self.state

        data = self.read_byte()
        if data:
            self.handle_byte(data[0])

        return self.state

    def run(self):
        while self.step() is LoopState.Running:
            pass
