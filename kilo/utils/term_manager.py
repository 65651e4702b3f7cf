"""Module helping for setting terminal in other mode"""
import termios
from typing import NamedTuple, Tuple
from kilo.utils.exceptions import KiloError, FatalDeviceError
from kilo.utils.print_utils import Printer

# Indexes of the list returned by termios.tcgetattr
IFLAG, OFLAG, CFLAG, LFLAG, ISPEED, OSPEED, CC = range(7)

class TerminalModeSnapshot(NamedTuple):
    """
    Attributes of the terminal at the moment kilo started
    Immutable, so it can be applied back exactly as it was read
    """
    iflag: int
    oflag: int
    cflag: int
    lflag: int
    ispeed: int
    ospeed: int
    cc: Tuple

    @classmethod
    def from_attributes(cls, attributes):
        """Build a snapshot from the list returned by termios.tcgetattr"""
        iflag, oflag, cflag, lflag, ispeed, ospeed, cc = attributes
        return cls(iflag, oflag, cflag, lflag, ispeed, ospeed, tuple(cc))

    def to_attributes(self):
        """Return a fresh list in the format expected by termios.tcsetattr"""
        return [self.iflag, self.oflag, self.cflag, self.lflag, self.ispeed, self.ospeed, list(self.cc)]


class TerminalContext:
    """
    Holds the terminal descriptor and its original attributes
    One context is created per process, the snapshot is taken once
    and only read back when restoring
    """

    def __init__(self, fd):
        self.fd = fd
        self._snapshot = None

    @property
    def is_captured(self):
        return self._snapshot is not None

    @property
    def snapshot(self):
        if self._snapshot is None:
            raise KiloError("The terminal attributes have not been captured yet")
        return self._snapshot

    def capture(self):
        """Save the initial flags of the terminal, only the first call queries the device"""
        if self._snapshot is None:
            try:
                attributes = termios.tcgetattr(self.fd)
            except termios.error as e:
                raise FatalDeviceError.from_error("tcgetattr", e) from e

            self._snapshot = TerminalModeSnapshot.from_attributes(attributes)
            Printer.vdbg(f"Terminal attributes saved for fd {self.fd}")

        return self._snapshot


class Term:
    """
    Class allowing to switch the terminal between raw and cooked mode

    ```python
    >>> with Term(TerminalContext(sys.stdin.fileno())):
    ...     os.read(sys.stdin.fileno(), 1) # b'' after 100ms without input
    ```
    """

    # A read returns as soon as one byte is there, or empty after 100ms
    MIN_BYTES = 0
    READ_TIMEOUT_DS = 1

    def __init__(self, context):
        self.context = context

    def raw_attributes(self):
        """
        Compute the raw mode attributes from the snapshot, equivalent to stty raw -echo
        """
        raw = self.context.snapshot.to_attributes()
        raw[IFLAG] &= ~(termios.BRKINT | termios.ICRNL | termios.INPCK | termios.ISTRIP | termios.IXON)
        raw[OFLAG] &= ~termios.OPOST
        raw[CFLAG] |= termios.CS8
        raw[LFLAG] &= ~(termios.ECHO | termios.ICANON | termios.IEXTEN | termios.ISIG)
        raw[CC][termios.VMIN] = self.MIN_BYTES
        raw[CC][termios.VTIME] = self.READ_TIMEOUT_DS
        return raw

    def _apply(self, attributes):
        # TCSAFLUSH: pending output is written and unread input is discarded
        try:
            termios.tcsetattr(self.context.fd, termios.TCSAFLUSH, attributes)
        except termios.error as e:
            raise FatalDeviceError.from_error("tcsetattr", e) from e

    def enter_raw_mode(self):
        """Set the terminal in raw mode"""
        self.context.capture()
        try:
            self._apply(self.raw_attributes())
        except FatalDeviceError:
            # The device may have taken part of the attributes
            try:
                self.restore()
            except FatalDeviceError as restore_error:
                Printer.verr(restore_error)
            raise

        Printer.set_raw(True)
        Printer.vdbg(f"Raw mode enabled (VMIN={self.MIN_BYTES}, VTIME={self.READ_TIMEOUT_DS})")

    def restore(self):
        """Reset the terminal with all the previous flags"""
        if not self.context.is_captured:
            return

        Printer.set_raw(False)
        self._apply(self.context.snapshot.to_attributes())
        Printer.vdbg("Terminal attributes restored")

    def __enter__(self):
        self.enter_raw_mode()
        return self

    def __exit__(self, exc_type, exc, tb):
        self.restore()
        return False
