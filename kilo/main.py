"""Entry point for the program"""
import sys
from rich.traceback import install
from kilo.input_handler.input_loop import InputLoop
from kilo.utils.arg_parser import KiloArgParser
from kilo.utils.exceptions import FatalDeviceError
from kilo.utils.print_utils import Printer
from kilo.utils.term_manager import Term, TerminalContext

class Main:
    """
    Main owns the terminal context of the process
    It puts the terminal in raw mode for the duration of the input loop
    and is the only place turning a fatal error into an exit status
    """
    def __init__(self, fd=None):
        if fd is None:
            fd = sys.stdin.fileno()
        self.context = TerminalContext(fd)
        self.term = Term(self.context)
        self.input_loop = InputLoop(fd)

    def run(self):
        """
        Run the input loop in raw mode and return the exit status
        The terminal is restored when leaving the with block, before any error is shown
        """
        try:
            with self.term:
                Printer.vlog("Press [bold]q[/bold] to quit")
                self.input_loop.run()

        except FatalDeviceError as e:
            Printer.err(e)
            return 1

        return 0


def main(argv=None):
    install(show_locals=True)

    cli = KiloArgParser()
    cli.parse(argv)
    Printer.verbose = cli.verbose
    Printer.debug = cli.debug

    return Main().run()


if __name__ == '__main__':
    sys.exit(main())
