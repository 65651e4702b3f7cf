import sys
from rich.console import Console
from rich.markup import escape, render as render_markup

class Printer:
    """
    Helper for console output (static methods only)
    Messages are rendered by rich then written with the current line ending,
    which becomes CRLF while the terminal is in raw mode
    """
    LF = "\n"
    CRLF = "\r\n"

    console = Console()

    newline = LF
    verbose = False
    debug = False

    @staticmethod
    def escape(m):
        """
        Escape a value for rich
        """
        return escape(str(m))

    @classmethod
    def set_raw(cls, raw):
        """Without output post-processing, '\\n' does not bring the cursor back to column 0"""
        cls.newline = cls.CRLF if raw else cls.LF

    @classmethod
    def _emit(cls, m, end=None, file=None):
        print(cls.format(m), end=cls.newline if end is None else end, file=file or sys.stdout, flush=True)

    @classmethod
    def log(cls, m, end=None):
        cls._emit("[blue bold][>][/blue bold] {}".format(m), end)

    @classmethod
    def msg(cls, m, end=None):
        cls._emit("[green bold][+][/green bold] {}".format(m), end)

    @classmethod
    def err(cls, m, end=None):
        if isinstance(m, Exception):
            cls._emit("[red bold][-][/red bold] [red]{}[/red]: [white]{}[/white]".format(type(m).__name__, cls.escape(m)), end, file=sys.stderr)

        else:
            cls._emit("[red bold][-][/red bold] {}".format(m), end, file=sys.stderr)

    @classmethod
    def dbg(cls, m, end=None):
        if cls.debug:
            cls._emit("[[yellow bold]>[/yellow bold]] {}".format(m), end)

    @classmethod
    def vdbg(cls, m, end=None):
        if cls.verbose:
            cls.dbg(m, end)

    @classmethod
    def vlog(cls, m, end=None):
        if cls.verbose:
            cls.log(m, end)

    @classmethod
    def verr(cls, m, end=None):
        if cls.verbose:
            cls.err(m, end)

    @classmethod
    def format(cls, val):
        """
        Format the value from rich to ANSI Code
        """
        # One line per message, whatever the console width
        options = cls.console.options.update(no_wrap=True, overflow="ignore")
        return cls.console._render_buffer(cls.console.render(render_markup(val), options))[:-1]

    @staticmethod
    def print(val, colorized=True, **kwargs):
        """Print to the terminal, with rich or without"""
        kwargs.setdefault("end", Printer.newline)
        if colorized:
            val = Printer.format(val)

        print(val, flush=True, **kwargs)
