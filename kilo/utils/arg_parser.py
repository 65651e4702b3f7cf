"""
Usage with cli

```python
>>> from kilo.utils.arg_parser import KiloArgParser
>>> parser = KiloArgParser()
>>> parser.parse(["-v"])
>>> parser.verbose
True
>>> parser.debug
False
```
"""
import argparse

class KiloArgParser:
    """
    Class that allows the parsing of the kilo command line
    """
    def __init__(self):
        self._parsed = None
        self._parser = argparse.ArgumentParser(prog="kilo", description="Read the terminal in raw mode, one byte at a time, until 'q' is pressed")
        self._parser.add_argument('-v', '--verbose', action="store_true", help="Show verbose diagnostics")
        self._parser.add_argument('-d', '--debug', action="store_true", help="Show debug diagnostics")

    @property
    def parser(self):
        return self._parser

    @property
    def parsed(self):
        return self._parsed

    def parse(self, argv=None):
        """Parse argument from sys.argv or from a list"""
        self._parsed = self._parser.parse_args(argv)

    def __getattr__(self, var):
        """Wrapper to access easily variable inside the parsed variables"""
        if var.startswith("_"):
            raise AttributeError(var)
        if self._parsed is not None:
            return getattr(self._parsed, var)
        return None
