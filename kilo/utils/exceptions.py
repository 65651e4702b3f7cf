class KiloError(Exception):
    """Base class for the errors raised by kilo"""
    pass

class FatalDeviceError(KiloError):
    """
    Error raised when a terminal operation fails and kilo cannot go on
    It keeps the name of the failing operation and the description given by the OS
    """
    def __init__(self, operation, description, errno=None):
        super().__init__(f"{operation}: {description}")
        self.operation = operation
        self.description = description
        self.errno = errno

    @classmethod
    def from_error(cls, operation, exc):
        """
        Build the error from a termios.error or an OSError
        termios.error only carries (errno, strerror) in its args
        """
        if isinstance(exc, OSError):
            return cls(operation, exc.strerror or str(exc), exc.errno)

        if len(exc.args) == 2:
            errno, description = exc.args
            return cls(operation, description, errno)

        return cls(operation, str(exc))
