"""
Errors raised by the input and command-line layers. The analysis core itself never raises on input content.
"""

class RandtestError(Exception):
    """Base class for errors reported to the user with exit code 2."""
    pass

class ArgumentError(RandtestError):
    """Raised for a duplicate input file name or an unusable option combination."""
    pass

class FileOpenError(RandtestError):
    """Raised when the named input file cannot be opened for reading."""
    pass

class FileReadError(RandtestError):
    """Raised when reading the input fails part way through the stream."""
    pass
