class ZipMethodsException(Exception):
    """Base class for all zipmethods exceptions."""

class UnknownCompression(ZipMethodsException, KeyError):
    """Compression name is not known or not enabled."""

    def __str__(self) -> str:
        # KeyError quotes its argument, keep the message readable.
        return str(self.args[0]) if self.args else ''

class UnsupportedCompression(ZipMethodsException):
    """Compression method can't be handled by current configuration."""

    def __init__(self, method, message: str = ''):
        super().__init__(message or f'Compression method {method} is not supported.')
        self.method = method
