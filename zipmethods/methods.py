from dataclasses import dataclass
from typing import ClassVar, Optional

from .compressions import *
from .exceptions import UnknownCompression, UnsupportedCompression
from .features import Features


@dataclass(frozen=True)
class CompressionMethod:
    """Compression method of a zip entry.

    Use one of the subclasses, the base class is never returned by the codec.
    Every value has ``code`` (wire code stored in the zip headers) and ``name``
    (name from the compressions table, None if method is unsupported).

    ``str()`` of a method is the same as its ``repr()``.
    """

    name: ClassVar[Optional[str]] = None

    def __str__(self) -> str:
        return repr(self)


@dataclass(frozen=True)
class Stored(CompressionMethod):
    """The file is stored (no compression)."""

    name: ClassVar[str] = STORED
    code: ClassVar[int] = COMPRESSION_FROM_STR[STORED]


@dataclass(frozen=True)
class Deflated(CompressionMethod):
    """File is compressed using DEFLATE algorythm."""

    name: ClassVar[str] = DEFLATE
    code: ClassVar[int] = COMPRESSION_FROM_STR[DEFLATE]


@dataclass(frozen=True)
class Bzip2(CompressionMethod):
    """File is compressed using BZIP2 algorythm."""

    name: ClassVar[str] = BZIP
    code: ClassVar[int] = COMPRESSION_FROM_STR[BZIP]


@dataclass(frozen=True)
class Unsupported(CompressionMethod):
    """Compression method that isn't known to the codec. Keeps original ``code``."""

    code: int

    def __post_init__(self) -> None:
        check_code(self.code)


VARIANTS: dict[str, type[CompressionMethod]] = {
    STORED: Stored,
    DEFLATE: Deflated,
    BZIP: Bzip2
}


def check_code(code: int) -> None:
    """Make sure ``code`` fits into the 2 bytes of the compression method field."""

    if not isinstance(code, int) or isinstance(code, bool):
        raise TypeError(f'Expected int, not {type(code).__name__}.')
    if not 0 <= code <= CODE_MAX:
        raise ValueError(f'Compression method code must be in range 0..{CODE_MAX}, got {code}.')


class MethodCodec:
    """Converts compression methods to wire codes and back.

    Only compressions enabled in ``features`` are recognised, codes of disabled ones
    are decoded as Unsupported. If ``features`` are not given, they are detected from
    installed backends.
    """

    def __init__(self, features: Optional[Features] = None):
        self._features: Features = features if features is not None else Features.detect()
        self._known: tuple[CompressionMethod, ...] = tuple(
            VARIANTS[name]() for name in self._features.enabled()
        )
        self._by_code: dict[int, CompressionMethod] = {}
        for method in self._known:
            self._by_code.setdefault(method.code, method)  # First match wins
        self._by_name: dict[str, CompressionMethod] = {method.name.lower(): method for method in self._known}

    def __repr__(self) -> str:
        return f'{type(self).__name__}({self._features!r})'

    @property
    def features(self) -> Features:
        return self._features

    def known(self) -> tuple[CompressionMethod, ...]:
        """Get enabled compression methods in decoding order."""
        return self._known

    def from_code(self, code: int) -> CompressionMethod:
        """Convert wire ``code`` to its compression method.

        Every code in range 0..65535 is accepted, unknown codes are returned as Unsupported.
        """

        check_code(code)
        method = self._by_code.get(code)
        return method if method is not None else Unsupported(code)

    def to_code(self, method: CompressionMethod) -> int:
        """Convert ``method`` to wire code. Unsupported methods return their original code."""

        if not isinstance(method, CompressionMethod) or type(method) is CompressionMethod:
            raise TypeError(f'Expected compression method, not {type(method).__name__}.')
        return method.code

    def from_name(self, name: str) -> CompressionMethod:
        """Get enabled compression method by its table name. Case is ignored.

        Raises UnknownCompression exception if name is unknown or disabled.
        """

        try:
            return self._by_name[name.lower()]
        except KeyError:
            raise UnknownCompression(f'Compression {name!r} is unknown or disabled.') from None

    def is_supported(self, method: CompressionMethod) -> bool:
        return method in self._known

    def require_supported(self, method: CompressionMethod) -> CompressionMethod:
        """Return ``method`` if it's enabled, raise UnsupportedCompression exception otherwise."""

        if not self.is_supported(method):
            raise UnsupportedCompression(method)
        return method


DEFAULT_CODEC: MethodCodec = MethodCodec()


# see MethodCodec for documentation.
def from_code(code: int) -> CompressionMethod:
    return DEFAULT_CODEC.from_code(code)

def to_code(method: CompressionMethod) -> int:
    return DEFAULT_CODEC.to_code(method)

def from_name(name: str) -> CompressionMethod:
    return DEFAULT_CODEC.from_name(name)

def is_supported(method: CompressionMethod) -> bool:
    return DEFAULT_CODEC.is_supported(method)

def require_supported(method: CompressionMethod) -> CompressionMethod:
    return DEFAULT_CODEC.require_supported(method)
