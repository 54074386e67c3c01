from dataclasses import dataclass, fields
from importlib.util import find_spec
from typing import Iterable, Self

from .compressions import *
from .exceptions import UnknownCompression


@dataclass(frozen=True)
class Features:
    """Set of optional compression algorythms known to a codec.

    **Attributes**:
        * deflate (`bool`): Recognise DEFLATE (code 8).
        * bzip2 (`bool`): Recognise BZIP2 (code 12).

    Stored is always known and has no switch.
    """

    deflate: bool = True
    bzip2: bool = True

    @classmethod
    def all(cls) -> Self:
        """Enable every optional algorythm."""
        return cls(**{f.name: True for f in fields(cls)})

    @classmethod
    def none(cls) -> Self:
        """Keep only Stored."""
        return cls(**{f.name: False for f in fields(cls)})

    @classmethod
    def from_names(cls, names: Iterable[str]) -> Self:
        """Enable algorythms by their table names (e.g. 'Deflate', 'BZIP2'). Case is ignored.

        Raises UnknownCompression exception if name is not an optional compression.
        """

        lookup = {name.lower(): name for name in OPTIONAL_COMPRESSIONS}
        selected = set()
        for name in names:
            try:
                selected.add(lookup[name.lower()])
            except KeyError:
                raise UnknownCompression(f'Unknown optional compression {name!r}.') from None
        return cls(**{attr: name in selected for name, attr in _SWITCHES.items()})

    @classmethod
    def detect(cls) -> Self:
        """Enable algorythms whose backend module can be imported."""
        return cls(**{attr: find_spec(BACKENDS[name]) is not None for name, attr in _SWITCHES.items()})

    def is_enabled(self, name: str) -> bool:
        if name == STORED:
            return True
        try:
            return getattr(self, _SWITCHES[name])
        except KeyError:
            raise UnknownCompression(f'Unknown compression {name!r}.') from None

    def enabled(self) -> tuple[str, ...]:
        """Get names of known compressions in decoding order."""
        return tuple(name for name in COMPRESSION_FROM_STR if self.is_enabled(name))


# Table name -> Features attribute.
_SWITCHES: dict[str, str] = {
    DEFLATE: 'deflate',
    BZIP: 'bzip2'
}
