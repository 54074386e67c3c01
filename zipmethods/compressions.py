"""Constants with names of known compressions. Only optional algorythms can be switched off."""

STORED: str = 'Stored'
DEFLATE: str = 'Deflate'
BZIP: str = 'BZIP2'

# Order matters: codes are matched against this table from top to bottom.
COMPRESSION_FROM_STR: dict[str, int] = {
    STORED: 0,
    DEFLATE: 8,
    BZIP: 12
}

OPTIONAL_COMPRESSIONS: tuple[str, ...] = (DEFLATE, BZIP)

# Modules providing an implementation of each optional algorythm.
BACKENDS: dict[str, str] = {
    DEFLATE: 'deflate',
    BZIP: 'bz2'
}

CODE_MAX: int = 0xFFFF
