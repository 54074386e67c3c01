from .methods import (
    CompressionMethod,
    Stored,
    Deflated,
    Bzip2,
    Unsupported,
    MethodCodec,
    DEFAULT_CODEC,
    from_code,
    to_code,
    from_name,
    is_supported,
    require_supported
)
from .features import Features
from .exceptions import *
