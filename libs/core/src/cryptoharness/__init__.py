
from .catalog import (
    Algorithm,
    AlgorithmStatus,
    FAMILIES,
    Primitive,
    families_of,
    is_ignored,
    is_known,
    known_algorithms,
    status_of,
)
from .errors import (
    DecodeError,
    HandlerError,
    HarnessError,
    InputReadError,
    MissingFieldError,
    UnknownAlgorithmError,
    UnknownPrimitiveError,
    UnsupportedAlgorithmError,
)
from .interfaces import KeyedHandler, NoncedHandler
from .registry import dispatch, registry
from .request import Request, Skipped, validate
from .config import Settings, load_settings

__all__ = [
    "Algorithm",
    "AlgorithmStatus",
    "FAMILIES",
    "Primitive",
    "families_of",
    "is_ignored",
    "is_known",
    "known_algorithms",
    "status_of",
    "DecodeError",
    "HandlerError",
    "HarnessError",
    "InputReadError",
    "MissingFieldError",
    "UnknownAlgorithmError",
    "UnknownPrimitiveError",
    "UnsupportedAlgorithmError",
    "KeyedHandler",
    "NoncedHandler",
    "dispatch",
    "registry",
    "Request",
    "Skipped",
    "validate",
    "Settings",
    "load_settings",
]
