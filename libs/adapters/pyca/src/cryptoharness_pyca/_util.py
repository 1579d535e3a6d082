from __future__ import annotations
from contextlib import contextmanager
from typing import Dict, Iterator, Sequence, Type

from cryptography.exceptions import InvalidKey, InvalidSignature, UnsupportedAlgorithm
from cryptography.hazmat.primitives import hashes

from cryptoharness import catalog
from cryptoharness.errors import HandlerError, HarnessError, UnsupportedAlgorithmError

_HASHES: Dict[str, Type[hashes.HashAlgorithm]] = {
    catalog.SHA2_256: hashes.SHA256,
    catalog.SHA2_384: hashes.SHA384,
    catalog.SHA2_512: hashes.SHA512,
    catalog.SHA3_256: hashes.SHA3_256,
    catalog.SHA3_384: hashes.SHA3_384,
    catalog.SHA3_512: hashes.SHA3_512,
}


def hash_for(algorithm: str) -> hashes.HashAlgorithm:
    return _HASHES[algorithm]()


def require_family(primitive: str, algorithm: str, table: Sequence[str]) -> None:
    """Handlers only run algorithms from their own catalog family."""
    if algorithm not in table:
        raise UnsupportedAlgorithmError(primitive, algorithm)


def require_length(what: str, value: bytes, expected: int) -> None:
    if len(value) != expected:
        raise ValueError(f"{what} must be {expected} bytes (got {len(value)})")


@contextmanager
def backend_errors(primitive: str, algorithm: str) -> Iterator[None]:
    """Re-raise backend failures as HandlerError for the CLI to report."""
    try:
        yield
    except HarnessError:
        raise
    except (ValueError, TypeError, UnsupportedAlgorithm, InvalidKey, InvalidSignature) as exc:
        raise HandlerError(primitive, algorithm, str(exc) or type(exc).__name__) from exc
