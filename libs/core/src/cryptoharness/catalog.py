"""Catalog of primitives and algorithm identifiers known to the harness.

Every language's harness keeps an identical copy of these tables; diffing them
across implementations is how the suites stay in sync. Adding an algorithm is a
one-line change to the matching family table below.

The catalog answers two questions only: is an identifier known at all, and is
it known but intentionally ignored. It does not check that an algorithm makes
sense for the primitive a caller asked for; handlers own that check.
"""
from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import FrozenSet, Mapping, Tuple

from .errors import UnknownPrimitiveError

Algorithm = str  # identifiers are compared by exact string match


class Primitive(str, Enum):
    """Closed set of capability families a request can target."""

    MAC = "MAC"
    AEAD = "AEAD"
    DAEAD = "DAEAD"
    HPKE = "HPKE"
    HKDF = "HKDF"
    SIGNATURE = "Signature"
    AGREEMENT = "Agreement"

    def __str__(self) -> str:
        return self.value


class AlgorithmStatus(str, Enum):
    SUPPORTED = "supported"
    IGNORED = "ignored"
    UNKNOWN = "unknown"


# HMAC, HKDF
SHA2_256: Algorithm = "SHA2-256"
SHA2_384: Algorithm = "SHA2-384"
SHA2_512: Algorithm = "SHA2-512"
SHA3_256: Algorithm = "SHA3-256"
SHA3_384: Algorithm = "SHA3-384"
SHA3_512: Algorithm = "SHA3-512"
AES_128: Algorithm = "AES-128"
AES_256: Algorithm = "AES-256"
BLAKE3: Algorithm = "BLAKE3"  # ignored

# AEAD
AES_128_GCM: Algorithm = "AES-128-GCM"
AES_256_GCM: Algorithm = "AES-256-GCM"
CHACHA20_POLY1305: Algorithm = "ChaCha20Poly1305"
XCHACHA20_POLY1305: Algorithm = "XChaCha20Poly1305"

# DAEAD
AES_SIV: Algorithm = "AES-SIV"

# Signature
ES256: Algorithm = "ES256"
ES384: Algorithm = "ES384"
ES512: Algorithm = "ES512"  # missing from some other-language backends
ED25519: Algorithm = "Ed25519"
RS256: Algorithm = "RS256"
RS384: Algorithm = "RS384"
RS512: Algorithm = "RS512"
PS256: Algorithm = "PS256"
PS384: Algorithm = "PS384"
PS512: Algorithm = "PS512"


IGNORED_ALGORITHMS: Tuple[Algorithm, ...] = (
    BLAKE3,
)

MAC_ALGORITHMS: Tuple[Algorithm, ...] = (
    SHA2_256,
    SHA2_384,
    SHA2_512,
    SHA3_256,
    SHA3_384,
    SHA3_512,
    AES_128,
    AES_256,
)

HMAC_ALGORITHMS: Tuple[Algorithm, ...] = (
    SHA2_256,
    SHA2_384,
    SHA2_512,
    SHA3_256,
    SHA3_384,
    SHA3_512,
)

HKDF_ALGORITHMS: Tuple[Algorithm, ...] = (
    SHA2_256,
    SHA2_384,
    SHA2_512,
    SHA3_256,
    SHA3_384,
    SHA3_512,
)

AEAD_ALGORITHMS: Tuple[Algorithm, ...] = (
    AES_128_GCM,
    AES_256_GCM,
    CHACHA20_POLY1305,
    XCHACHA20_POLY1305,
)

DAEAD_ALGORITHMS: Tuple[Algorithm, ...] = (
    AES_SIV,
)

SIGNATURE_ALGORITHMS: Tuple[Algorithm, ...] = (
    ES256,
    ES384,
    ES512,
    ED25519,
    RS256,
    RS384,
    RS512,
    PS256,
    PS384,
    PS512,
)

# Not populated yet in any implementation of the suite.
AGREEMENT_ALGORITHMS: Tuple[Algorithm, ...] = ()
HPKE_ALGORITHMS: Tuple[Algorithm, ...] = ()


FAMILIES: Mapping[str, Tuple[Algorithm, ...]] = MappingProxyType({
    "MAC": MAC_ALGORITHMS,
    "HMAC": HMAC_ALGORITHMS,
    "HKDF": HKDF_ALGORITHMS,
    "AEAD": AEAD_ALGORITHMS,
    "DAEAD": DAEAD_ALGORITHMS,
    "Signature": SIGNATURE_ALGORITHMS,
    "Agreement": AGREEMENT_ALGORITHMS,
    "HPKE": HPKE_ALGORITHMS,
    "Ignored": IGNORED_ALGORITHMS,
})

_ALL_ALGORITHMS: FrozenSet[Algorithm] = frozenset(
    algo for table in FAMILIES.values() for algo in table
)
_IGNORED: FrozenSet[Algorithm] = frozenset(IGNORED_ALGORITHMS)


def is_known(algorithm: Algorithm) -> bool:
    return algorithm in _ALL_ALGORITHMS


def is_ignored(algorithm: Algorithm) -> bool:
    return algorithm in _IGNORED


def status_of(algorithm: Algorithm) -> AlgorithmStatus:
    if not is_known(algorithm):
        return AlgorithmStatus.UNKNOWN
    if is_ignored(algorithm):
        return AlgorithmStatus.IGNORED
    return AlgorithmStatus.SUPPORTED


def families_of(algorithm: Algorithm) -> Tuple[str, ...]:
    """Family names whose table lists ``algorithm``, in table order."""
    return tuple(name for name, table in FAMILIES.items() if algorithm in table)


def known_algorithms() -> Tuple[Algorithm, ...]:
    """Every known identifier once, in first-seen table order."""
    seen: dict[Algorithm, None] = {}
    for table in FAMILIES.values():
        for algo in table:
            seen.setdefault(algo, None)
    return tuple(seen)


def parse_primitive(value: str) -> Primitive:
    """Exact, case-sensitive match against the closed primitive set."""
    try:
        return Primitive(value)
    except ValueError:
        raise UnknownPrimitiveError(value) from None
