from __future__ import annotations
from typing import Dict, Tuple, Type

from cryptography.hazmat.primitives import hashes, serialization
from cryptography.hazmat.primitives.asymmetric import ec, ed25519, padding, rsa
from cryptography.hazmat.primitives.asymmetric.utils import decode_dss_signature

from cryptoharness import catalog, registry
from cryptoharness.catalog import Primitive
from cryptoharness.errors import UnsupportedAlgorithmError

from ._util import backend_errors, require_family

_ECDSA: Dict[str, Tuple[Type[ec.EllipticCurve], Type[hashes.HashAlgorithm]]] = {
    catalog.ES256: (ec.SECP256R1, hashes.SHA256),
    catalog.ES384: (ec.SECP384R1, hashes.SHA384),
    catalog.ES512: (ec.SECP521R1, hashes.SHA512),
}

_RSA_HASHES: Dict[str, Type[hashes.HashAlgorithm]] = {
    catalog.RS256: hashes.SHA256,
    catalog.RS384: hashes.SHA384,
    catalog.RS512: hashes.SHA512,
    catalog.PS256: hashes.SHA256,
    catalog.PS384: hashes.SHA384,
    catalog.PS512: hashes.SHA512,
}

ED25519_SEED_SIZE = 32


def _load_private_key(algorithm: str, key: bytes):
    """PKCS#8 DER for every algorithm; Ed25519 also takes a raw 32-byte seed."""
    if algorithm == catalog.ED25519 and len(key) == ED25519_SEED_SIZE:
        return ed25519.Ed25519PrivateKey.from_private_bytes(key)
    return serialization.load_der_private_key(key, password=None)


def _expect_key(algorithm: str, sk, kind: type) -> None:
    if not isinstance(sk, kind):
        raise ValueError(f"{algorithm} cannot sign with a {type(sk).__name__}")


def _sign_ecdsa(algorithm: str, sk, payload: bytes) -> bytes:
    curve, digest = _ECDSA[algorithm]
    _expect_key(algorithm, sk, ec.EllipticCurvePrivateKey)
    if not isinstance(sk.curve, curve):
        raise ValueError(f"{algorithm} requires a {curve.name} key, got {sk.curve.name}")
    r, s = decode_dss_signature(sk.sign(payload, ec.ECDSA(digest())))
    # JWS form: fixed-width big-endian r || s
    size = (sk.curve.key_size + 7) // 8
    return r.to_bytes(size, "big") + s.to_bytes(size, "big")


def _sign_rsa(algorithm: str, sk, payload: bytes) -> bytes:
    _expect_key(algorithm, sk, rsa.RSAPrivateKey)
    digest = _RSA_HASHES[algorithm]()
    if algorithm.startswith("PS"):
        pad = padding.PSS(mgf=padding.MGF1(digest), salt_length=digest.digest_size)
    else:
        pad = padding.PKCS1v15()
    return sk.sign(payload, pad, digest)


@registry.register(Primitive.SIGNATURE)
def handle_signature(algorithm: str, key: bytes, payload: bytes) -> bytes:
    require_family(Primitive.SIGNATURE, algorithm, catalog.SIGNATURE_ALGORITHMS)
    with backend_errors(Primitive.SIGNATURE, algorithm):
        sk = _load_private_key(algorithm, key)
        if algorithm == catalog.ED25519:
            _expect_key(algorithm, sk, ed25519.Ed25519PrivateKey)
            return sk.sign(payload)
        if algorithm in _ECDSA:
            return _sign_ecdsa(algorithm, sk, payload)
        return _sign_rsa(algorithm, sk, payload)


@registry.register(Primitive.AGREEMENT)
def handle_agreement(algorithm: str, key: bytes, payload: bytes) -> bytes:
    # The Agreement family has no catalogued algorithms yet.
    require_family(Primitive.AGREEMENT, algorithm, catalog.AGREEMENT_ALGORITHMS)
    raise UnsupportedAlgorithmError(Primitive.AGREEMENT, algorithm)


@registry.register(Primitive.HPKE)
def handle_hpke(algorithm: str, key: bytes, payload: bytes) -> bytes:
    require_family(Primitive.HPKE, algorithm, catalog.HPKE_ALGORITHMS)
    raise UnsupportedAlgorithmError(Primitive.HPKE, algorithm)
