"""Symmetric handlers: MAC, AEAD, DAEAD and HKDF.

Each handler returns the artifact other implementations are compared against:

* MAC: the tag (HMAC for the hash identifiers, AES-CMAC for AES-128/AES-256)
* AEAD: ciphertext || tag, no associated data
* DAEAD: AES-SIV output (SIV || ciphertext); a non-empty nonce is the final
  associated-data component as in RFC 5297 section 3
* HKDF: the derived key, with the key as IKM, no salt and the payload as info
"""
from __future__ import annotations

from cryptography.hazmat.primitives import cmac, hmac
from cryptography.hazmat.primitives.ciphers import algorithms
from cryptography.hazmat.primitives.ciphers.aead import AESGCM, AESSIV, ChaCha20Poly1305
from cryptography.hazmat.primitives.kdf.hkdf import HKDF
from Crypto.Cipher import ChaCha20_Poly1305

from cryptoharness import catalog, registry
from cryptoharness.catalog import Primitive
from cryptoharness.config import hkdf_length

from ._util import backend_errors, hash_for, require_family, require_length

CMAC_KEY_SIZES = {
    catalog.AES_128: 16,
    catalog.AES_256: 32,
}

AEAD_KEY_SIZES = {
    catalog.AES_128_GCM: 16,
    catalog.AES_256_GCM: 32,
    catalog.CHACHA20_POLY1305: 32,
    catalog.XCHACHA20_POLY1305: 32,
}

XCHACHA_NONCE_SIZE = 24


@registry.register(Primitive.MAC)
def handle_mac(algorithm: str, key: bytes, payload: bytes) -> bytes:
    require_family(Primitive.MAC, algorithm, catalog.MAC_ALGORITHMS)
    with backend_errors(Primitive.MAC, algorithm):
        if algorithm in CMAC_KEY_SIZES:
            require_length("AES-CMAC key", key, CMAC_KEY_SIZES[algorithm])
            mac = cmac.CMAC(algorithms.AES(key))
        else:
            mac = hmac.HMAC(key, hash_for(algorithm))
        mac.update(payload)
        return mac.finalize()


def _seal_xchacha(nonce: bytes, key: bytes, payload: bytes) -> bytes:
    require_length("XChaCha20Poly1305 nonce", nonce, XCHACHA_NONCE_SIZE)
    # pycryptodome switches to XChaCha20 on a 24-byte nonce
    cipher = ChaCha20_Poly1305.new(key=key, nonce=nonce)
    ct, tag = cipher.encrypt_and_digest(payload)
    return ct + tag


@registry.register(Primitive.AEAD)
def handle_aead(algorithm: str, nonce: bytes, key: bytes, payload: bytes) -> bytes:
    require_family(Primitive.AEAD, algorithm, catalog.AEAD_ALGORITHMS)
    with backend_errors(Primitive.AEAD, algorithm):
        require_length(f"{algorithm} key", key, AEAD_KEY_SIZES[algorithm])
        if algorithm == catalog.XCHACHA20_POLY1305:
            return _seal_xchacha(nonce, key, payload)
        if algorithm == catalog.CHACHA20_POLY1305:
            return ChaCha20Poly1305(key).encrypt(nonce, payload, None)
        return AESGCM(key).encrypt(nonce, payload, None)


@registry.register(Primitive.DAEAD)
def handle_daead(algorithm: str, nonce: bytes, key: bytes, payload: bytes) -> bytes:
    require_family(Primitive.DAEAD, algorithm, catalog.DAEAD_ALGORITHMS)
    with backend_errors(Primitive.DAEAD, algorithm):
        associated_data = [nonce] if nonce else None
        return AESSIV(key).encrypt(payload, associated_data)


@registry.register(Primitive.HKDF)
def handle_hkdf(algorithm: str, key: bytes, payload: bytes) -> bytes:
    require_family(Primitive.HKDF, algorithm, catalog.HKDF_ALGORITHMS)
    with backend_errors(Primitive.HKDF, algorithm):
        digest = hash_for(algorithm)
        length = hkdf_length() or digest.digest_size
        if length > 255 * digest.digest_size:
            raise ValueError(f"HKDF length {length} exceeds 255 * {digest.digest_size}")
        kdf = HKDF(algorithm=digest, length=length, salt=None, info=payload)
        return kdf.derive(key)
