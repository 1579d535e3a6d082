from __future__ import annotations
from typing import Protocol

"""Handler interfaces used by adapters.

Adapters implement these Protocols and register themselves into the global
handler registry. The CLI only ever talks to the dispatcher, never to a
cryptography backend directly.
"""

class KeyedHandler(Protocol):
    """MAC, HKDF, Signature, Agreement and HPKE: no nonce."""
    def __call__(self, algorithm: str, key: bytes, payload: bytes) -> bytes: ...

class NoncedHandler(Protocol):
    """AEAD and DAEAD: nonce-aware."""
    def __call__(self, algorithm: str, nonce: bytes, key: bytes, payload: bytes) -> bytes: ...
