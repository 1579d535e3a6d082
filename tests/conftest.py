from __future__ import annotations

import io
import sys
from pathlib import Path
from typing import Any, Dict, List, Tuple

import pytest

ROOT = Path(__file__).resolve().parents[1]
for candidate in (
    ROOT / "libs" / "core" / "src",
    ROOT / "libs" / "adapters" / "pyca" / "src",
    ROOT / "apps" / "cli" / "src",
):
    candidate_str = str(candidate)
    if candidate_str not in sys.path:
        sys.path.insert(0, candidate_str)

from cryptoharness import registry  # noqa: E402
from cryptoharness.catalog import Primitive  # noqa: E402
from cryptoharness.registry import NONCE_PRIMITIVES  # noqa: E402


class UnreadableStdin(io.RawIOBase):
    """Stand-in for stdin that fails the test if anything reads it."""

    def readable(self) -> bool:
        return True

    def read(self, size: int = -1) -> bytes:
        raise AssertionError("stdin must not be read")

    readall = read


class HandlerSpy:
    """Records every call a primitive handler receives."""

    def __init__(self) -> None:
        self.calls: List[Tuple[str, Dict[str, Any]]] = []

    def handler_for(self, primitive: Primitive):
        if primitive in NONCE_PRIMITIVES:
            def _nonced(algorithm: str, nonce: bytes, key: bytes, payload: bytes) -> bytes:
                self.calls.append((primitive.value, {
                    "algorithm": algorithm, "nonce": nonce, "key": key, "payload": payload,
                }))
                return b"spy:" + primitive.value.encode()
            return _nonced

        def _keyed(algorithm: str, key: bytes, payload: bytes) -> bytes:
            self.calls.append((primitive.value, {
                "algorithm": algorithm, "key": key, "payload": payload,
            }))
            return b"spy:" + primitive.value.encode()
        return _keyed


@pytest.fixture
def unreadable_stdin() -> UnreadableStdin:
    return UnreadableStdin()


@pytest.fixture
def spy_registry():
    """Swap every registered handler for a recording spy."""
    import cryptoharness_pyca  # noqa: F401  register the real handlers first

    spy = HandlerSpy()
    original_items = dict(registry._items)  # type: ignore[attr-defined]
    registry._items.clear()  # type: ignore[attr-defined]
    for primitive in Primitive:
        registry.register(primitive)(spy.handler_for(primitive))
    try:
        yield spy
    finally:
        registry._items.clear()  # type: ignore[attr-defined]
        registry._items.update(original_items)  # type: ignore[attr-defined]
