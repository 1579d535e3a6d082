from __future__ import annotations

import pytest

from cryptoharness.catalog import Primitive
from cryptoharness.errors import UnknownPrimitiveError
from cryptoharness.registry import _Registry, dispatch
from cryptoharness.request import Request


@pytest.fixture
def handlers():
    table = _Registry()
    calls = []

    @table.register(Primitive.AEAD)
    def _aead(algorithm, nonce, key, payload):
        calls.append(("AEAD", algorithm, nonce, key, payload))
        return b"sealed"

    @table.register(Primitive.MAC)
    def _mac(algorithm, key, payload):
        calls.append(("MAC", algorithm, key, payload))
        return b"tag"

    return table, calls


def test_nonced_primitives_receive_the_nonce(handlers):
    table, calls = handlers
    request = Request(Primitive.AEAD, "AES-128-GCM", b"n" * 12, b"k" * 16, b"hello")
    assert dispatch(request, table) == b"sealed"
    assert calls == [("AEAD", "AES-128-GCM", b"n" * 12, b"k" * 16, b"hello")]


def test_keyed_primitives_do_not_receive_the_nonce(handlers):
    table, calls = handlers
    request = Request(Primitive.MAC, "SHA2-256", b"ignored", b"k", b"data")
    assert dispatch(request, table) == b"tag"
    assert calls == [("MAC", "SHA2-256", b"k", b"data")]


def test_primitive_without_a_handler_is_unknown(handlers):
    table, calls = handlers
    request = Request(Primitive.HPKE, "SHA2-256", b"", b"k", b"")
    with pytest.raises(UnknownPrimitiveError) as excinfo:
        dispatch(request, table)
    assert str(excinfo.value) == "Unknown primitive: HPKE"
    assert calls == []


def test_register_keys_by_primitive_name():
    table = _Registry()
    table.register("Signature")(len)
    assert table.get(Primitive.SIGNATURE) is len
    assert list(table.list()) == ["Signature"]


def test_pyca_adapter_registers_every_primitive():
    import cryptoharness_pyca  # noqa: F401
    from cryptoharness import registry

    assert set(registry.list()) == {p.value for p in Primitive}
