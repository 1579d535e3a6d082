"""Exception types raised by the harness.

Each exception renders as the single diagnostic line the CLI prints before
exiting. Ignored algorithms are not errors and have no exception here; see
``cryptoharness.request.Skipped``.
"""
from __future__ import annotations


class HarnessError(Exception):
    """Base class for every failure the harness reports."""


class MissingFieldError(HarnessError):
    def __init__(self, field: str) -> None:
        self.field = field
        super().__init__(f"missing {field}")


class UnknownAlgorithmError(HarnessError):
    def __init__(self, algorithm: str) -> None:
        self.algorithm = algorithm
        super().__init__(f"unknown algorithm: {algorithm}")


class DecodeError(HarnessError):
    """Base64 text for ``field`` (nonce, key or input) did not decode."""

    def __init__(self, field: str, reason: str) -> None:
        self.field = field
        self.reason = reason
        super().__init__(f"invalid {field}: {reason}")


class InputReadError(HarnessError):
    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"invalid input: {reason}")


class UnknownPrimitiveError(HarnessError):
    def __init__(self, primitive: str) -> None:
        self.primitive = primitive
        super().__init__(f"Unknown primitive: {primitive}")


class HandlerError(HarnessError):
    """A primitive handler could not produce its artifact."""

    def __init__(self, primitive: str, algorithm: str, reason: str) -> None:
        self.primitive = str(primitive)
        self.algorithm = algorithm
        self.reason = reason
        super().__init__(f"{self.primitive} {algorithm} failed: {reason}")


class UnsupportedAlgorithmError(HandlerError):
    def __init__(self, primitive: str, algorithm: str) -> None:
        super().__init__(primitive, algorithm, "unsupported algorithm")

    def __str__(self) -> str:
        return f"{self.primitive} does not support algorithm: {self.algorithm}"
