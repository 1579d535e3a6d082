"""Validation of raw CLI input into a ready-to-dispatch request.

``validate`` is the single gate in front of the handlers. Its checks run in a
fixed order so the same bad input always yields the same diagnostic in every
language's harness:

1. primitive present
2. algorithm present
3. algorithm known
4. algorithm ignored -> ``Skipped`` (success, nothing else happens)
5. nonce decodes
6. key decodes
7. payload resolves
8. primitive is one of the closed set
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import BinaryIO, Sequence, Union

from .catalog import Algorithm, Primitive, is_ignored, is_known, parse_primitive
from .errors import MissingFieldError, UnknownAlgorithmError
from .inputs import KEY, NONCE, decode_field, resolve_payload

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class Request:
    primitive: Primitive
    algorithm: Algorithm
    nonce: bytes
    key: bytes
    payload: bytes

    def __repr__(self) -> str:
        # key material stays out of logs and tracebacks
        return (
            f"Request(primitive={self.primitive.value!r}, algorithm={self.algorithm!r}, "
            f"nonce=<{len(self.nonce)} bytes>, key=<{len(self.key)} bytes>, "
            f"payload=<{len(self.payload)} bytes>)"
        )


@dataclass(frozen=True)
class Skipped:
    """Known algorithm that this harness deliberately does not run."""

    algorithm: Algorithm

    @property
    def notice(self) -> str:
        return f"ignored algorithm: {self.algorithm}"


Outcome = Union[Request, Skipped]


def validate(
    primitive: str,
    algorithm: str,
    nonce: str,
    key: str,
    args: Sequence[str],
    stdin: BinaryIO,
) -> Outcome:
    if primitive == "":
        raise MissingFieldError("primitive")
    if algorithm == "":
        raise MissingFieldError("algorithm")
    if not is_known(algorithm):
        raise UnknownAlgorithmError(algorithm)
    if is_ignored(algorithm):
        log.debug("skipping ignored algorithm %s", algorithm)
        return Skipped(algorithm)

    nonce_bytes = decode_field(nonce, NONCE)
    key_bytes = decode_field(key, KEY)
    payload = resolve_payload(args, stdin)

    request = Request(
        primitive=parse_primitive(primitive),
        algorithm=algorithm,
        nonce=nonce_bytes,
        key=key_bytes,
        payload=payload,
    )
    log.debug("validated %r", request)
    return request
