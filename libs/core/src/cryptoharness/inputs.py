"""Resolve the nonce, key and payload byte strings of an invocation.

Nonce and key always arrive as base64 flag values. The payload comes from the
positional arguments when they carry any text, and from standard input
otherwise:

* positional text is standard base64 and is decoded;
* standard input is taken verbatim as raw bytes, read to the end.

The first positional argument is a reserved mode token owned by the caller's
tooling and never contributes to the payload.
"""
from __future__ import annotations

import base64
import binascii
import logging
from typing import BinaryIO, Sequence

from .errors import DecodeError, InputReadError

log = logging.getLogger(__name__)

NONCE = "nonce"
KEY = "key"
INPUT = "input"


def decode_field(text: str, field: str) -> bytes:
    """Decode standard (padded) base64 ``text``; whitespace is ignored."""
    compact = "".join(text.split())
    try:
        return base64.b64decode(compact, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise DecodeError(field, str(exc)) from exc


def join_positional(args: Sequence[str]) -> str:
    # args[0] is the mode token
    return "".join(" " + arg for arg in args[1:])


def read_stdin(stdin: BinaryIO) -> bytes:
    try:
        return stdin.read()
    except OSError as exc:
        raise InputReadError(str(exc)) from exc


def resolve_payload(args: Sequence[str], stdin: BinaryIO) -> bytes:
    text = join_positional(args)
    if text.strip() == "":
        payload = read_stdin(stdin)
        log.debug("payload: %d raw bytes from stdin", len(payload))
        return payload
    payload = decode_field(text, INPUT)
    log.debug("payload: %d bytes from positional arguments", len(payload))
    return payload
