from __future__ import annotations
import logging
from typing import Any, Callable, Dict, Union

from .catalog import Primitive
from .errors import UnknownPrimitiveError
from .interfaces import KeyedHandler, NoncedHandler
from .request import Request

log = logging.getLogger(__name__)

# Primitives whose handlers take the nonce; everything else gets (algorithm, key, payload).
NONCE_PRIMITIVES = frozenset({Primitive.AEAD, Primitive.DAEAD})

Handler = Union[KeyedHandler, NoncedHandler]


class _Registry:
    def __init__(self) -> None:
        self._items: Dict[str, Handler] = {}

    def register(self, primitive: str) -> Callable[[Any], Any]:
        def _inner(handler: Any) -> Any:
            self._items[str(primitive)] = handler
            return handler
        return _inner

    def get(self, primitive: str) -> Handler:
        try:
            return self._items[str(primitive)]
        except KeyError:
            raise UnknownPrimitiveError(str(primitive)) from None

    def list(self) -> Dict[str, Handler]:
        return dict(self._items)

registry = _Registry()


def dispatch(request: Request, handlers: _Registry = registry) -> bytes:
    """Route ``request`` to the handler registered for its primitive."""
    handler = handlers.get(request.primitive)
    log.debug("dispatching %s/%s to %s", request.primitive, request.algorithm,
              getattr(handler, "__qualname__", handler))
    if request.primitive in NONCE_PRIMITIVES:
        return handler(request.algorithm, request.nonce, request.key, request.payload)
    return handler(request.algorithm, request.key, request.payload)
