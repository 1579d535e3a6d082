"""Handler package backed by pyca/cryptography (and pycryptodome for XChaCha20).

Importing submodules triggers registration of one handler per primitive into
``cryptoharness.registry``.
"""

# Trigger registration side-effects
from . import symmetric_handlers as _symmetric_handlers  # noqa: F401
from . import asymmetric_handlers as _asymmetric_handlers  # noqa: F401

__all__: list[str] = []
