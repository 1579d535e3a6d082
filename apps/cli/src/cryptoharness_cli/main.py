from __future__ import annotations
import base64
import importlib
import logging
import sys
from typing import List, NoReturn, Optional

import typer

from cryptoharness import FAMILIES, Skipped, dispatch, validate
from cryptoharness.config import load_settings
from cryptoharness.errors import HarnessError

log = logging.getLogger(__name__)

ADAPTER_MODULES = ("cryptoharness_pyca",)

app = typer.Typer(add_completion=False, help="Cryptographic interoperability test harness")


def _load_adapters() -> None:
    for mod in ADAPTER_MODULES:
        try:
            importlib.import_module(mod)
        except ImportError as e:
            log.warning("[adapter import error] %s: %s", mod, e)


def _configure_logging(level: int) -> None:
    logging.basicConfig(level=level, format="%(message)s", stream=sys.stderr, force=True)


def _encode(artifact: bytes, output: str) -> str:
    if output == "hex":
        return artifact.hex()
    return base64.b64encode(artifact).decode("ascii")


def _fail(message: str) -> NoReturn:
    typer.echo(message, err=True)
    raise typer.Exit(code=1)


def _list_algorithms(value: bool) -> None:
    if not value:
        return
    for family, table in FAMILIES.items():
        typer.echo(f"{family}:")
        for name in table:
            typer.echo(f"- {name}")
    raise typer.Exit()


@app.command()
def main(
    primitive: str = typer.Option(
        "", "-primitive", "--primitive",
        help="Primitive: MAC, AEAD, DAEAD, HPKE, HKDF, Signature or Agreement.",
    ),
    algorithm: str = typer.Option("", "-algorithm", "--algorithm", help="Algorithm identifier."),
    nonce: str = typer.Option("", "-nonce", "--nonce", help="Nonce, standard base64."),
    key: str = typer.Option("", "-key", "--key", help="Key, standard base64."),
    args: Optional[List[str]] = typer.Argument(
        None,
        metavar="MODE [PAYLOAD...]",
        help="MODE is reserved for the calling tool and skipped. PAYLOAD is base64; "
             "when absent the payload is read raw from stdin.",
    ),
    list_algorithms: bool = typer.Option(
        False, "--list-algorithms",
        callback=_list_algorithms, is_eager=True,
        help="Print the algorithm catalog and exit.",
    ),
) -> None:
    """Validate one request and run it through the matching primitive handler."""
    try:
        settings = load_settings()
    except ValueError as e:
        _fail(str(e))
    _configure_logging(settings.log_level)
    _load_adapters()

    try:
        outcome = validate(
            primitive, algorithm, nonce, key, args or [],
            typer.get_binary_stream("stdin"),
        )
    except HarnessError as e:
        _fail(str(e))

    if isinstance(outcome, Skipped):
        typer.echo(outcome.notice, err=True)
        raise typer.Exit(code=0)

    try:
        artifact = dispatch(outcome)
    except HarnessError as e:
        _fail(str(e))
    typer.echo(_encode(artifact, settings.output))


def app_main():
    app()

if __name__ == "__main__":
    app_main()
