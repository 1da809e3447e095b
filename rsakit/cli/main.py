"""rsakit CLI - key generation, signing and verification commands."""
import json
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from rsakit.core.config import DEFAULT_PUBLIC_EXPONENT, KeyConfig, PrimeSearchConfig, RSAConfig
from rsakit.core.crypto import KeyParameters, PublicKey, Signer
from rsakit.core.exceptions import RSAException
from rsakit.core.logging import LogLevel, configure_logging

app = typer.Typer(
    name="rsakit",
    help="Textbook RSA key generation and signing",
    add_completion=False
)
console = Console()


def fail(message: str) -> None:
    """Print an error and exit with status 1."""
    console.print(f"[red]{message}[/red]")
    raise typer.Exit(1)


def load_key_data(key_file: Path) -> dict:
    try:
        data = json.loads(key_file.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        fail(f"Cannot read key file {key_file}: {e}")
    if not isinstance(data, dict):
        fail(f"Key file {key_file} must hold a JSON object")
    return data


def load_public_key(key_file: Path) -> PublicKey:
    """Load (n, e) from a full key file or a public key file."""
    return PublicKey.from_dict(load_key_data(key_file))


def parse_hex(value: str, name: str) -> int:
    try:
        return int(value, 16)
    except ValueError:
        fail(f"{name} must be a hexadecimal integer")


@app.callback()
def main_options(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log debug output to stderr"),
):
    """Textbook RSA key generation and signing."""
    if verbose:
        configure_logging(level=LogLevel.DEBUG)


@app.command()
def prime(
    bits: int = typer.Argument(..., help="Exact bit length of the prime"),
    max_iterations: Optional[int] = typer.Option(None, "--max-iterations", help="Give up after this many candidates"),
):
    """Generate a probable prime."""
    try:
        config = RSAConfig(prime_search=PrimeSearchConfig(max_iterations=max_iterations))
        result = config.create_prime_generator().search(bits)
    except RSAException as e:
        fail(str(e))

    console.print(str(result.prime), soft_wrap=True, highlight=False)
    console.print(f"[dim]{result.iterations} candidates tested[/dim]")


@app.command()
def keygen(
    bits: int = typer.Option(1024, "--bits", "-b", help="Bit length of each prime"),
    exponent: int = typer.Option(DEFAULT_PUBLIC_EXPONENT, "--exponent", "-e", help="Public exponent"),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Write key parameters as JSON"),
    public_output: Optional[Path] = typer.Option(None, "--public", help="Write the public key as JSON"),
    pem: Optional[Path] = typer.Option(None, "--pem", help="Write the private key as PKCS#8 PEM"),
):
    """Generate key parameters (p, q, n, phi(n), e, d)."""
    config = RSAConfig(key=KeyConfig(public_exponent=exponent, prime_bit_length=bits))
    try:
        params = config.create_deriver().derive()
        pem_data = params.to_pem() if pem else None
    except RSAException as e:
        fail(str(e))

    if output:
        output.write_text(params.to_json(), encoding="utf-8")
        console.print(f"[green]Key parameters saved to {output}[/green]")
    if public_output:
        public_output.write_text(json.dumps(params.public_key.to_dict(), indent=2), encoding="utf-8")
        console.print(f"[green]Public key saved to {public_output}[/green]")
    if pem_data:
        pem.write_bytes(pem_data)
        console.print(f"[green]PEM private key saved to {pem}[/green]")

    if not output:
        table = Table()
        table.add_column("Field", style="cyan")
        table.add_column("Value (hex)", overflow="fold")
        for name, value in params.to_dict().items():
            table.add_row(name, value)
        console.print(table)


@app.command()
def sign(
    key_file: Path = typer.Argument(..., help="Key parameters JSON", exists=True),
    message: str = typer.Argument(..., help="Message to sign"),
):
    """Sign the SHA-256 digest of a message."""
    try:
        params = KeyParameters.from_dict(load_key_data(key_file))
        signature = Signer().sign_message(message, params)
    except RSAException as e:
        fail(str(e))

    console.print(format(signature, "x"), soft_wrap=True, highlight=False)


@app.command()
def verify(
    key_file: Path = typer.Argument(..., help="Key parameters or public key JSON", exists=True),
    message: str = typer.Argument(..., help="Signed message"),
    signature: str = typer.Argument(..., help="Signature in hex"),
):
    """Verify a signature against the SHA-256 digest of a message."""
    value = parse_hex(signature, "Signature")
    try:
        public_key = load_public_key(key_file)
        valid = Signer().verify_message(message, value, public_key)
    except RSAException as e:
        fail(str(e))

    if not valid:
        fail("Signature is invalid")
    console.print("[green]Signature is valid[/green]")


def main():
    """Entry point."""
    app()


if __name__ == "__main__":
    main()
