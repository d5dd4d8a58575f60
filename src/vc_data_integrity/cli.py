"""
Command-line interface for inspecting Data Integrity Proofs.

Usage:
    vc-di credential.json
    vc-di presentation.json --json-output
    cat credential.json | vc-di -
"""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Any

import click
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from vc_data_integrity.document import VERIFIABLE_PRESENTATION, Credential, Presentation
from vc_data_integrity.errors import DataIntegrityError
from vc_data_integrity.options import DATA_INTEGRITY_PROOF
from vc_data_integrity.proof import Proof


console = Console()


def load_document(source: str) -> Credential | Presentation:
    """Load a credential or presentation from a file or stdin.

    Args:
        source: File path, or "-" for stdin.

    Returns:
        A Presentation when the document's type includes
        VerifiablePresentation, a Credential otherwise.

    Raises:
        click.ClickException: If the source is missing or unreadable.
    """
    try:
        if source == "-":
            content = sys.stdin.read()
        else:
            path = Path(source)
            if not path.exists():
                raise click.ClickException(f"File not found: {source}")
            content = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise click.ClickException(f"Cannot read {source}: {e}") from e

    data = json.loads(content)
    if not isinstance(data, dict):
        raise click.ClickException("Document must be a JSON object")

    types = data.get("type", [])
    if types == VERIFIABLE_PRESENTATION or (
        isinstance(types, list) and VERIFIABLE_PRESENTATION in types
    ):
        return Presentation.from_dict(data)
    return Credential.from_dict(data)


def format_proofs(document: Credential | Presentation) -> None:
    """Print the document's proofs as tables."""
    kind = "Presentation" if isinstance(document, Presentation) else "Credential"

    if not document.proofs:
        console.print(f"[bold yellow]{kind} carries no proof[/]")
        return

    for index, proof in enumerate(document.proofs):
        table = Table(show_header=False, box=None, padding=(0, 2))
        table.add_column("Field", style="dim")
        table.add_column("Value")

        if proof.type == DATA_INTEGRITY_PROOF:
            table.add_row("Type", f"[green]{proof.type}[/]")
        else:
            table.add_row("Type", f"[yellow]{proof.type or 'unknown'}[/]")

        for label, value in (
            ("Cryptosuite", proof.cryptosuite),
            ("Proof Purpose", proof.proof_purpose),
            ("Verification Method", proof.verification_method),
            ("Created", proof.created),
            ("Expires", proof.expires),
            ("Domain", proof.domain),
            ("Challenge", proof.challenge),
        ):
            if value:
                table.add_row(label, str(value))

        console.print(
            Panel(
                table,
                title=f"{kind} proof {index + 1}/{len(document.proofs)}",
                border_style="green" if proof.type == DATA_INTEGRITY_PROOF else "yellow",
            )
        )


def proofs_to_output(proofs: list[Proof]) -> list[dict[str, Any]]:
    """JSON output for proofs, without the proof value itself."""
    output = []
    for proof in proofs:
        data = proof.to_dict()
        data.pop("proofValue", None)
        output.append(data)
    return output


@click.command()
@click.argument("source", required=True)
@click.option(
    "--json-output",
    is_flag=True,
    help="Output proofs as JSON",
)
@click.version_option(package_name="vc-data-integrity")
def main(source: str, json_output: bool) -> None:
    """List the proofs carried by a credential or presentation.

    SOURCE can be:
    - A file path (e.g., credential.json)
    - "-" to read from stdin

    Exits with 0 when the document carries at least one proof, 1 when it
    carries none and 2 when it cannot be read.
    """
    try:
        document = load_document(source)

        if json_output:
            console.print_json(data={"proofs": proofs_to_output(document.proofs)})
        else:
            format_proofs(document)

        sys.exit(0 if document.proofs else 1)

    except json.JSONDecodeError as e:
        if json_output:
            console.print_json(data={"error": f"Invalid JSON: {e}"})
        else:
            console.print(f"[red]Error:[/] Invalid JSON: {e}")
        sys.exit(2)

    except click.ClickException as e:
        if json_output:
            console.print_json(data={"error": e.format_message()})
        else:
            console.print(f"[red]Error:[/] {e.format_message()}")
        sys.exit(2)

    except DataIntegrityError as e:
        if json_output:
            console.print_json(data={"error": str(e)})
        else:
            console.print(f"[red]Error:[/] {e}")
        sys.exit(2)


if __name__ == "__main__":
    main()
