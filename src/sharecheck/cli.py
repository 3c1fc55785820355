# SPDX-FileCopyrightText: 2025 sharecheck contributors
# SPDX-License-Identifier: MIT

"""Command line interface for sharecheck."""

from __future__ import annotations

import json
import logging
from typing import Optional

import click

from . import config
from .errors import ShareCheckError
from .generation import dump_document, split_secret
from .integrity import annotate, digest_hook
from .parsing import load_document
from .reconstruct import reconstruct


def _configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else getattr(logging, config.policy.log_level, logging.WARNING)
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def _print_shares(title: str, shares: list[dict]) -> None:
    click.echo(title)
    for share in shares:
        click.echo(
            f"  x={share['x']}  y(base {share['base']})='{share['raw']}'  y(10)={share['y']}"
            f"  digest={share['digest']}"
        )
    click.echo("")


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
def cli(verbose: bool) -> None:
    """Reconstruct Shamir secrets and detect corrupted shares."""
    _configure_logging(verbose)


@cli.command("reconstruct")
@click.argument("source", type=click.File("r"), default="-")
@click.option("--workers", type=click.IntRange(min=1), default=None, help="Evaluate subsets on N threads.")
@click.option("--strict", is_flag=True, help="Fail unless a share outside the basis agrees.")
@click.option("--json", "as_json", is_flag=True, help="Print the report as JSON.")
def reconstruct_cmd(source, workers: Optional[int], strict: bool, as_json: bool) -> None:
    """Reconstruct the secret from a share document (stdin by default)."""
    try:
        document = load_document(source.read())
        result = reconstruct(
            document.shares,
            document.k,
            workers=workers,
            require_corroboration=True if strict else None,
        )
        report = annotate(result, digest_hook(config.policy.digest_algorithm))
    except (ShareCheckError, ValueError) as exc:
        raise click.ClickException(str(exc)) from exc

    if as_json:
        report["n"] = document.n
        report["k"] = document.k
        click.echo(json.dumps(report, indent=2))
        return

    k = document.k
    click.echo("=== Reconstruction Result ===")
    click.echo(f"Parsed shares: {result.total}  (keys.n = {document.n})")
    click.echo(f"Threshold k = {k}  -> polynomial degree = {k - 1}")
    click.echo(f"Best-fit shares count: {result.fit_count}/{result.total}\n")

    _print_shares("Good shares (fit polynomial):", report["good"])
    if report["bad"]:
        _print_shares("Bad/Incorrect shares (do NOT fit):", report["bad"])
    else:
        click.echo("No bad shares detected.\n")

    secret = report["secret"]
    click.echo("Secret f(0):")
    click.echo(f"  exact = {secret['exact']}")
    if secret["integer"]:
        click.echo(f"  decimal = {secret['decimal']}")
        click.echo(f"  sha256(secret) = {secret['sha256']}")
    if not result.is_corroborated:
        click.echo("  warning: no share outside the basis confirms this secret")
    click.echo("\nSubset used (x values): " + ", ".join(str(x) for x in result.subset_xs))


@cli.command("split")
@click.argument("secret", type=click.IntRange(min=0))
@click.option("-n", "n", type=int, required=True, help="Number of shares.")
@click.option("-k", "k", type=int, required=True, help="Threshold.")
@click.option("--base", type=click.IntRange(2, 36), default=10, show_default=True)
def split_cmd(secret: int, n: int, k: int, base: int) -> None:
    """Split SECRET into a share document."""
    try:
        shares = split_secret(secret, n=n, k=k)
    except (ShareCheckError, ValueError) as exc:
        raise click.ClickException(str(exc)) from exc
    click.echo(dump_document(shares, n=n, k=k, base=base))


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
