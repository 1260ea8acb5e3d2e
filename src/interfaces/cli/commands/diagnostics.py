"""
診断用 CLI コマンド。
"""

from __future__ import annotations

import typer

from domain.value_objects import (
    is_account_token,
    is_pull_zone_name,
    is_storage_token,
    is_storage_zone_name,
)

app = typer.Typer(help="識別子の診断コマンド")


@app.command("validate")
def validate(
    access_key: str = typer.Option(..., "--access-key", envvar="STORAGE_ACCESS_KEY", help="検証するアクセストークン"),
    zone: str = typer.Option(..., "--zone", envvar="STORAGE_ZONE", help="検証するゾーン名"),
) -> None:
    """
    アクセストークンとゾーン名の書式をオフラインで検証する。
    """

    if is_account_token(access_key):
        token_kind = "account"
    elif is_storage_token(access_key):
        token_kind = "storage"
    else:
        token_kind = None

    zone_valid = is_storage_zone_name(zone)

    typer.echo(f"access_key: {token_kind or 'invalid'}")
    typer.echo(f"zone: {'storage' if zone_valid else 'invalid'} (pull zone compatible: {is_pull_zone_name(zone)})")

    if token_kind is None or not zone_valid:
        raise typer.Exit(code=1)
