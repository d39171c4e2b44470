import asyncio
from collections.abc import Callable, Coroutine
from pathlib import Path
from typing import Annotated, Any

import typer
from config import ConfigurationSet

from reqres_client.cli._logging import configure_logging
from reqres_client.cli._output import console, print_error, print_user, print_user_not_found, print_users
from reqres_client.config import create_config
from reqres_client.errors import ConfigurationError
from reqres_client.factory import user_service_session

app = typer.Typer(name="reqres", help="ReqRes API client - look up users with caching and retry")


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable DEBUG logging")] = False,
    config_path: Annotated[Path, typer.Option("--config", help="YAML config file")] = Path("config.yaml"),
) -> None:
    """ReqRes API client - look up users with caching and retry."""
    configure_logging(verbose=verbose)
    ctx.obj = create_config(yaml_path=str(config_path))
    if ctx.invoked_subcommand is None:
        raise typer.Exit()


_UserIdArg = Annotated[int, typer.Argument(help="ID of the user to fetch")]
_PageOpt = Annotated[int, typer.Option("--page", help="Page to fetch (values below 1 fetch page 1)")]
_AllOpt = Annotated[bool, typer.Option("--all", help="Fetch every page")]


def _run(coro_fn: Callable[[ConfigurationSet], Coroutine[Any, Any, None]], ctx: typer.Context) -> None:
    try:
        asyncio.run(coro_fn(ctx.obj))
    except ConfigurationError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e


@app.command()
def user(ctx: typer.Context, user_id: _UserIdArg) -> None:
    """Fetch a single user by ID."""

    async def _go(cfg: ConfigurationSet) -> None:
        async with user_service_session(cfg) as service:
            found = await service.get_user_by_id(user_id)
        if found is None:
            print_user_not_found(user_id)
            raise typer.Exit(code=1)
        print_user(found)

    _run(_go, ctx)


@app.command()
def users(ctx: typer.Context, page: _PageOpt = 1, all_pages: _AllOpt = False) -> None:
    """List users on one page, or across all pages with --all."""

    async def _go(cfg: ConfigurationSet) -> None:
        async with user_service_session(cfg) as service:
            if all_pages:
                found = await service.get_all_users()
            else:
                found = await service.get_users(page)
        print_users(found)

    _run(_go, ctx)


@app.command()
def demo(ctx: typer.Context) -> None:
    """Fetch user 2, a missing user, then all users, through one cached session."""

    async def _go(cfg: ConfigurationSet) -> None:
        async with user_service_session(cfg) as service:
            console.print("[bold]--- ReqRes API Client Demo ---[/bold]")

            console.print("\nFetching user with ID 2...")
            found = await service.get_user_by_id(2)
            if found is not None:
                print_user(found)
            else:
                print_user_not_found(2)

            console.print("\nFetching non-existent user with ID 999...")
            missing = await service.get_user_by_id(999)
            if missing is not None:
                console.print(f"  [red]Unexpectedly found:[/red] {missing.full_name}")
            else:
                console.print("  User with ID 999 not found (as expected).")

            console.print("\nFetching all users...")
            print_users(await service.get_all_users())

            console.print("\nFetching user with ID 2 again (cached)...")
            again = await service.get_user_by_id(2)
            if again is not None:
                print_user(again)
            console.print("\n[bold]--- Demo Complete ---[/bold]")

    _run(_go, ctx)
