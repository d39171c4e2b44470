from collections.abc import Sequence

from rich.console import Console
from rich.table import Table

from reqres_client.models import User

console = Console(highlight=False)
err_console = Console(stderr=True, highlight=False)


def print_error(message: str) -> None:
    err_console.print(f"[red bold]Error:[/red bold] {message}")


def print_user(user: User) -> None:
    console.print(f"  [bold]User found:[/bold] {user.full_name} ({user.email})")


def print_user_not_found(user_id: int) -> None:
    console.print(f"  User with ID {user_id} not found or an error occurred.")


def print_users(users: Sequence[User]) -> None:
    if not users:
        console.print("  No users retrieved or an error occurred while fetching users.")
        return
    table = Table(title=f"Users ({len(users)})")
    table.add_column("ID", justify="right")
    table.add_column("Name")
    table.add_column("Email")
    for user in users:
        table.add_row(str(user.id), user.full_name, user.email)
    console.print(table)
