#!/usr/bin/env python3
"""
Create the test users (one per role).

Skips everything if the admin account already exists.

Usage:
    python seed_users.py
"""

import sys

from rich.console import Console
from rich.table import Table

from modules.auth.passwords import PasswordHasher
from modules.auth.repository import UserRepository
from shared.database import get_supabase_client
from shared.models import UserRole

console = Console()

SEED_USERS = [
    ("admin@clickup-api.com", "Admin123!", UserRole.ADMIN),
    ("editor@clickup-api.com", "Editor123!", UserRole.EDITOR),
    ("viewer@clickup-api.com", "Viewer123!", UserRole.VIEWER),
]


def seed(users: UserRepository, hasher: PasswordHasher) -> bool:
    """Insert the seed users. Returns False if they were already present."""
    admin_email = SEED_USERS[0][0]
    if users.get_by_email(admin_email) is not None:
        return False

    for email, password, role in SEED_USERS:
        users.create(email, hasher.hash(password), role)
    return True


def main():
    console.print("[bold]Seeding TaskBridge users[/bold]")
    console.print()

    try:
        users = UserRepository(get_supabase_client())
    except RuntimeError as e:
        console.print(f"[red]Error:[/red] {e}")
        sys.exit(1)

    if not seed(users, PasswordHasher()):
        console.print("[yellow]Seed users already exist, skipping.[/yellow]")
        return

    table = Table(title="Test users")
    table.add_column("Email", style="cyan")
    table.add_column("Password")
    table.add_column("Role", style="green")
    for email, password, role in SEED_USERS:
        table.add_row(email, password, role.value)
    console.print(table)


if __name__ == "__main__":
    main()
