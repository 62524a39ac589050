"""User accounts: roles, persistence, registration and login."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from os import PathLike
from pathlib import Path
from typing import Iterable, Union

StrPath = Union[str, "PathLike[str]"]


class Role(enum.IntEnum):
    """Account role; the value is what the accounts file stores."""

    MEMBER = 0
    LIBRARIAN = 1


class DuplicateUsernameError(ValueError):
    """Raised when registering a username that is already taken."""

    def __init__(self, username: str) -> None:
        super().__init__(f"username already exists: {username}")
        self.username = username


@dataclass
class Account:
    """A login account linked to a librarian or member identifier."""

    username: str = ""
    password: str = ""
    role: Role = Role.MEMBER
    linked_id: str = ""

    def check_password(self, password: str) -> bool:
        """Return True if the given password matches."""
        return self.password == password


def load_accounts(path: StrPath) -> list[Account]:
    """Read accounts from a whitespace-separated file.

    A missing file yields an empty list. Reading stops at the first
    record whose role is not a valid role number.
    """
    try:
        text = Path(path).read_text(encoding="utf-8")
    except FileNotFoundError:
        return []

    accounts: list[Account] = []
    tokens = iter(text.split())
    for username, password, role_text, linked_id in zip(tokens, tokens, tokens, tokens):
        try:
            role = Role(int(role_text))
        except ValueError:
            break
        accounts.append(Account(username, password, role, linked_id))
    return accounts


def save_accounts(path: StrPath, accounts: Iterable[Account]) -> None:
    """Write accounts to a file, one per line, replacing its contents."""
    with open(path, "w", encoding="utf-8") as out:
        for acc in accounts:
            out.write(f"{acc.username} {acc.password} {int(acc.role)} {acc.linked_id}\n")


def generate_id(role: Role, accounts: Iterable[Account]) -> str:
    """Return the next identifier for a role, e.g. L001 or M001."""
    count = sum(1 for acc in accounts if acc.role == role)
    prefix = "L" if role == Role.LIBRARIAN else "M"
    return f"{prefix}{count + 1:03d}"


def register_account(accounts: list[Account], username: str, password: str) -> Account:
    """Create and append a new account.

    The first account ever registered becomes a librarian; later ones are
    members. Raises DuplicateUsernameError if the username is taken.
    """
    if any(acc.username == username for acc in accounts):
        raise DuplicateUsernameError(username)
    role = Role.MEMBER if accounts else Role.LIBRARIAN
    account = Account(username, password, role, generate_id(role, accounts))
    accounts.append(account)
    return account


def login(accounts: Iterable[Account], username: str, password: str) -> Account | None:
    """Return the account matching the credentials, or None."""
    return next(
        (acc for acc in accounts if acc.username == username and acc.check_password(password)),
        None,
    )