"""Interactive text menu for logging in, registering and managing the library."""

from __future__ import annotations

import argparse
import re
import sys
from pathlib import Path
from typing import Sequence, TextIO

from libradesk.accounts import (
    Account,
    DuplicateUsernameError,
    Role,
    StrPath,
    load_accounts,
    login,
    register_account,
    save_accounts,
)
from libradesk.librarian import (
    Librarian,
    delete_book,
    delete_member,
    edit_book,
    find_book,
    find_profile,
    format_book_row,
    format_search_result,
    load_books,
    members,
    other_librarians,
    save_books,
    search_books,
)
from libradesk.models import Book, Category

_WORD = re.compile(r"\S+")
_INT_PREFIX = re.compile(r"[+-]?\d+")

_MAIN_MENU = "\n1. Login\n2. Register\n3. Exit\nSelect: "
_LIBRARIAN_MENU = (
    "\n--- LIBRARIAN MENU ---\n"
    "1. View personal info\n"
    "2. Edit personal info\n"
    "3. View other librarians\n"
    "4. View members\n"
    "5. Delete member\n"
    "6. Add book\n"
    "7. Edit book\n"
    "8. Delete book\n"
    "9. View books\n"
    "10. Search books\n"
    "11. Save books to file (overwrite)\n"
    "0. Logout\nSelect: "
)


class _Input:
    """Reads whitespace-separated words and whole lines from a text stream."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self._pending = ""

    def _fill(self) -> bool:
        line = self._stream.readline()
        if not line:
            return False
        self._pending += line
        return True

    def skip_ws(self) -> None:
        while True:
            stripped = self._pending.lstrip()
            if stripped:
                self._pending = stripped
                return
            self._pending = ""
            if not self._fill():
                raise EOFError

    def word(self) -> str:
        self.skip_ws()
        match = _WORD.match(self._pending)
        assert match is not None
        self._pending = self._pending[match.end():]
        return match.group(0)

    def integer(self) -> int:
        match = _INT_PREFIX.match(self.word())
        return int(match.group(0)) if match else 0

    def line(self) -> str:
        if not self._pending and not self._fill():
            raise EOFError
        text, newline, rest = self._pending.partition("\n")
        self._pending = rest
        return text.rstrip("\r") if newline else text

    def line_after_ws(self) -> str:
        self.skip_ws()
        return self.line()


class Session:
    """One run of the interactive menu over a set of data files."""

    def __init__(
        self,
        accounts_path: StrPath = "./data/accounts.txt",
        books_path: StrPath = "./data/books.txt",
        librarians_path: StrPath = "./data/librarians.txt",
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
    ) -> None:
        self.accounts_path = accounts_path
        self.books_path = books_path
        self.librarians_path = librarians_path
        self._in = _Input(stdin if stdin is not None else sys.stdin)
        self._out = stdout if stdout is not None else sys.stdout
        self.accounts: list[Account] = load_accounts(accounts_path)
        self.books: list[Book] = load_books(books_path)
        self.current_user: Account | None = None

    def _write(self, text: str) -> None:
        self._out.write(text)
        self._out.flush()

    def run(self) -> None:
        """Serve the menus until the user exits or input runs out."""
        try:
            while True:
                if self.current_user is None:
                    if not self._main_menu():
                        return
                elif self.current_user.role == Role.LIBRARIAN:
                    self._librarian_menu(self.current_user)
                else:
                    self._write("Member features are not implemented yet.\n")
                    self.current_user = None
        except EOFError:
            return

    def _credentials(self) -> tuple[str, str]:
        self._write("Username: ")
        username = self._in.word()
        self._write("Password: ")
        return username, self._in.word()

    def _main_menu(self) -> bool:
        self._write(_MAIN_MENU)
        choice = self._in.integer()
        if choice == 1:
            username, entered = self._credentials()
            self.current_user = login(self.accounts, username, entered)
            if self.current_user is None:
                self._write("Invalid username or password!\n")
        elif choice == 2:
            username, entered = self._credentials()
            try:
                account = register_account(self.accounts, username, entered)
            except DuplicateUsernameError:
                self._write("⚠ Username da ton tai! Vui long chon username khac.\n")
            else:
                kind = "Librarian" if account.role == Role.LIBRARIAN else "Member"
                self._write(f" Dang ky thanh cong tai khoan: {kind}")
                save_accounts(self.accounts_path, self.accounts)
        else:
            return False
        return True

    def _librarian_menu(self, user: Account) -> None:
        profile = Librarian(user.linked_id, "Unknown Name", "", "")
        self._write(_LIBRARIAN_MENU)
        choice = self._in.integer()
        if choice == 1:
            self._view_profile(profile)
        elif choice == 2:
            self._edit_profile(profile)
        elif choice == 3:
            self._write("\n--- Other Librarians ---\n")
            self._list_accounts(other_librarians(self.accounts, user.linked_id))
        elif choice == 4:
            self._write("\n--- Members List ---\n")
            self._list_accounts(members(self.accounts))
        elif choice == 5:
            self._write("Enter member username to delete: ")
            delete_member(self.accounts, self._in.word())
            save_accounts(self.accounts_path, self.accounts)
        elif choice == 6:
            self._add_book()
        elif choice == 7:
            self._write("Enter ISBN of the book to edit: ")
            self._edit_book(self._in.word())
        elif choice == 8:
            self._write("Enter ISBN of the book to delete: ")
            delete_book(self.books, self._in.word())
        elif choice == 9:
            self._write("\n--- Book List ---\n")
            self._write("".join(f"{format_book_row(book)}\n" for book in self.books))
        elif choice == 10:
            self._search_books()
        elif choice == 11:
            save_books(self.books_path, self.books, False)
            self._write("Books saved successfully!\n")
        elif choice == 0:
            self.current_user = None

    def _list_accounts(self, accounts: list[Account]) -> None:
        self._write(
            "".join(f"Username: {acc.username} | ID: {acc.linked_id}\n" for acc in accounts)
        )

    def _view_profile(self, profile: Librarian) -> None:
        try:
            stored = find_profile(self.librarians_path, profile.id)
        except FileNotFoundError:
            self._write("No librarian data file found!\n")
            return
        if stored is None:
            self._write("No profile found for this librarian.\n")
        else:
            self._write("\n--- Personal Information ---\n" + stored.describe())

    def _edit_profile(self, profile: Librarian) -> None:
        self._write("\nEnter new full name: ")
        profile.name = self._in.line_after_ws()
        self._write("Enter new email: ")
        profile.email = self._in.line()
        self._write("Enter new phone number: ")
        profile.phone = self._in.line()
        profile.save_profile(self.librarians_path)

    def _read_book_fields(self, prefix: str) -> tuple[str, str, str, Category, int]:
        self._write(f"Enter {prefix}book title: ")
        title = self._in.line_after_ws()
        self._write(f"Enter {prefix}author: ")
        author = self._in.line()
        self._write(f"Enter {prefix}publisher: ")
        publisher = self._in.line()
        self._write(f"Enter {prefix}category ID: ")
        cat_id = self._in.line()
        self._write(f"Enter {prefix}category name: ")
        cat_name = self._in.line()
        self._write(f"Enter {prefix}publication year: ")
        year = self._in.integer()
        return title, author, publisher, Category(cat_id, cat_name), year

    def _add_book(self) -> None:
        self._write("Enter ISBN: ")
        isbn = self._in.line_after_ws()
        title, author, publisher, category, year = self._read_book_fields("")
        self.books.append(Book(isbn, title, author, publisher, category, year, True))

    def _edit_book(self, isbn: str) -> None:
        if find_book(self.books, isbn) is None:
            return
        title, author, publisher, category, year = self._read_book_fields("new ")
        self._write("Available? (1=Yes, 0=No): ")
        available = self._in.integer() != 0
        edit_book(self.books, isbn, title, author, publisher, category, year, available)

    def _search_books(self) -> None:
        self._write("Enter ISBN or Title keyword: ")
        keyword = self._in.line_after_ws()
        self._write("\n--- Search Results ---\n")
        self._write(
            "".join(f"{format_search_result(book)}\n" for book in search_books(self.books, keyword))
        )


def main(argv: Sequence[str] | None = None) -> int:
    """Start the interactive library menu."""
    parser = argparse.ArgumentParser(prog="libradesk", description="Library management menu.")
    parser.add_argument("--data-dir", default="./data", help="directory holding the data files")
    args = parser.parse_args(argv)
    data_dir = Path(args.data_dir)
    data_dir.mkdir(parents=True, exist_ok=True)
    Session(
        data_dir / "accounts.txt",
        data_dir / "books.txt",
        data_dir / "librarians.txt",
    ).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())