"""Librarian profiles, member administration and catalogue management."""

from __future__ import annotations

import re
from dataclasses import dataclass
from os import PathLike
from pathlib import Path
from typing import Iterable, Union

from libradesk.accounts import Account, Role
from libradesk.models import Book, Category

StrPath = Union[str, "PathLike[str]"]

_FIELD_SEP = "|"
_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")


def _read_lines(path: StrPath) -> list[str]:
    """Return the lines of a text file, the way a line-by-line reader sees them."""
    text = Path(path).read_text(encoding="utf-8")
    if not text:
        return []
    lines = text.split("\n")
    if text.endswith("\n"):
        lines.pop()
    return lines


def _split_fields(line: str, count: int) -> list[str]:
    """Split a line on the field separator, padding missing fields with ''."""
    parts = line.split(_FIELD_SEP, count - 1)
    return parts + [""] * (count - len(parts))


@dataclass
class Librarian:
    """A librarian's personal profile, keyed by the account's linked ID."""

    id: str = ""
    name: str = ""
    email: str = ""
    phone: str = ""

    def profile_line(self) -> str:
        """Return the profile as one record of the librarians file."""
        return _FIELD_SEP.join((self.id, self.name, self.email, self.phone))

    def describe(self) -> str:
        """Return the multi-line description of the profile."""
        return (
            f"ID: {self.id}\n"
            f"Full Name: {self.name}\n"
            f"Email: {self.email}\n"
            f"Phone: {self.phone}\n"
        )

    def save_profile(self, path: StrPath) -> None:
        """Store the profile, replacing any record with the same ID or appending one."""
        try:
            existing = _read_lines(path)
        except FileNotFoundError:
            existing = []

        record = self.profile_line()
        found = False
        lines: list[str] = []
        for line in existing:
            if line.split(_FIELD_SEP, 1)[0] == self.id:
                lines.append(record)
                found = True
            else:
                lines.append(line)
        if not found:
            lines.append(record)

        with open(path, "w", encoding="utf-8") as out:
            out.writelines(f"{line}\n" for line in lines)


def find_profile(path: StrPath, librarian_id: str) -> Librarian | None:
    """Return the stored profile for an ID, or None if there is none.

    Raises FileNotFoundError if the librarians file does not exist.
    """
    for line in _read_lines(path):
        lid, name, email, phone = _split_fields(line, 4)
        if lid == librarian_id:
            return Librarian(lid, name, email, phone.split(_FIELD_SEP, 1)[0])
    return None


def other_librarians(accounts: Iterable[Account], current_id: str) -> list[Account]:
    """Return librarian accounts other than the one with the given linked ID."""
    return [
        acc for acc in accounts
        if acc.role == Role.LIBRARIAN and acc.linked_id != current_id
    ]


def members(accounts: Iterable[Account]) -> list[Account]:
    """Return the member accounts."""
    return [acc for acc in accounts if acc.role == Role.MEMBER]


def delete_member(accounts: list[Account], username: str) -> int:
    """Remove member accounts with the given username; return how many went."""
    kept = [
        acc for acc in accounts
        if not (acc.role == Role.MEMBER and acc.username == username)
    ]
    removed = len(accounts) - len(kept)
    accounts[:] = kept
    return removed


def find_book(books: Iterable[Book], isbn: str) -> Book | None:
    """Return the first book with the given ISBN, or None."""
    return next((book for book in books if book.isbn == isbn), None)


def edit_book(
    books: Iterable[Book],
    isbn: str,
    title: str,
    author: str,
    publisher: str,
    category: Category,
    year_published: int,
    available: bool,
) -> Book | None:
    """Update the first book with the given ISBN; return it, or None if absent."""
    book = find_book(books, isbn)
    if book is None:
        return None
    book.title = title
    book.author = author
    book.publisher = publisher
    book.category = category
    book.year_published = year_published
    book.available = available
    return book


def delete_book(books: list[Book], isbn: str) -> int:
    """Remove every book with the given ISBN; return how many went."""
    kept = [book for book in books if book.isbn != isbn]
    removed = len(books) - len(kept)
    books[:] = kept
    return removed


def search_books(books: Iterable[Book], keyword: str) -> list[Book]:
    """Return books whose ISBN or title contains the keyword."""
    return [book for book in books if keyword in book.isbn or keyword in book.title]


def format_book_row(book: Book) -> str:
    """Return the one-line listing of a book."""
    status = "Available" if book.available else "Unavailable"
    return " | ".join(
        (
            book.isbn,
            book.title,
            book.author,
            book.publisher,
            book.category.name,
            str(book.year_published),
            status,
        )
    )


def format_search_result(book: Book) -> str:
    """Return the labelled one-line description of a search hit."""
    status = "Available" if book.available else "Not Available"
    return (
        f"ISBN: {book.isbn}"
        f" | Title: {book.title}"
        f" | Author: {book.author}"
        f" | Publisher: {book.publisher}"
        f" | Year: {book.year_published}"
        f" | Category: {book.category.name}"
        f" | Status: {status}"
    )


def _parse_int_prefix(text: str) -> tuple[int | None, str]:
    """Read a leading integer, skipping whitespace; return it and the rest."""
    match = _INT_PREFIX.match(text)
    if match is None:
        return None, text
    return int(match.group(1)), text[match.end():]


def _parse_book(line: str) -> Book:
    isbn, title, author, publisher, cat_id, cat_name, rest = _split_fields(line, 7)
    year, rest = _parse_int_prefix(rest)
    if year is None:
        return Book(isbn, title, author, publisher, Category(cat_id, cat_name), 0, True)
    flag, _ = _parse_int_prefix(rest[1:])
    available = bool(flag) if flag is not None else False
    return Book(isbn, title, author, publisher, Category(cat_id, cat_name), year, available)


def load_books(path: StrPath) -> list[Book]:
    """Read books from a '|'-separated file; a missing file yields an empty list."""
    try:
        lines = _read_lines(path)
    except FileNotFoundError:
        return []
    return [_parse_book(line) for line in lines if line.strip()]


def save_books(path: StrPath, books: Iterable[Book], append: bool = False) -> None:
    """Write books to a file, replacing its contents or appending to them."""
    with open(path, "a" if append else "w", encoding="utf-8") as out:
        for book in books:
            out.write(
                _FIELD_SEP.join(
                    (
                        book.isbn,
                        book.title,
                        book.author,
                        book.publisher,
                        book.category.id,
                        book.category.name,
                        str(book.year_published),
                        str(int(book.available)),
                    )
                )
                + "\n"
            )