"""Catalogue and loan records: categories, books, loans and their lines."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class Category:
    """A book category with an identifier and a display name."""

    id: str = ""
    name: str = ""

    def describe(self) -> str:
        """Return the multi-line description of the category."""
        return f"Category ID: {self.id}\nCategory Name: {self.name}\n"


@dataclass
class Book:
    """A catalogue entry."""

    isbn: str = ""
    title: str = ""
    author: str = ""
    publisher: str = ""
    category: Category = field(default_factory=Category)
    year_published: int = 0
    available: bool = True

    def describe(self) -> str:
        """Return the multi-line description of the book."""
        return (
            f"ISBN: {self.isbn}\n"
            f"Title: {self.title}\n"
            f"Author: {self.author}\n"
            f"Category: {self.category.name}\n"
            f"Year Published: {self.year_published}\n"
            f"Publisher: {self.publisher}\n"
            f"Available: {'Yes' if self.available else 'No'}\n"
        )


@dataclass
class LoanDetail:
    """One borrowed book within a loan."""

    loan_id: str = ""
    book: Book = field(default_factory=Book)
    quantity: int = 1
    returned: bool = False

    def describe(self) -> str:
        """Return the multi-line description of this loan line."""
        return (
            f"Loan ID: {self.loan_id}\n"
            f"{self.book.describe()}"
            f"Quantity: {self.quantity}\n"
            f"Returned: {'Yes' if self.returned else 'No'}\n"
        )


@dataclass
class Loan:
    """A loan slip issued to a member, holding its borrowed books."""

    loan_id: str = ""
    member_id: str = ""
    loan_date: str = ""
    due_date: str = ""
    return_date: str = ""
    details: list[LoanDetail] = field(default_factory=list)

    def add_detail(self, detail: LoanDetail) -> None:
        """Append a borrowed book line to the loan."""
        self.details.append(detail)

    def describe(self) -> str:
        """Return the multi-line description of the loan and its lines."""
        parts = [
            f"Loan ID: {self.loan_id}\n"
            f"Member ID: {self.member_id}\n"
            f"Loan Date: {self.loan_date}\n"
            f"Due Date: {self.due_date}\n"
            f"Return Date: {self.return_date or 'Not returned'}\n",
            "\n--- Loan Details ---\n",
        ]
        for detail in self.details:
            parts.append(detail.describe())
            parts.append("--------------------\n")
        return "".join(parts)