from libradesk.models import Book, Category, Loan, LoanDetail


def make_book(available=True):
    return Book(
        isbn="978-0",
        title="Dune",
        author="Herbert",
        publisher="Chilton",
        category=Category("C01", "Fiction"),
        year_published=1965,
        available=available,
    )


def test_category_describe():
    cat = Category("C01", "Fiction")
    assert cat.describe() == "Category ID: C01\nCategory Name: Fiction\n"


def test_category_defaults_empty():
    cat = Category()
    assert (cat.id, cat.name) == ("", "")


def test_book_defaults():
    book = Book()
    assert book.year_published == 0
    assert book.available is True
    assert book.category == Category()


def test_book_describe_order_and_fields():
    lines = make_book().describe().splitlines()
    assert lines == [
        "ISBN: 978-0",
        "Title: Dune",
        "Author: Herbert",
        "Category: Fiction",
        "Year Published: 1965",
        "Publisher: Chilton",
        "Available: Yes",
    ]


def test_book_describe_unavailable():
    assert make_book(available=False).describe().endswith("Available: No\n")


def test_book_fields_mutable():
    book = make_book()
    book.title = "Dune Messiah"
    book.available = False
    assert "Title: Dune Messiah\n" in book.describe()
    assert "Available: No\n" in book.describe()


def test_loan_detail_defaults():
    detail = LoanDetail()
    assert detail.quantity == 1
    assert detail.returned is False


def test_loan_detail_describe_wraps_book():
    book = make_book()
    detail = LoanDetail("LN1", book, 2)
    text = detail.describe()
    assert text.startswith("Loan ID: LN1\n")
    assert book.describe() in text
    assert text.endswith("Quantity: 2\nReturned: No\n")


def test_loan_detail_returned_flag():
    detail = LoanDetail("LN1", make_book(), 1, True)
    assert detail.describe().endswith("Returned: Yes\n")


def test_loan_add_detail_keeps_order():
    loan = Loan("LN1", "M001", "2024-01-01", "2024-01-15")
    first = LoanDetail("LN1", make_book(), 1)
    second = LoanDetail("LN1", make_book(False), 3)
    loan.add_detail(first)
    loan.add_detail(second)
    assert loan.details == [first, second]


def test_loan_not_returned_text():
    loan = Loan("LN1", "M001", "2024-01-01", "2024-01-15")
    assert "Return Date: Not returned\n" in loan.describe()


def test_loan_return_date_shown():
    loan = Loan("LN1", "M001", "2024-01-01", "2024-01-15")
    loan.return_date = "2024-01-10"
    assert "Return Date: 2024-01-10\n" in loan.describe()


def test_loan_describe_includes_details_with_separators():
    loan = Loan("LN1", "M001", "2024-01-01", "2024-01-15")
    detail = LoanDetail("LN1", make_book(), 1)
    loan.add_detail(detail)
    loan.add_detail(detail)
    text = loan.describe()
    assert text.count("--------------------\n") == 2
    assert text.count(detail.describe()) == 2
    assert text.index("--- Loan Details ---") < text.index(detail.describe())


def test_loan_describe_without_details():
    loan = Loan("LN1", "M001", "2024-01-01", "2024-01-15")
    assert loan.describe().endswith("\n--- Loan Details ---\n")


def test_loans_do_not_share_details():
    a = Loan()
    b = Loan()
    a.add_detail(LoanDetail())
    assert len(a.details) == 1
    assert b.details == []