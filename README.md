# libradesk

libradesk is a small console program for running a library. It keeps user
accounts, the book catalogue and librarian profiles in plain text files.
Librarians use its menu to manage books and member accounts.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Running

```
libradesk
```

By default the program reads and writes its data under `./data/`, and creates
that directory if it is missing. Use `--data-dir` to pick another directory:

```
libradesk --data-dir /path/to/data
```

The data directory holds three files:

- `accounts.txt`: one account per line, `username password role id`.
  The role is `0` for a member and `1` for a librarian.
- `books.txt`: one book per line, fields separated by `|`:
  `isbn|title|author|publisher|category id|category name|year|available`,
  where `available` is `1` or `0`.
- `librarians.txt`: librarian profiles, one per line, `id|name|email|phone`.

The first menu offers `1. Login`, `2. Register` and `3. Exit`; any other choice
also exits, as does the end of input.

The first account you register becomes a librarian with ID `L001`. Every
account registered after that is a member, with IDs `M001`, `M002` and so on.
A username can only be registered once.

When you log in as a librarian, the menu lets you:

- view your personal information from `librarians.txt`, or edit it (the new
  name, e-mail and phone replace your record there, or are added as one)
- list the other librarians
- list the members, or delete a member by username
- add, edit, delete, list and search books (search matches a keyword anywhere
  in the ISBN or the title)
- save the book list to `books.txt`, overwriting its old contents

Book changes stay in memory until you choose to save them. Account changes
are written to `accounts.txt` as soon as they are made.

## Using it as a library

```python
from libradesk.accounts import load_accounts, register_account, login, save_accounts
from libradesk.librarian import load_books, search_books, format_book_row

password = "password"

accounts = load_accounts("data/accounts.txt")
register_account(accounts, "alice", password)
save_accounts("data/accounts.txt", accounts)

user = login(accounts, "alice", password)

books = load_books("data/books.txt")
for book in search_books(books, "Python"):
    print(format_book_row(book))
```

The modules:

- `libradesk.models`: the `Category`, `Book`, `Loan` and `LoanDetail`
  dataclasses, each with a `describe()` method returning a text description;
  `Loan.add_detail()` appends a borrowed-book line.
- `libradesk.accounts`: `Role`, `Account`, `load_accounts`, `save_accounts`,
  `generate_id`, `register_account` and `login`. `register_account` raises
  `DuplicateUsernameError` if the username is taken; `login` returns `None`
  if the username or password is wrong.
- `libradesk.librarian`: the `Librarian` profile (`describe`, `profile_line`,
  `save_profile`), `find_profile`, `other_librarians`, `members`,
  `delete_member`, `find_book`, `edit_book`, `delete_book`, `search_books`,
  `format_book_row`, `format_search_result`, `load_books` and `save_books`.
- `libradesk.cli`: `Session`, which runs the menu over given data files and
  streams, and `main`, the `libradesk` command.

## What it does not do

- Members can log in, but there is no member menu: the program says member
  features are not implemented and logs them straight out.
- Loans exist only as the `Loan` and `LoanDetail` classes. Nothing records
  loans in a file, and no menu lets anyone borrow or return a book.
- Passwords are stored and compared as plain text.