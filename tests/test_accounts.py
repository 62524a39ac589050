import pytest

from libradesk.accounts import (
    Account,
    DuplicateUsernameError,
    Role,
    generate_id,
    load_accounts,
    login,
    register_account,
    save_accounts,
)

password = "password"


def test_role_values_read_from_file(tmp_path):
    path = tmp_path / "accounts.txt"
    path.write_text(
        "alice password 1 L001\nbob password 0 M001\n",
        encoding="utf-8",
    )
    loaded = load_accounts(path)
    assert [a.role for a in loaded] == [Role.LIBRARIAN, Role.MEMBER]


def test_check_password():
    acc = Account("alice", password, Role.MEMBER, "M001")
    wrong = "secret"
    assert acc.check_password(password) is True
    assert acc.check_password(wrong) is False


def test_first_registration_is_librarian():
    accounts = []
    acc = register_account(accounts, "alice", password)
    assert acc.role == Role.LIBRARIAN
    assert acc.linked_id == "L001"
    assert accounts == [acc]


def test_later_registrations_are_members():
    accounts = []
    register_account(accounts, "alice", password)
    bob = register_account(accounts, "bob", password)
    carol = register_account(accounts, "carol", password)
    assert bob.role == Role.MEMBER
    assert bob.linked_id == "M001"
    assert carol.linked_id == "M002"


def test_duplicate_username_raises_and_leaves_list():
    accounts = []
    register_account(accounts, "alice", password)
    with pytest.raises(DuplicateUsernameError):
        register_account(accounts, "alice", password)
    assert len(accounts) == 1


def test_generate_id_counts_only_matching_role():
    accounts = [
        Account("a", password, Role.LIBRARIAN, "L001"),
        Account("b", password, Role.MEMBER, "M001"),
        Account("c", password, Role.LIBRARIAN, "L002"),
    ]
    assert generate_id(Role.LIBRARIAN, accounts).startswith("L")
    assert generate_id(Role.LIBRARIAN, accounts)[1:] == "003"
    assert generate_id(Role.MEMBER, accounts) == "M002"


def test_login_success_returns_same_object():
    accounts = []
    acc = register_account(accounts, "alice", password)
    assert login(accounts, "alice", password) is acc


def test_login_failures():
    accounts = []
    register_account(accounts, "alice", password)
    wrong = "secret"
    assert login(accounts, "alice", wrong) is None
    assert login(accounts, "nobody", password) is None


def test_save_format(tmp_path):
    path = tmp_path / "accounts.txt"
    save_accounts(path, [Account("alice", password, Role.LIBRARIAN, "L001")])
    assert path.read_text(encoding="utf-8") == "alice password 1 L001\n"


def test_round_trip(tmp_path):
    path = tmp_path / "accounts.txt"
    accounts = []
    register_account(accounts, "alice", password)
    register_account(accounts, "bob", password)
    save_accounts(path, accounts)
    assert load_accounts(path) == accounts


def test_load_missing_file(tmp_path):
    assert load_accounts(tmp_path / "missing.txt") == []


def test_load_stops_at_bad_role(tmp_path):
    path = tmp_path / "accounts.txt"
    path.write_text(
        "alice password 1 L001\nbob password x M001\ncarol password 0 M002\n",
        encoding="utf-8",
    )
    loaded = load_accounts(path)
    assert [a.username for a in loaded] == ["alice"]


def test_load_ignores_incomplete_trailing_record(tmp_path):
    path = tmp_path / "accounts.txt"
    path.write_text("alice password 1 L001\nbob password\n", encoding="utf-8")
    loaded = load_accounts(path)
    assert len(loaded) == 1
    assert loaded[0].role == Role.LIBRARIAN


def test_save_overwrites(tmp_path):
    path = tmp_path / "accounts.txt"
    save_accounts(path, [Account("alice", password, Role.LIBRARIAN, "L001")])
    save_accounts(path, [])
    assert load_accounts(path) == []