"""End-to-end tests driving the CLI."""

from decimal import Decimal

import pytest

from moneymanager.cli.main import cli


def invoke(cli_runner, cli_obj, *args, **kwargs):
    return cli_runner.invoke(cli, list(args), obj=cli_obj, **kwargs)


@pytest.fixture
def accounts(cli_runner, cli_obj):
    invoke(cli_runner, cli_obj, "account", "create", "Cash", "--id", "cash", "--balance", "5000", "--color", "#10b981")
    invoke(cli_runner, cli_obj, "account", "create", "Bank Account", "--id", "bank", "--balance", "25000")
    invoke(cli_runner, cli_obj, "init-categories")


def test_help_does_not_touch_database(cli_runner, tmp_path):
    db_path = tmp_path / "ledger.db"

    result = cli_runner.invoke(cli, ["--db-path", str(db_path), "--help"])

    assert result.exit_code == 0
    assert "Personal finance ledger" in result.output
    assert not db_path.exists()


def test_db_path_option_creates_database(cli_runner, tmp_path):
    db_path = tmp_path / "ledger.db"

    result = cli_runner.invoke(cli, ["--db-path", str(db_path), "account", "create", "Cash", "--id", "cash"])
    assert result.exit_code == 0
    assert "Created account 'Cash' (ID: cash)" in result.output

    result = cli_runner.invoke(cli, ["--db-path", str(db_path), "account", "list"])
    assert result.exit_code == 0
    assert "Cash" in result.output


def test_db_path_from_environment(cli_runner, tmp_path, monkeypatch):
    db_path = tmp_path / "env.db"
    monkeypatch.setenv("MONEYMANAGER_DB_PATH", str(db_path))

    result = cli_runner.invoke(cli, ["account", "total"])

    assert result.exit_code == 0
    assert "Total balance: $0.00" in result.output
    assert db_path.exists()


class TestAccountCommands:
    def test_create_and_list(self, cli_runner, cli_obj, accounts):
        result = invoke(cli_runner, cli_obj, "account", "list")

        assert result.exit_code == 0
        assert "Cash" in result.output
        assert "$5,000.00" in result.output
        assert "$25,000.00" in result.output

    def test_list_empty(self, cli_runner, cli_obj):
        result = invoke(cli_runner, cli_obj, "account", "list")
        assert result.exit_code == 0
        assert "No accounts found" in result.output

    def test_create_duplicate(self, cli_runner, cli_obj, accounts):
        result = invoke(cli_runner, cli_obj, "account", "create", "Cash")
        assert result.exit_code == 1
        assert "already exists" in result.output

    def test_create_negative_balance(self, cli_runner, cli_obj, account_service):
        result = invoke(cli_runner, cli_obj, "account", "create", "Card", "--id", "card", "--balance", "-120.50")
        assert result.exit_code == 0
        assert account_service.get_account("card").balance == Decimal("-120.50")

    def test_create_rejects_malformed_balance(self, cli_runner, cli_obj, account_service):
        result = invoke(cli_runner, cli_obj, "account", "create", "Card", "--id", "card", "--balance=--5")

        assert result.exit_code == 1
        assert "Error:" in result.output
        assert account_service.get_account("card") is None

    def test_update_by_name(self, cli_runner, cli_obj, accounts, account_service):
        result = invoke(cli_runner, cli_obj, "account", "update", "Cash", "--name", "Wallet")

        assert result.exit_code == 0
        assert account_service.get_account("cash").name == "Wallet"

    def test_update_requires_a_field(self, cli_runner, cli_obj, accounts):
        result = invoke(cli_runner, cli_obj, "account", "update", "cash")
        assert result.exit_code == 1
        assert "Nothing to update" in result.output

    def test_delete_with_confirmation(self, cli_runner, cli_obj, accounts, account_service):
        result = invoke(cli_runner, cli_obj, "account", "delete", "bank", input="y\n")

        assert result.exit_code == 0
        assert "Deleted account 'Bank Account'" in result.output
        assert account_service.get_account("bank") is None

    def test_delete_cancelled(self, cli_runner, cli_obj, accounts, account_service):
        result = invoke(cli_runner, cli_obj, "account", "delete", "bank", input="n\n")

        assert "Deletion cancelled" in result.output
        assert account_service.get_account("bank") is not None

    def test_delete_referenced_account(self, cli_runner, cli_obj, accounts):
        invoke(cli_runner, cli_obj, "transfer", "create", "--from", "bank", "--to", "cash", "--amount", "10")

        result = invoke(cli_runner, cli_obj, "account", "delete", "bank", "--yes")

        assert result.exit_code == 1
        assert "1 transfer" in result.output

    def test_unknown_account(self, cli_runner, cli_obj):
        result = invoke(cli_runner, cli_obj, "account", "delete", "savings", "--yes")
        assert result.exit_code == 1
        assert "Account 'savings' not found" in result.output

    def test_total(self, cli_runner, cli_obj, accounts):
        result = invoke(cli_runner, cli_obj, "account", "total")
        assert "Total balance: $30,000.00" in result.output


class TestCategoryCommands:
    def test_init_categories_is_idempotent(self, cli_runner, cli_obj):
        first = invoke(cli_runner, cli_obj, "init-categories")
        second = invoke(cli_runner, cli_obj, "init-categories")

        assert "Successfully created 17 categories" in first.output
        assert "already exist" in second.output

    def test_list(self, cli_runner, cli_obj, accounts):
        result = invoke(cli_runner, cli_obj, "category", "list", "--type", "income")

        assert result.exit_code == 0
        assert "Rental Income" in result.output
        assert "Food" not in result.output

    def test_list_empty(self, cli_runner, cli_obj):
        result = invoke(cli_runner, cli_obj, "category", "list")
        assert "init-categories" in result.output

    def test_create_and_delete(self, cli_runner, cli_obj, category_service):
        result = invoke(cli_runner, cli_obj, "category", "create", "Pet Care", "--icon", "Dog")
        assert result.exit_code == 0
        assert "(ID: pet-care)" in result.output

        result = invoke(cli_runner, cli_obj, "category", "delete", "Pet Care")
        assert result.exit_code == 0
        assert category_service.get_category("pet-care") is None

    def test_delete_used_category(self, cli_runner, cli_obj, accounts):
        invoke(
            cli_runner, cli_obj, "add", "--type", "EXPENSE", "--amount", "5",
            "--description", "Tea", "--category", "Food", "--account", "cash",
        )
        result = invoke(cli_runner, cli_obj, "category", "delete", "food")

        assert result.exit_code == 1
        assert "used by 1 transaction" in result.output


class TestTransactionCommands:
    def _add(self, cli_runner, cli_obj, *extra):
        args = [
            "add", "--type", "EXPENSE", "--amount", "250", "--description", "Groceries",
            "--category", "Food", "--account", "Cash", "--date", "2024-03-12 18:30",
        ]
        return invoke(cli_runner, cli_obj, *args, *extra)

    def test_add_updates_balance(self, cli_runner, cli_obj, accounts, transaction_service, account_service):
        result = self._add(cli_runner, cli_obj)

        assert result.exit_code == 0
        assert "Created transaction" in result.output
        assert "balance: $4,750.00" in result.output
        [txn] = transaction_service.list_transactions()
        # The category name resolves to its ID
        assert txn.category_id == "food"
        assert account_service.get_account("cash").balance == Decimal("4750.00")

    def test_add_rejects_bad_amount(self, cli_runner, cli_obj, accounts):
        result = invoke(
            cli_runner, cli_obj, "add", "--type", "EXPENSE", "--amount", "-5",
            "--description", "x", "--category", "food", "--account", "cash",
        )
        assert result.exit_code == 1
        assert "Error:" in result.output

    @pytest.mark.parametrize("amount", ["1e30", "100000000000000000"])
    def test_add_rejects_amount_too_large(self, cli_runner, cli_obj, accounts, transaction_service, amount):
        result = invoke(
            cli_runner, cli_obj, "add", "--type", "INCOME", "--amount", amount,
            "--description", "x", "--category", "salary", "--account", "cash",
        )

        assert result.exit_code == 1
        assert "out of range" in result.output
        assert transaction_service.list_transactions() == []

    def test_list_and_show(self, cli_runner, cli_obj, accounts, transaction_service):
        self._add(cli_runner, cli_obj)
        [txn] = transaction_service.list_transactions()

        listed = invoke(cli_runner, cli_obj, "transaction", "list", "--category", "food")
        shown = invoke(cli_runner, cli_obj, "transaction", "show", txn.id)

        assert "Found 1 transaction(s)" in listed.output
        assert "Groceries" in listed.output
        assert "Editable: yes" in shown.output

    def test_list_marks_locked_entries(self, cli_runner, cli_obj, accounts, clock):
        self._add(cli_runner, cli_obj)
        clock.advance(hours=13)

        result = invoke(cli_runner, cli_obj, "transaction", "list")

        assert "[locked]" in result.output

    def test_update(self, cli_runner, cli_obj, accounts, transaction_service, account_service):
        self._add(cli_runner, cli_obj)
        [txn] = transaction_service.list_transactions()

        result = invoke(cli_runner, cli_obj, "transaction", "update", txn.id, "--amount", "100", "--account", "bank")

        assert result.exit_code == 0
        assert account_service.get_account("cash").balance == Decimal("5000.00")
        assert account_service.get_account("bank").balance == Decimal("24900.00")

    def test_update_after_window(self, cli_runner, cli_obj, accounts, transaction_service, clock):
        self._add(cli_runner, cli_obj)
        [txn] = transaction_service.list_transactions()
        clock.advance(hours=12, minutes=1)

        result = invoke(cli_runner, cli_obj, "transaction", "update", txn.id, "--amount", "1")

        assert result.exit_code == 1
        assert "cannot be updated after 12 hours" in result.output

    def test_delete(self, cli_runner, cli_obj, accounts, transaction_service, account_service):
        self._add(cli_runner, cli_obj)
        [txn] = transaction_service.list_transactions()

        result = invoke(cli_runner, cli_obj, "transaction", "delete", txn.id, "--yes")

        assert result.exit_code == 0
        assert transaction_service.list_transactions() == []
        assert account_service.get_account("cash").balance == Decimal("5000.00")

    def test_delete_missing(self, cli_runner, cli_obj):
        result = invoke(cli_runner, cli_obj, "transaction", "delete", "nope", "--yes")
        assert result.exit_code == 1
        assert "Transaction nope not found" in result.output


class TestTransferCommands:
    def test_create_list_delete(self, cli_runner, cli_obj, accounts, transfer_service, account_service):
        result = invoke(
            cli_runner, cli_obj, "transfer", "create", "--from", "Bank Account", "--to", "cash",
            "--amount", "1,000", "--description", "ATM",
        )
        assert result.exit_code == 0
        assert "Cash: $6,000.00" in result.output
        assert "Bank Account: $24,000.00" in result.output

        listed = invoke(cli_runner, cli_obj, "transfer", "list")
        assert "Found 1 transfer(s)" in listed.output
        assert "ATM" in listed.output

        [transfer] = transfer_service.list_transfers()
        result = invoke(cli_runner, cli_obj, "transfer", "delete", transfer.id, "--yes")
        assert result.exit_code == 0
        assert account_service.get_total_balance() == Decimal("30000.00")
        assert account_service.get_account("cash").balance == Decimal("5000.00")

    def test_same_account(self, cli_runner, cli_obj, accounts):
        result = invoke(cli_runner, cli_obj, "transfer", "create", "--from", "cash", "--to", "Cash", "--amount", "5")
        assert result.exit_code == 1
        assert "to itself" in result.output
