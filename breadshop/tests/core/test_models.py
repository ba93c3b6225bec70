"""Unit tests for Account and AccountRepository."""

import pytest

from breadshop.core.errors import (
    DuplicateAccountError,
    DuplicateKeyError,
    DuplicateOrderError,
)
from breadshop.core.models import Account
from breadshop.core.repository import AccountRepository


class TestAccount:
    """Test balance and order bookkeeping on a single account."""

    def test_new_account_is_empty(self) -> None:
        account = Account()
        assert account.get_balance() == 0
        assert account.orders == {}

    def test_deposit_returns_new_balance(self) -> None:
        account = Account()
        assert account.deposit(300) == 300
        assert account.deposit(200) == 500
        assert account.get_balance() == 500

    def test_negative_deposit_debits(self) -> None:
        account = Account(balance=500)
        assert account.deposit(-480) == 20

    def test_deposits_commute(self) -> None:
        first, second = Account(), Account()
        first.deposit(120)
        first.deposit(-45)
        second.deposit(-45)
        second.deposit(120)
        assert first.get_balance() == second.get_balance() == 75

    def test_add_order(self) -> None:
        account = Account()
        account.add_order(1, 40)
        assert account.orders == {1: 40}

    def test_add_duplicate_order_raises(self) -> None:
        account = Account()
        account.add_order(1, 40)
        with pytest.raises(DuplicateOrderError) as exc_info:
            account.add_order(1, 10)
        assert exc_info.value.order_id == 1
        assert account.orders == {1: 40}

    def test_cancel_order_returns_quantity_and_removes(self) -> None:
        account = Account()
        account.add_order(1, 40)
        assert account.cancel_order(1) == 40
        assert 1 not in account.orders

    def test_cancel_missing_order_returns_none(self) -> None:
        account = Account()
        account.add_order(1, 40)
        assert account.cancel_order(2) is None
        assert account.orders == {1: 40}

    def test_cancel_zero_quantity_order_is_not_none(self) -> None:
        """A zero-quantity order is distinguishable from a missing one."""
        account = Account()
        account.add_order(7, 0)
        assert account.cancel_order(7) == 0
        assert account.cancel_order(7) is None


class TestAccountRepository:
    """Test account storage and lookup."""

    def test_add_and_get_account(self) -> None:
        repo = AccountRepository()
        account = Account()
        repo.add_account(1, account)
        assert repo.get_account(1) is account
        assert 1 in repo
        assert len(repo) == 1

    def test_get_missing_account_returns_none(self) -> None:
        repo = AccountRepository()
        assert repo.get_account(-5) is None
        assert -5 not in repo

    def test_add_duplicate_account_raises(self) -> None:
        repo = AccountRepository()
        original = Account()
        repo.add_account(1, original)
        with pytest.raises(DuplicateAccountError) as exc_info:
            repo.add_account(1, Account())
        assert exc_info.value.account_id == 1
        assert repo.get_account(1) is original

    def test_duplicate_errors_share_base(self) -> None:
        assert issubclass(DuplicateAccountError, DuplicateKeyError)
        assert issubclass(DuplicateOrderError, DuplicateKeyError)
        assert issubclass(DuplicateKeyError, ValueError)

    def test_repositories_are_independent(self) -> None:
        first, second = AccountRepository(), AccountRepository()
        first.add_account(1, Account())
        assert second.get_account(1) is None
