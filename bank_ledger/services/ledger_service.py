"""
Ledger service — the core of the banking system.

The Ledger owns every account and the bank's operating funds.
It enforces the fundamental rules:
1. Money only moves between an account and the operating funds —
   it is never created or destroyed by a transaction
2. Cash and outstanding balances never go negative
3. Every transaction amount respects the configured limits
4. The operating funds cover every payout before it is approved

Every public method validates first and mutates last. If any
check fails, nothing is changed. Checks run in a fixed order:
amount validity, then account existence, then funds availability.

Operations on an account return an AccountSnapshot taken inside
the same critical section as the change, so callers never have to
read the account a second time.
"""

import threading
from contextlib import contextmanager
from decimal import Decimal, Inexact, localcontext

from bank_ledger.errors import (
    AccountNotFound,
    DuplicateAccount,
    InsufficientPool,
    InvalidAmount,
    LedgerError,
    LimitExceeded,
    NonZeroOutstanding,
)
from bank_ledger.logging_config import get_logger
from bank_ledger.models.account import Account, AccountSnapshot
from bank_ledger.models.enums import TransactionKind
from bank_ledger.utils import to_decimal

logger = get_logger(__name__)


class Ledger:
    """
    All account and operating-funds operations pass through here.

    A Ledger is an ordinary object: create as many as you need.
    Each public method runs under the instance's lock, so one
    operation's check-then-mutate sequence can't interleave with
    another's. Log lines are written before the lock is released,
    so the totals they report belong to that operation.
    """

    def __init__(self, max_deposit, max_withdraw, max_outstanding):
        self._max_deposit = self._positive_limit(max_deposit, TransactionKind.DEPOSIT)
        self._max_withdraw = self._positive_limit(max_withdraw, TransactionKind.WITHDRAW)
        self._max_outstanding = self._positive_limit(
            max_outstanding, TransactionKind.OUTSTANDING
        )
        self._operating_funds = Decimal("0")
        self._accounts: dict[str, Account] = {}
        self._lock = threading.RLock()

    @staticmethod
    def _positive_limit(value, kind: TransactionKind) -> Decimal:
        value = to_decimal(value, kind)
        if value <= 0:
            raise InvalidAmount(value, kind)
        return value

    @contextmanager
    def _operation(self, name: str, **context):
        """Run one operation as a critical section, logging rejections."""
        with self._lock:
            try:
                yield
            except LedgerError as e:
                logger.warning(
                    f"{name}_rejected",
                    error=e.__class__.__name__,
                    reason=str(e),
                    **context,
                )
                raise

    @staticmethod
    @contextmanager
    def _exact_arithmetic(amount, kind: TransactionKind):
        """
        Reject a transaction whose new balances would be rounded.

        Both sides of a transfer must change by exactly the same
        amount, so any rounding in the block raises InvalidAmount.
        Compute new values inside the block and commit them after.
        """
        with localcontext() as ctx:
            ctx.traps[Inexact] = True
            try:
                yield
            except Inexact:
                raise InvalidAmount(
                    amount,
                    kind,
                    reason="Resulting balance has more digits than can be stored exactly",
                ) from None

    # --- Limits and operating funds ---

    @property
    def max_deposit(self) -> Decimal:
        return self._max_deposit

    @property
    def max_withdraw(self) -> Decimal:
        return self._max_withdraw

    @property
    def max_outstanding(self) -> Decimal:
        return self._max_outstanding

    @property
    def operating_funds(self) -> Decimal:
        return self._operating_funds

    def set_max_deposit(self, value) -> None:
        self.set_limits(max_deposit=value)

    def set_max_withdraw(self, value) -> None:
        self.set_limits(max_withdraw=value)

    def set_max_outstanding(self, value) -> None:
        self.set_limits(max_outstanding=value)

    def set_limits(self, max_deposit=None, max_withdraw=None, max_outstanding=None) -> None:
        """
        Replace one or more limits.

        None leaves a limit unchanged. Every new value is validated
        before any is applied.
        """
        with self._lock:
            updates = {}
            if max_deposit is not None:
                updates["max_deposit"] = self._positive_limit(
                    max_deposit, TransactionKind.DEPOSIT
                )
            if max_withdraw is not None:
                updates["max_withdraw"] = self._positive_limit(
                    max_withdraw, TransactionKind.WITHDRAW
                )
            if max_outstanding is not None:
                updates["max_outstanding"] = self._positive_limit(
                    max_outstanding, TransactionKind.OUTSTANDING
                )
            for name, value in updates.items():
                setattr(self, f"_{name}", value)
                logger.info("limit_updated", limit=name, value=str(value))

    def check_deposit_amount(self, amount) -> Decimal:
        """Validate 0 < amount <= max_deposit. Returns the amount as Decimal."""
        return self._check_amount(amount, self._max_deposit, TransactionKind.DEPOSIT)

    def check_withdraw_amount(self, amount) -> Decimal:
        return self._check_amount(amount, self._max_withdraw, TransactionKind.WITHDRAW)

    def check_outstanding_amount(self, amount) -> Decimal:
        return self._check_amount(
            amount, self._max_outstanding, TransactionKind.OUTSTANDING
        )

    @staticmethod
    def _check_amount(amount, limit: Decimal, kind: TransactionKind) -> Decimal:
        amount = to_decimal(amount, kind)
        if amount <= 0:
            raise InvalidAmount(amount, kind)
        if amount > limit:
            raise LimitExceeded(amount, limit, kind)
        return amount

    def check_operating_funds(self, amount) -> None:
        """Raise InsufficientPool if the operating funds cannot cover amount."""
        amount = to_decimal(amount)
        if amount > self._operating_funds:
            raise InsufficientPool(amount, self._operating_funds)

    def inject_operating_funds(self, amount) -> Decimal:
        """
        Add capital to the operating funds.

        This is the only way money enters the pool without an
        account on the other side. Returns the new operating funds.
        """
        with self._operation("inject_operating_funds", amount=str(amount)):
            amount = to_decimal(amount, TransactionKind.CAPITAL)
            if amount <= 0:
                raise InvalidAmount(amount, TransactionKind.CAPITAL)
            with self._exact_arithmetic(amount, TransactionKind.CAPITAL):
                operating_funds = self._operating_funds + amount
            self._operating_funds = operating_funds

            logger.info(
                "operating_funds_injected",
                amount=str(amount),
                operating_funds=str(operating_funds),
            )
        return operating_funds

    # --- Account lookup ---

    def get_account(self, owner: str) -> Account:
        """
        Get the live Account for an owner. Raises AccountNotFound.

        The Account keeps changing as other operations run; use
        get_account_snapshot() for a consistent read.
        """
        with self._lock:
            account = self._accounts.get(owner)
            if account is None:
                raise AccountNotFound(owner)
            return account

    def get_account_snapshot(self, owner: str) -> AccountSnapshot:
        with self._lock:
            return self.get_account(owner).snapshot()

    def get_account_balance(self, owner: str) -> Decimal:
        return self.get_account_snapshot(owner).balance

    def get_outstanding_balance(self, owner: str) -> Decimal:
        return self.get_account_snapshot(owner).outstanding_balance

    def owners(self) -> list[str]:
        with self._lock:
            return sorted(self._accounts)

    def __contains__(self, owner) -> bool:
        return owner in self._accounts

    def __len__(self) -> int:
        return len(self._accounts)

    # --- Account lifecycle ---

    def open_account(self, owner: str, starting_deposit) -> AccountSnapshot:
        """
        Open an account with a starting deposit.

        The starting deposit is held to the same limits as any
        other deposit, and goes straight into the operating funds.
        """
        with self._operation("open_account", owner=owner, amount=str(starting_deposit)):
            starting_deposit = self.check_deposit_amount(starting_deposit)
            if owner in self._accounts:
                raise DuplicateAccount(owner)
            with self._exact_arithmetic(starting_deposit, TransactionKind.DEPOSIT):
                operating_funds = self._operating_funds + starting_deposit

            account = Account(owner, starting_deposit)
            self._accounts[owner] = account
            self._operating_funds = operating_funds
            snapshot = account.snapshot()

            logger.info(
                "account_opened",
                owner=owner,
                starting_deposit=str(starting_deposit),
                operating_funds=str(self._operating_funds),
            )
        return snapshot

    def close_account(self, owner: str) -> Decimal:
        """
        Close an account and pay out its cash balance.

        Only allowed once the outstanding balance is exactly zero.
        The payout comes out of the operating funds, so they must
        be able to cover it. Returns the amount paid out.
        """
        with self._operation("close_account", owner=owner):
            account = self.get_account(owner)
            outstanding = account.outstanding_balance()
            if outstanding > 0:
                raise NonZeroOutstanding(owner, outstanding)
            payout = account.balance
            self.check_operating_funds(payout)
            with self._exact_arithmetic(payout, TransactionKind.WITHDRAW):
                operating_funds = self._operating_funds - payout

            del self._accounts[owner]
            self._operating_funds = operating_funds

            logger.info(
                "account_closed",
                owner=owner,
                payout=str(payout),
                operating_funds=str(self._operating_funds),
            )
        return payout

    # --- Cash movements ---

    def deposit(self, owner: str, amount) -> AccountSnapshot:
        """Deposit cash into an account."""
        with self._operation("deposit", owner=owner, amount=str(amount)):
            amount = self.check_deposit_amount(amount)
            account = self.get_account(owner)

            with self._exact_arithmetic(amount, TransactionKind.DEPOSIT):
                operating_funds = self._operating_funds + amount
                account.deposit(amount)
            self._operating_funds = operating_funds
            snapshot = account.snapshot()

            logger.info(
                "deposit_completed",
                owner=owner,
                amount=str(amount),
                balance=str(snapshot.balance),
                operating_funds=str(self._operating_funds),
            )
        return snapshot

    def withdraw(self, owner: str, amount) -> AccountSnapshot:
        """
        Withdraw cash from an account.

        The operating funds are checked before the account is even
        looked up.
        """
        with self._operation("withdraw", owner=owner, amount=str(amount)):
            amount = self.check_withdraw_amount(amount)
            self.check_operating_funds(amount)
            account = self.get_account(owner)
            account.check_sufficient_funds(amount)

            with self._exact_arithmetic(amount, TransactionKind.WITHDRAW):
                operating_funds = self._operating_funds - amount
                account.withdraw(amount)
            self._operating_funds = operating_funds
            snapshot = account.snapshot()

            logger.info(
                "withdrawal_completed",
                owner=owner,
                amount=str(amount),
                balance=str(snapshot.balance),
                operating_funds=str(self._operating_funds),
            )
        return snapshot

    # --- Outstanding (loans) ---

    def grant_outstanding(self, owner: str, amount) -> AccountSnapshot:
        """
        Grant a loan to an account.

        The loan is disbursed from the operating funds. The funds
        are checked twice: once by the account's Outstanding against
        a snapshot of the pool, once by the pool itself. Both must
        pass.
        """
        with self._operation("grant_outstanding", owner=owner, amount=str(amount)):
            amount = self.check_outstanding_amount(amount)
            account = self.get_account(owner)
            account.outstanding.confirm_against_pool(amount, self._operating_funds)
            self.check_operating_funds(amount)

            with self._exact_arithmetic(amount, TransactionKind.OUTSTANDING):
                operating_funds = self._operating_funds - amount
                account.draw_outstanding(amount)
            self._operating_funds = operating_funds
            snapshot = account.snapshot()

            logger.info(
                "outstanding_granted",
                owner=owner,
                amount=str(amount),
                outstanding=str(snapshot.outstanding_balance),
                operating_funds=str(self._operating_funds),
            )
        return snapshot

    def repay_outstanding(self, owner: str, amount) -> AccountSnapshot:
        """
        Repay part or all of an account's loan.

        Unlike the Outstanding primitive, the Ledger rejects zero
        and negative repayments.
        """
        with self._operation("repay_outstanding", owner=owner, amount=str(amount)):
            amount = to_decimal(amount, TransactionKind.REPAYMENT)
            if amount <= 0:
                raise InvalidAmount(amount, TransactionKind.REPAYMENT)
            account = self.get_account(owner)
            account.check_outstanding_within(amount)

            with self._exact_arithmetic(amount, TransactionKind.REPAYMENT):
                operating_funds = self._operating_funds + amount
                account.repay_outstanding(amount)
            self._operating_funds = operating_funds
            snapshot = account.snapshot()

            logger.info(
                "outstanding_repaid",
                owner=owner,
                amount=str(amount),
                outstanding=str(snapshot.outstanding_balance),
                operating_funds=str(self._operating_funds),
            )
        return snapshot

    def apply_interest(self, owner: str, rate_percent) -> AccountSnapshot:
        """
        Apply one round of interest to an account's loan.

        Interest is owed, not paid, so the operating funds don't
        change. Nothing calls this on a schedule.
        """
        with self._operation("apply_interest", owner=owner, rate=str(rate_percent)):
            account = self.get_account(owner)
            account.outstanding.apply_interest(rate_percent)
            snapshot = account.snapshot()

            logger.info(
                "interest_applied",
                owner=owner,
                rate=str(rate_percent),
                outstanding=str(snapshot.outstanding_balance),
            )
        return snapshot
