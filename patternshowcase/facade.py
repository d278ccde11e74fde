"""Facade pattern: one bank-account object hiding several checks."""

from __future__ import annotations

_RULE = "=" * 60
_BANNER = "========================Facade Pattern======================"


class AccountNumberCheck:
    """Knows the one valid account number."""

    def __init__(self, account_number: int = 12345678) -> None:
        self.account_number = account_number

    def account_active(self, acc_num_to_check: int) -> bool:
        return acc_num_to_check == self.account_number


class SecurityCodeCheck:
    """Knows the one valid security code."""

    def __init__(self, security_code: int = 1234) -> None:
        self.security_code = security_code

    def is_code_correct(self, sec_code_to_check: int) -> bool:
        return sec_code_to_check == self.security_code


class FundsCheck:
    """Holds the balance and applies withdrawals and deposits."""

    def __init__(self, cash_in_account: float = 1000.0) -> None:
        self.cash_in_account = cash_in_account

    def have_enough_money(self, cash_to_withdrawal: float) -> bool:
        """Withdraw the amount if the balance covers it; report whether it did."""
        if cash_to_withdrawal > self.cash_in_account:
            print("Error: You don't have enough money.")
            print(f"Current Balance: {self.cash_in_account:g}")
            return False
        self.cash_in_account -= cash_to_withdrawal
        print("Withdrawal Complete.")
        print(f"Current Balance: {self.cash_in_account:g}")
        return True

    def make_deposit(self, cash_to_deposit: float) -> None:
        self.cash_in_account += cash_to_deposit
        print("Deposit Complete.")
        print(f"Current Balance: {self.cash_in_account:g}")


class WelcomeToBank:
    """Greets the customer when made."""

    def __init__(self) -> None:
        print("Welcome to ABC Bank")
        print("We are happy to give you your money if we can find it.")


class BankAccountFacade:
    """Withdraw and deposit through one object that runs every check."""

    def __init__(self, account_number: int, security_code: int) -> None:
        self.account_number = account_number
        self.security_code = security_code
        self.account_checker = AccountNumberCheck()
        self.code_checker = SecurityCodeCheck()
        self.fund_checker = FundsCheck()
        self.bank_welcome = WelcomeToBank()

    def _authorised(self) -> bool:
        return self.account_checker.account_active(
            self.account_number
        ) and self.code_checker.is_code_correct(self.security_code)

    def withdraw_cash(self, cash_to_get: float) -> bool:
        """Withdraw if the account, code and balance all check out."""
        done = self._authorised() and self.fund_checker.have_enough_money(cash_to_get)
        print("Transaction Complete" if done else "Transaction Failed")
        return done

    def deposit_cash(self, cash_to_deposit: float) -> bool:
        """Deposit if the account and code check out."""
        if self._authorised():
            self.fund_checker.make_deposit(cash_to_deposit)
            print("Transaction Complete")
            return True
        print("Transaction Failed")
        return False


def facade_pattern() -> None:
    """Make two withdrawals and a deposit through the facade."""
    print(_RULE)
    print(_BANNER)
    accessing_bank = BankAccountFacade(12345678, 1234)
    accessing_bank.withdraw_cash(50.00)
    accessing_bank.withdraw_cash(900.00)
    accessing_bank.deposit_cash(150.00)
    print(_BANNER)
    print(_RULE)