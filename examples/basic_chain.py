"""
Basic chains: bind, check, with_, and fallbacks on synchronous steps.

Run: python examples/basic_chain.py
"""
from dataclasses import dataclass, field
from typing import Dict, List

from maybepy import Maybe, ContractViolation, configure


@dataclass
class Account:
    owner: str
    balance: int
    history: List[str] = field(default_factory=list)


ACCOUNTS: Dict[str, Account] = {"ada": Account("ada", 120)}


def find(owner: str) -> Maybe[Account]:
    return Maybe.from_(ACCOUNTS.get(owner))


def withdraw(owner: str, amount: int) -> Account:
    return (
        Maybe.from_(owner)
        .bind(find, f"unknown account {owner!r}")
        .check(lambda a: a.balance >= amount, "insufficient funds")
        .with_(lambda a: setattr(a, "balance", a.balance - amount),
               lambda a: a.history.append(f"-{amount}"))
        .value_or_throw()
    )


def main():
    # Surface contract violations on stderr
    configure(log_level="DEBUG")

    acct = withdraw("ada", 20)
    print("balance =>", acct.balance)                      # 100
    print("history =>", acct.history)                      # ['-20']

    for owner, amount in (("bob", 1), ("ada", 1000)):
        try:
            withdraw(owner, amount)
        except ContractViolation as ex:
            print("rejected =>", ex.message)

    # Soft failure: no message, so a failed check just yields absence
    rich = find("ada").check(lambda a: a.balance > 1000).map(lambda a: a.owner)
    print("rich owner =>", rich.or_else("nobody"))          # nobody


if __name__ == "__main__":
    main()
