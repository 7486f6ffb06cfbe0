"""PeopleService — greetings, product labels, and account statements."""

from __future__ import annotations

from collections.abc import Sequence

from pydantic import ValidationError

from ooplab.domain.errors import OoplabError
from ooplab.domain.people import Account, Product, User
from ooplab.services.base import BaseService
from ooplab.services.result import ServiceResult


class PeopleService(BaseService):
    def greet(self, name: str, email: str) -> ServiceResult:
        op = "greet"
        try:
            user = User(name=name, email=email)
        except (OoplabError, ValidationError) as exc:
            return self._failure(op, exc)
        return ServiceResult(
            ok=True,
            op=op,
            data={"name": user.name, "email": user.email, "greeting": user.greet()},
        )

    def product(self, name: str, price: float) -> ServiceResult:
        op = "product"
        try:
            product = Product(name=name, price=price)
        except (OoplabError, ValidationError) as exc:
            return self._failure(op, exc)
        return ServiceResult(
            ok=True,
            op=op,
            data={"name": product.name, "price": product.price, "label": product.label()},
        )

    def account(
        self,
        owner: str,
        *,
        opening: float = 0.0,
        deposits: Sequence[float] = (),
        withdrawals: Sequence[float] = (),
    ) -> ServiceResult:
        """Open an account, apply deposits then withdrawals, return the statement.

        Movements stop at the first rejected one; the failed result still
        carries the balance reached before it.
        """
        op = "account"
        try:
            account = Account(owner, balance=opening)
        except OoplabError as exc:
            return self._failure(op, exc)

        try:
            for amount in deposits:
                account.deposit(amount)
            for amount in withdrawals:
                account.withdraw(amount)
        except OoplabError as exc:
            return self._failure(
                op,
                exc,
                data={"owner": account.owner, "balance": account.balance},
            )

        return ServiceResult(
            ok=True,
            op=op,
            data={
                "owner": account.owner,
                "balance": account.balance,
                "history": [
                    {"kind": m.kind, "amount": m.amount, "balance": m.balance}
                    for m in account.history
                ],
            },
        )
