"""User, product, and account entities.

``User`` and ``Product`` are frozen value models that format themselves.
``Account`` encapsulates its balance: it is readable through a property
and changes only through :meth:`Account.deposit` and
:meth:`Account.withdraw`, which record every movement in ``history``.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from pydantic import BaseModel, field_validator

from ooplab.domain.errors import InsufficientFunds, InvalidAmount, InvalidEntity


class User(BaseModel):
    model_config = {"frozen": True}

    name: str
    email: str

    @field_validator("name")
    @classmethod
    def _name_not_blank(cls, value: str) -> str:
        stripped = value.strip()
        if not stripped:
            raise InvalidEntity("User name must not be blank", field="name")
        return stripped

    def greet(self) -> str:
        return f"Hello, I am {self.name} ({self.email})"


class Product(BaseModel):
    model_config = {"frozen": True}

    name: str
    price: float

    @field_validator("price")
    @classmethod
    def _price_not_negative(cls, value: float) -> float:
        if not math.isfinite(value):
            raise InvalidEntity(f"Product price must be a finite number: {value}", field="price")
        if value < 0:
            raise InvalidEntity(f"Product price must not be negative: {value}", field="price")
        return value

    def label(self) -> str:
        return f"{self.name}: {self.price:.2f}"


@dataclass(frozen=True)
class Movement:
    """One successful balance change."""

    kind: str
    amount: float
    balance: float


class Account:
    """Bank account with an encapsulated balance.

    INVARIANT: ``balance`` never drops below zero.
    """

    def __init__(self, owner: str, balance: float = 0.0) -> None:
        if not owner.strip():
            raise InvalidEntity("Account owner must not be blank", field="owner")
        if not math.isfinite(balance):
            raise InvalidAmount(f"Opening balance must be a finite number: {balance}")
        if balance < 0:
            raise InvalidAmount(f"Opening balance must not be negative: {balance}")
        self.owner = owner.strip()
        self._balance = float(balance)
        self._history: list[Movement] = []

    @property
    def balance(self) -> float:
        return self._balance

    @property
    def history(self) -> list[Movement]:
        return list(self._history)

    def deposit(self, amount: float) -> float:
        """Add *amount* and return the new balance."""
        self._require_positive(amount)
        self._balance += amount
        self._history.append(Movement("deposit", amount, self._balance))
        return self._balance

    def withdraw(self, amount: float) -> float:
        """Remove *amount* and return the new balance."""
        self._require_positive(amount)
        if amount > self._balance:
            msg = f"Cannot withdraw {amount:.2f}; balance is {self._balance:.2f}"
            raise InsufficientFunds(msg, requested=amount, balance=self._balance)
        self._balance -= amount
        self._history.append(Movement("withdraw", amount, self._balance))
        return self._balance

    @staticmethod
    def _require_positive(amount: float) -> None:
        if not amount > 0:
            raise InvalidAmount(f"Amount must be positive: {amount}", amount=amount)
        if math.isinf(amount):
            raise InvalidAmount(f"Amount must be a finite number: {amount}", amount=amount)

    def __repr__(self) -> str:
        return f"Account(owner={self.owner!r}, balance={self._balance:.2f})"
