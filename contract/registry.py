from __future__ import annotations

import inspect
import logging
from dataclasses import dataclass, field
from typing import Any, Awaitable, Callable

from pydantic import BaseModel

logger = logging.getLogger(__name__)

Handler = Callable[..., Awaitable[Any]]

_PRIMITIVE_SCHEMAS: dict[str, dict[str, Any]] = {
    "boolean": {"type": "boolean"},
    "string": {"type": "string"},
    "number": {"type": "number"},
}


class ContractError(Exception):
    pass


class UnknownTransactionError(ContractError):
    def __init__(self, name: str) -> None:
        super().__init__(f"Unknown transaction {name!r}")
        self.name = name


class TransactionArgumentError(ContractError):
    def __init__(self, name: str, expected: int, got: int) -> None:
        super().__init__(f"Transaction {name!r} expects {expected} argument(s), got {got}")
        self.name = name
        self.expected = expected
        self.got = got


@dataclass(frozen=True)
class Transaction:
    name: str
    handler: Handler
    submit: bool = True
    returns: str | None = None
    parameters: tuple[str, ...] = ()

    @property
    def tag(self) -> str:
        # submit: goes to the ordering service; evaluate: query only
        return "submit" if self.submit else "evaluate"


@dataclass
class ContractRegistry:
    """
    Explicit table of a contract's transactions plus the schemas of the records they return.

    The host dispatches by transaction name; ``describe()`` is the metadata it publishes.
    """

    title: str
    description: str = ""
    version: str = "0.0.1"
    _transactions: dict[str, Transaction] = field(default_factory=dict, init=False, repr=False)
    _schemas: dict[str, type[BaseModel]] = field(default_factory=dict, init=False, repr=False)

    def register(
        self,
        name: str,
        handler: Handler,
        *,
        submit: bool = True,
        returns: str | None = None,
    ) -> Transaction:
        if name in self._transactions:
            raise ValueError(f"Transaction {name!r} is already registered on {self.title}")
        params = tuple(inspect.signature(handler).parameters)
        tx = Transaction(name=name, handler=handler, submit=submit, returns=returns, parameters=params)
        self._transactions[name] = tx
        return tx

    def add_schema(self, name: str, model: type[BaseModel]) -> None:
        self._schemas[name] = model

    def get(self, name: str) -> Transaction:
        tx = self._transactions.get(name)
        if tx is None:
            raise UnknownTransactionError(name)
        return tx

    def names(self) -> list[str]:
        return list(self._transactions)

    async def invoke(self, name: str, *args: Any) -> Any:
        tx = self.get(name)
        if len(args) != len(tx.parameters):
            raise TransactionArgumentError(name, len(tx.parameters), len(args))
        logger.debug("CONTRACT INVOKE: %s.%s (%s)", self.title, name, tx.tag)
        return await tx.handler(*args)

    def _returns_schema(self, returns: str) -> dict[str, Any]:
        if returns in _PRIMITIVE_SCHEMAS:
            return dict(_PRIMITIVE_SCHEMAS[returns])
        return {"$ref": f"#/components/schemas/{returns}"}

    def describe(self) -> dict[str, Any]:
        transactions: list[dict[str, Any]] = []
        for tx in self._transactions.values():
            entry: dict[str, Any] = {
                "name": tx.name,
                "tag": [tx.tag],
                "parameters": [{"name": p, "schema": {"type": "string"}} for p in tx.parameters],
            }
            if tx.returns is not None:
                entry["returns"] = self._returns_schema(tx.returns)
            transactions.append(entry)

        return {
            "info": {"title": self.title, "description": self.description, "version": self.version},
            "contract": {"name": self.title, "transactions": transactions},
            "components": {
                "schemas": {name: model.model_json_schema() for name, model in self._schemas.items()},
            },
        }
