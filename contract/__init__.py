from __future__ import annotations

from .registry import (
    ContractError,
    ContractRegistry,
    Transaction,
    TransactionArgumentError,
    UnknownTransactionError,
)
from .share_asset_contract import ShareAssetContract

__all__ = [
    "ContractError",
    "ContractRegistry",
    "Transaction",
    "TransactionArgumentError",
    "UnknownTransactionError",
    "ShareAssetContract",
]
