"""Domain layer for the wallet ledger."""

_SERVICES = {
    "AccountService": "wallet.domain.account",
    "TransactionService": "wallet.domain.transaction",
    "BalanceService": "wallet.domain.balance",
    "ReportService": "wallet.domain.report",
}

__all__ = list(_SERVICES)


# Services import the database layer, which imports domain entities; load
# them lazily so importing wallet.domain.entities never cycles.
def __getattr__(name):
    if name in _SERVICES:
        import importlib

        return getattr(importlib.import_module(_SERVICES[name]), name)
    raise AttributeError(f"module '{__name__}' has no attribute '{name}'")
