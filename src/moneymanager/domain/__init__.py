"""Domain layer for moneymanager application.

Services are exposed lazily so that the database layer can import
``moneymanager.domain.entities`` without pulling the services in.
"""

_SERVICES = {
    "AccountService": "moneymanager.domain.account",
    "BalanceManager": "moneymanager.domain.balance",
    "CategoryService": "moneymanager.domain.category",
    "SummaryService": "moneymanager.domain.summary",
    "TransactionService": "moneymanager.domain.transaction",
    "TransferService": "moneymanager.domain.transfer",
}

__all__ = list(_SERVICES)


def __getattr__(name):
    if name in _SERVICES:
        from importlib import import_module

        return getattr(import_module(_SERVICES[name]), name)
    raise AttributeError(f"module '{__name__}' has no attribute '{name}'")
