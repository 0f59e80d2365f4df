"""revdb - revision ledger for a virtual file database."""

__version__ = "0.1.0"
