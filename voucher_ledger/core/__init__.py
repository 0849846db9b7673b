"""Core domain layer - entities, interfaces, services and exceptions."""

from voucher_ledger.core import entities, exceptions, interfaces

__all__ = ["entities", "interfaces", "exceptions"]
