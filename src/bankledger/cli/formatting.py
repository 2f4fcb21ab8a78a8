"""Rendering of ledger data for the console."""

from typing import Iterable

from bankledger.domain.entities import AccountSummary, Transaction


def format_summary(summary: AccountSummary) -> str:
    return f"ID: {summary.id} | Owner: {summary.owner} | Balance: ${summary.balance:,.2f}"


def format_transaction(txn: Transaction) -> str:
    return f"{txn.timestamp} | {txn.kind.value:<15} | ${txn.amount:,.2f}"


def format_accounts(summaries: Iterable[AccountSummary]) -> list[str]:
    """Lines for an account listing, including the empty case."""
    lines = [format_summary(summary) for summary in summaries]
    if not lines:
        return ["No accounts found."]
    return ["", "--- Accounts ---", *lines]


def format_history(history: Iterable[Transaction]) -> list[str]:
    """Lines for a transaction history, including the empty case."""
    lines = [format_transaction(txn) for txn in history]
    if not lines:
        return ["No transactions found."]
    return ["", "--- Transaction History ---", *lines]
