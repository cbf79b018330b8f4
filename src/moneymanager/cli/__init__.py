"""CLI module for moneymanager."""
