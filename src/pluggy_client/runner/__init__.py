"""
CLI runner module.

Provides commands:
- auth: Check the API key
- connectors: List connectors
- connect-token: Create a connect token
- sync: Connect a sandbox item and print its data
- credit-cards: Connect a sandbox item and print its credit cards
- init-config: Write a default config file
"""

from .main import create_cli, main, wait_for_item

__all__ = [
    "create_cli",
    "main",
    "wait_for_item",
]
