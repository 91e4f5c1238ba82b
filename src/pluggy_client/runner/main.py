"""
CLI main entry point.
"""

import argparse
import logging
import sys
import time
from pathlib import Path

from ..api import PluggyClient, PluggyClientError, PluggyError
from ..config import Config, ConfigValidationError, create_default_config, load_config
from ..schemas import AccountType, ConnectorFilters, ConnectTokenOptions, Item

logger = logging.getLogger(__name__)

# Sandbox user that makes the institution ask for a second factor
MFA_SANDBOX_USER = "user-mfa"


def _label(value: object) -> str:
    """Plain value of an enum member, or the raw string the API sent."""
    return str(getattr(value, "value", value))


def setup_logging(verbose: bool = False) -> None:
    """Configure logging."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def create_cli() -> argparse.ArgumentParser:
    """Create CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="pluggy-client",
        description="Explore the Pluggy API: connectors, items, accounts and transactions",
    )

    parser.add_argument(
        "-c",
        "--config",
        type=Path,
        default=Path("config.yaml"),
        help="Path to config file (default: config.yaml)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # auth command
    subparsers.add_parser("auth", help="Check that the API key is accepted")

    # connectors command
    connectors_parser = subparsers.add_parser("connectors", help="List available connectors")
    connectors_parser.add_argument(
        "--name",
        type=str,
        help="Filter by connector name or alike name",
    )
    connectors_parser.add_argument(
        "--country",
        dest="countries",
        action="append",
        default=[],
        help="Filter by country code (repeatable)",
    )
    connectors_parser.add_argument(
        "--sandbox",
        action="store_true",
        help="Include sandbox connectors",
    )
    connectors_parser.add_argument(
        "--health",
        action="store_true",
        help="Show each connector's health status",
    )

    # connect-token command
    token_parser = subparsers.add_parser(
        "connect-token", help="Create a connect token for frontend item connection"
    )
    token_parser.add_argument(
        "--item-id",
        type=str,
        help="Restrict the token to updating this item",
    )

    # sync command
    sync_parser = subparsers.add_parser(
        "sync",
        help="Connect a sandbox item, wait for it and print its accounts, transactions and identity",
    )
    _add_item_arguments(sync_parser)
    sync_parser.add_argument(
        "--keep",
        action="store_true",
        help="Don't delete the item afterwards",
    )

    # credit-cards command
    cards_parser = subparsers.add_parser(
        "credit-cards", help="Connect a sandbox item and print its credit card data"
    )
    _add_item_arguments(cards_parser)
    cards_parser.add_argument(
        "--keep",
        action="store_true",
        help="Don't delete the item afterwards",
    )

    # init-config command
    init_parser = subparsers.add_parser("init-config", help="Write a default config file")
    init_parser.add_argument(
        "--force",
        action="store_true",
        help="Overwrite an existing config file",
    )

    return parser


def _add_item_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--connector-id",
        type=int,
        help="Connector to create the item with (default: sandbox.connector_id)",
    )
    parser.add_argument(
        "--user",
        type=str,
        help="Sandbox user credential (default: sandbox.user)",
    )
    parser.add_argument(
        "--mfa",
        action="store_true",
        help=f"Use the '{MFA_SANDBOX_USER}' sandbox user to go through an MFA prompt",
    )


def build_client(config: Config, api_key: str | None = None) -> PluggyClient:
    """Create a client from config, optionally authenticated with another key."""
    return PluggyClient(
        api_key or config.pluggy.api_key,
        base_url=config.pluggy.base_url,
        timeout=config.pluggy.timeout,
    )


def wait_for_item(
    client: PluggyClient,
    item: Item,
    interval: float,
    max_polls: int,
    mfa_value: str | None = None,
) -> Item:
    """
    Poll an item until its status is finished.

    When the item waits for user input and `mfa_value` is given, the value
    is sent for the requested parameter.

    Raises:
        TimeoutError: If the item is still syncing after max_polls checks
    """
    checks = 0
    start = time.monotonic()

    while not item.is_finished:
        if item.is_waiting_user_input and mfa_value and item.parameter:
            print(f"  🔐 MFA requested ({item.parameter.name}), providing value")
            try:
                item = client.update_item_mfa(item.id, {item.parameter.name: mfa_value})
            except PluggyError as e:
                logger.error("Failed to send MFA for item %s: %s", item.id, e)
            if item.is_finished:
                break

        if checks >= max_polls:
            raise TimeoutError(
                f"Item {item.id} still {_label(item.status)} after {checks} checks"
            )

        elapsed = time.monotonic() - start
        print(
            f"  ⏳ Item {item.id} is syncing with the institution "
            f"(status {_label(item.status)}, check #{checks}, elapsed {elapsed:.0f}s)..."
        )
        time.sleep(interval)
        item = client.fetch_item(item.id)
        logger.debug("Item %s: status=%s execution=%s", item.id, item.status, item.execution_status)
        checks += 1

    return item


def _connect_item(
    config: Config,
    connector_id: int | None,
    user: str | None,
    mfa: bool,
) -> tuple[PluggyClient, Item]:
    """Create a connect token, then an item with sandbox credentials, and wait for it."""
    base_client = build_client(config)
    token = base_client.create_connect_token(
        options=ConnectTokenOptions(webhook_url=config.pluggy.webhook_url)
        if config.pluggy.webhook_url
        else None
    )
    client = build_client(config, api_key=token.access_token)

    connector_id = config.sandbox.connector_id if connector_id is None else connector_id
    connector = client.fetch_connector(connector_id)
    print(f"🔌 Connecting with {connector.name}")

    parameters = config.sandbox.credentials(user or (MFA_SANDBOX_USER if mfa else None))
    item = client.create_item(connector_id, parameters, config.pluggy.webhook_url)

    item = wait_for_item(
        client,
        item,
        interval=config.sandbox.poll_interval_seconds,
        max_polls=config.sandbox.max_polls,
        mfa_value=config.sandbox.mfa_value,
    )
    print(f"✓ Item completed execution with status {_label(item.status)}")
    return client, item


def _finish_item(client: PluggyClient, item: Item, keep: bool) -> None:
    if keep:
        print(f"\n📌 Keeping item {item.id}")
        return
    client.delete_item(item.id)
    print(f"\n🗑  Item {item.id} deleted")


def cmd_auth(config: Config) -> int:
    """Check API connectivity."""
    client = build_client(config)
    if not client.test_connection():
        print("❌ Can't communicate with the API, please review your API key")
        return 1
    print("✓ Successfully connected to Pluggy")
    return 0


def cmd_connectors(
    config: Config,
    name: str | None,
    countries: list[str],
    sandbox: bool,
    health: bool,
) -> int:
    """List connectors."""
    client = build_client(config)
    filters = ConnectorFilters(name=name, countries=countries, sandbox=sandbox or None)
    response = client.fetch_connectors(filters, include_health=health)

    print("We support the following connectors:")
    for connector in response.results:
        line = f"  (# {connector.id}) - {connector.name}"
        if health and connector.health:
            line += f" [{connector.health.status}]"
        print(line)

    print(f"\n✓ Found {len(response)} connector(s)")
    return 0


def cmd_connect_token(config: Config, item_id: str | None) -> int:
    """Create a connect token."""
    client = build_client(config)
    token = client.create_connect_token(item_id=item_id)
    print(f"✓ Successfully created connect token: {token.access_token}")
    return 0


def cmd_sync(
    config: Config,
    connector_id: int | None,
    user: str | None,
    mfa: bool,
    keep: bool,
) -> int:
    """Connect an item and print everything retrieved with it."""
    client, item = _connect_item(config, connector_id, user, mfa)
    if item.is_errored:
        print(f"❌ Item {item.id} failed: {item.error.message if item.error else _label(item.status)}")
        return 1

    print(f"\n🏦 Accounts for item {item.id}")
    accounts = client.fetch_accounts(item.id)
    for account in accounts.results:
        print(
            f"  [{account.id}] {account.name} ({account.number}): "
            f"balance {account.balance} {_label(account.currency_code)}"
        )
        transactions = client.fetch_transactions(account.id)
        for tx in transactions.results:
            tx_date = tx.date.date().isoformat() if tx.date else "?"
            print(f"    {tx_date}  {tx.amount:>12}  {tx.description}")

    print(f"\n🪪 Identity for item {item.id}")
    try:
        identity = client.fetch_identity_by_item_id(item.id)
        print(f"  Full name: {identity.full_name or '-'}")
    except PluggyClientError as e:
        if e.status_code != 404:
            raise
        print("  No identity data retrieved")

    _finish_item(client, item, keep)
    return 0


def cmd_credit_cards(
    config: Config,
    connector_id: int | None,
    user: str | None,
    mfa: bool,
    keep: bool,
) -> int:
    """Connect an item and print the credit data of its credit card accounts."""
    client, item = _connect_item(config, connector_id, user, mfa)
    if item.is_errored:
        print(f"❌ Item {item.id} failed: {item.error.message if item.error else _label(item.status)}")
        return 1

    accounts = client.fetch_accounts(item.id, AccountType.CREDIT)
    if not accounts.results:
        print("No credit card accounts found")

    for account in accounts.results:
        print(f"\n💳 {account.name} ({account.number})")
        credit = account.credit_data
        if credit is None:
            print("  No credit data")
            continue
        print(f"  Brand:                {credit.brand or '-'}")
        print(f"  Level:                {credit.level or '-'}")
        print(f"  Available limit:      {credit.available_credit_limit}")
        print(f"  Minimum payment:      {credit.minimum_payment}")
        if credit.balance_due_date:
            print(f"  Due date:             {credit.balance_due_date.date().isoformat()}")

    _finish_item(client, item, keep)
    return 0


def cmd_init_config(config_path: Path, force: bool) -> int:
    """Write the default config file."""
    if config_path.exists() and not force:
        print(f"❌ {config_path} already exists (use --force to overwrite)")
        return 1
    create_default_config(config_path)
    print(f"✓ Wrote default config to {config_path}")
    return 0


def _load_valid_config(config_path: Path) -> Config:
    config = load_config(config_path)
    errors = config.validate()
    if errors:
        raise ConfigValidationError("; ".join(errors))
    return config


def main(args: list[str] | None = None) -> int:
    """Main entry point."""
    parser = create_cli()
    parsed = parser.parse_args(args)

    setup_logging(parsed.verbose)

    if not parsed.command:
        parser.print_help()
        return 1

    if parsed.command == "init-config":
        return cmd_init_config(parsed.config, parsed.force)

    # Load config
    try:
        config = _load_valid_config(parsed.config)
    except ConfigValidationError as e:
        print(f"❌ Invalid config: {e}")
        return 1
    except Exception as e:
        print(f"❌ Failed to load config: {e}")
        return 1

    # Route to command
    try:
        if parsed.command == "auth":
            return cmd_auth(config)
        elif parsed.command == "connectors":
            return cmd_connectors(
                config, parsed.name, parsed.countries, parsed.sandbox, parsed.health
            )
        elif parsed.command == "connect-token":
            return cmd_connect_token(config, parsed.item_id)
        elif parsed.command == "sync":
            return cmd_sync(config, parsed.connector_id, parsed.user, parsed.mfa, parsed.keep)
        elif parsed.command == "credit-cards":
            return cmd_credit_cards(
                config, parsed.connector_id, parsed.user, parsed.mfa, parsed.keep
            )
        else:
            parser.print_help()
            return 1
    except PluggyError as e:
        print(f"❌ {e}")
        return 1
    except TimeoutError as e:
        print(f"❌ {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
