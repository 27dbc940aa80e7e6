"""Inventory command line tool for WineStock.

Commands:
    register    Register a new wine
    store       Add bottles to a wine's stock
    retrieve    Remove bottles from a wine's stock
    delete      Delete a wine
    list        List all wines
    search      Search wines by name, country, vintage or price
    history     Show stock change history
    low-stock   List wines at or below the low-stock threshold

Inventory is kept in data/winestock.db by default. Set storage.backend = "memory"
in config.toml (or WINESTOCK_STORAGE_BACKEND=memory) for a throwaway run.
"""

import argparse
import logging
import sys

from sqlalchemy.exc import SQLAlchemyError

from winestock.config import Settings, get_settings
from winestock.errors import InventoryError
from winestock.models import HistoryType, WineRecord
from winestock.schemas import (
    CountryFilter,
    HistoryTypeFilter,
    ModifiedByFilter,
    NameFilter,
    PriceFilter,
    RangeFilter,
    VintageFilter,
    WineFilter,
    WineIdFilter,
)
from winestock.services.inventory import InventoryService, create_inventory_service

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_NOT_APPLIED = 2


def configure_logging(settings: Settings) -> None:
    """Configure root logging from settings."""
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if settings.log_file:
        settings.log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(settings.log_file))
    logging.basicConfig(
        level=settings.log_level,
        format=settings.log_format,
        handlers=handlers,
        force=True,
    )


def print_wines(wines: list[WineRecord]) -> None:
    if not wines:
        print("No wines found.")
        return

    print(f"{'ID':<38} {'Name':<30} {'Vintage':<8} {'Country':<8} {'Price':>10} {'Qty':>6}")
    print("-" * 105)
    for wine in wines:
        print(
            f"{wine.id:<38} {wine.name[:30]:<30} {wine.vintage:<8} {wine.country_code:<8} "
            f"{wine.price:>10.2f} {wine.quantity:>6}"
        )


def run_command(args: argparse.Namespace, service: InventoryService) -> bool:
    """Execute a parsed command against the service.

    Returns:
        False if a mutation was not applied because the lock was busy.
    """
    if args.command == "register":
        wine_fields = {
            "name": args.name,
            "country_code": args.country,
            "vintage": args.vintage,
            "price": args.price,
            "quantity": args.quantity,
        }
        if args.id:
            wine_fields["id"] = args.id
        wine = WineRecord(**wine_fields)
        if not service.register(wine, modified_by=args.by):
            return False
        print(f"Registered '{wine.name}' with ID {wine.id} ({wine.quantity} bottles).")

    elif args.command == "store":
        if not service.store(args.wine_id, args.quantity, modified_by=args.by):
            return False
        wine = service.get_wine(args.wine_id)
        print(f"Stored {args.quantity} bottles. Now {wine.quantity if wine else '?'} in stock.")

    elif args.command == "retrieve":
        if not service.retrieve(args.wine_id, args.quantity, modified_by=args.by):
            return False
        wine = service.get_wine(args.wine_id)
        print(f"Retrieved {args.quantity} bottles. Now {wine.quantity if wine else '?'} in stock.")

    elif args.command == "delete":
        if not service.delete(args.wine_id, modified_by=args.by):
            return False
        print(f"Wine {args.wine_id} has been deleted.")

    elif args.command == "list":
        print_wines(service.get_all())

    elif args.command == "search":
        filters: list[WineFilter] = []
        if args.name:
            filters.append(NameFilter(query=args.name))
        if args.country:
            filters.append(CountryFilter(code=args.country))
        if args.vintage_min is not None or args.vintage_max is not None:
            filters.append(VintageFilter(range=RangeFilter(min=args.vintage_min, max=args.vintage_max)))
        if args.price_min is not None or args.price_max is not None:
            filters.append(PriceFilter(range=RangeFilter(min=args.price_min, max=args.price_max)))
        print_wines(service.search(*filters))

    elif args.command == "history":
        history_filters = []
        if args.wine_id:
            history_filters.append(WineIdFilter(args.wine_id))
        if args.type:
            history_filters.append(HistoryTypeFilter(HistoryType(args.type)))
        if args.by is not None:
            history_filters.append(ModifiedByFilter(args.by))
        entries = service.get_history(*history_filters)
        if not entries:
            print("No history found.")
        for entry in entries:
            print(
                f"{entry.timestamp:%Y-%m-%d %H:%M:%S} {entry.history_type.value:<9} "
                f"{entry.quantity_changed:>6} {entry.wine_id} {entry.modified_by}"
            )

    elif args.command == "low-stock":
        print_wines(service.find_low_stock(args.threshold))

    return True


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="winestock",
        description="Wine inventory management for WineStock",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    register_parser = subparsers.add_parser("register", help="Register a new wine")
    register_parser.add_argument("name", help="Wine name")
    register_parser.add_argument("--country", "-c", required=True, help="2-letter country code")
    register_parser.add_argument("--vintage", "-v", type=int, required=True, help="Vintage year")
    register_parser.add_argument("--price", "-p", type=float, default=0.0, help="Bottle price")
    register_parser.add_argument("--quantity", "-q", type=int, default=0, help="Initial bottles")
    register_parser.add_argument("--id", help="Wine ID (generated if not provided)")
    register_parser.add_argument("--by", default="", help="Who made the change")

    for name, help_text in (
        ("store", "Add bottles to a wine's stock"),
        ("retrieve", "Remove bottles from a wine's stock"),
    ):
        movement_parser = subparsers.add_parser(name, help=help_text)
        movement_parser.add_argument("wine_id", help="Wine ID")
        movement_parser.add_argument("quantity", type=int, help="Number of bottles")
        movement_parser.add_argument("--by", default="", help="Who made the change")

    delete_parser = subparsers.add_parser("delete", help="Delete a wine")
    delete_parser.add_argument("wine_id", help="Wine ID")
    delete_parser.add_argument("--by", default="", help="Who made the change")

    subparsers.add_parser("list", help="List all wines")

    search_parser = subparsers.add_parser("search", help="Search wines")
    search_parser.add_argument("--name", "-n", help="Name contains (case-insensitive)")
    search_parser.add_argument("--country", "-c", help="2-letter country code")
    search_parser.add_argument("--vintage-min", type=int)
    search_parser.add_argument("--vintage-max", type=int)
    search_parser.add_argument("--price-min", type=float)
    search_parser.add_argument("--price-max", type=float)

    history_parser = subparsers.add_parser("history", help="Show stock change history")
    history_parser.add_argument("--wine-id", help="Only entries for this wine")
    history_parser.add_argument("--type", choices=[t.value for t in HistoryType])
    history_parser.add_argument("--by", help="Only entries made by this actor")

    low_stock_parser = subparsers.add_parser("low-stock", help="List wines low on stock")
    low_stock_parser.add_argument(
        "--threshold", "-t", type=int, help="Quantity threshold (default: configured value)"
    )

    return parser


def main(argv: list[str] | None = None, settings: Settings | None = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return EXIT_ERROR

    settings = settings or get_settings()
    configure_logging(settings)
    if settings.storage_backend == "memory":
        logger.warning("In-memory storage selected; changes will not persist after this command")

    service = create_inventory_service(settings)

    try:
        applied = run_command(args, service)
    except InventoryError as e:
        print(f"Error: {e.message}")
        return EXIT_ERROR
    except ValueError as e:
        # pydantic validation of command input
        print(f"Error: {e}")
        return EXIT_ERROR
    except SQLAlchemyError as e:
        logger.error("Storage failure: %s", e)
        print(f"Error: storage failure ({e.__class__.__name__}), change not applied.")
        return EXIT_ERROR
    except KeyboardInterrupt:
        print("\nAborted.")
        return EXIT_ERROR

    if not applied:
        print("Inventory is busy, change not applied. Please retry.")
        return EXIT_NOT_APPLIED

    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
