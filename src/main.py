"""Main entry point for the Mews PMS Connector."""

import argparse
import json
import sys
from typing import Optional

from src.clients import ConnectorError
from src.config import configure_logging, get_logger, settings
from src.models.connector import AvailabilityResponse, ReservationResponse
from src.services import AvailabilityService, ReservationService

logger = get_logger(__name__)


def get_availability(
    property_id: str,
    check_in: str,
    check_out: str,
    adults: int,
) -> AvailabilityResponse:
    """Get room availability of a property for a stay."""
    return AvailabilityService().get_availability(property_id, check_in, check_out, adults)


def get_reservations(
    property_id: str,
    check_in: str,
    check_out: Optional[str] = None,
    status: Optional[str] = None,
) -> ReservationResponse:
    """Get reservations of a property, optionally filtered by status."""
    return ReservationService().get_reservations(property_id, check_in, check_out, status)


def build_parser() -> argparse.ArgumentParser:
    """Build the command line parser."""
    parser = argparse.ArgumentParser(description="Query Mews availability and reservations")
    subparsers = parser.add_subparsers(dest="command", required=True)

    availability = subparsers.add_parser("availability", help="Available room categories")
    availability.add_argument("--property-id", required=True)
    availability.add_argument("--check-in", required=True, help="YYYY-MM-DD")
    availability.add_argument("--check-out", required=True, help="YYYY-MM-DD")
    availability.add_argument("--adults", type=int, default=1)

    reservations = subparsers.add_parser("reservations", help="Reservations of a property")
    reservations.add_argument("--property-id", required=True)
    reservations.add_argument("--check-in", required=True, help="YYYY-MM-DD")
    reservations.add_argument("--check-out", default=None, help="YYYY-MM-DD")
    reservations.add_argument(
        "--status", choices=["confirmed", "pending", "cancelled"], default=None
    )

    return parser


def main(argv: Optional[list[str]] = None) -> int:
    """Run one connector query and print the result as JSON.

    Returns:
        Exit code: 0 on success, 1 on failure
    """
    args = build_parser().parse_args(argv)
    logger.info(
        "Starting Mews PMS Connector",
        environment=settings.environment,
        command=args.command,
    )

    try:
        if args.command == "availability":
            result = get_availability(
                args.property_id, args.check_in, args.check_out, args.adults
            )
        else:
            result = get_reservations(
                args.property_id, args.check_in, args.check_out, args.status
            )
    except ConnectorError as e:
        logger.error(
            "Connector query failed",
            property_id=args.property_id,
            error_code=e.error_code,
            error=e.message,
        )
        print(json.dumps({"success": False, "error": e.to_dict()}, indent=2))
        return 1

    print(json.dumps({"success": True, "data": result.model_dump(mode="json")}, indent=2))
    return 0


def run() -> int:
    """Configure logging and run the command line interface."""
    configure_logging()
    return main()


if __name__ == "__main__":
    sys.exit(run())
