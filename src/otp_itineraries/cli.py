"""Command line tools for inspecting trip plans and polylines."""

import argparse
import json
import logging
import sys
from dataclasses import asdict
from typing import Any

from otp_itineraries.adapters.config import AppConfig
from otp_itineraries.adapters.formatters import LegFormatter
from otp_itineraries.adapters.otp_json import PlanFileSource
from otp_itineraries.application.services import ItineraryDisplay, ItineraryDisplayService
from otp_itineraries.domain.geometry import decode_polyline, encode_coordinates
from otp_itineraries.domain.models import Coordinate, Leg

logger = logging.getLogger(__name__)


def parse_coordinate(value: str) -> Coordinate:
    """Parse a 'lat,lon' argument."""
    try:
        lat_str, lon_str = value.split(",")
        return Coordinate(float(lat_str), float(lon_str))
    except ValueError as e:
        raise argparse.ArgumentTypeError(
            f"invalid coordinate '{value}', expected 'lat,lon'"
        ) from e


def _leg_to_dict(leg: Leg) -> dict[str, Any]:
    return {
        "mode": leg.mode,
        "route": leg.route,
        "headsign": leg.headsign,
        "from": leg.from_place.name,
        "to": leg.to_place.name,
        "start_time": leg.start_time.isoformat(),
        "end_time": leg.end_time.isoformat(),
        "distance_meters": leg.distance_meters,
        "duration_seconds": leg.duration_seconds,
    }


def _display_to_dict(display: ItineraryDisplay) -> dict[str, Any]:
    return {
        "start_time": display.itinerary.start_time.isoformat(),
        "duration_seconds": display.itinerary.duration_seconds,
        "relevant_legs": [_leg_to_dict(leg) for leg in display.relevant_legs],
        "bounding_box": asdict(display.bounding_box) if display.bounding_box else None,
        "camera_region": asdict(display.camera_region) if display.camera_region else None,
    }


def build_service(plan_file: str, config: AppConfig) -> ItineraryDisplayService:
    return ItineraryDisplayService(
        PlanFileSource(plan_file),
        min_walk_duration_seconds=config.min_walk_duration_seconds,
        include_merged_geometry=config.include_merged_geometry,
        camera_padding_factor=config.camera_padding_factor,
    )


def print_legs(displays: list[ItineraryDisplay], formatter: LegFormatter) -> None:
    if not displays:
        print("No itineraries in plan.")
        return
    for i, display in enumerate(displays, 1):
        print(f"\nItinerary {i}: {formatter.summarize_itinerary(display.itinerary)}")
        if not display.relevant_legs:
            print("  (no legs to show)")
        for leg in display.relevant_legs:
            print(f"  - {formatter.describe_leg(leg)}")


def print_bounding_boxes(displays: list[ItineraryDisplay]) -> None:
    if not displays:
        print("No itineraries in plan.")
        return
    for i, display in enumerate(displays, 1):
        print(f"\nItinerary {i}:")
        box = display.bounding_box
        if box is None:
            print("  No geometry; nothing to fit.")
        else:
            print(f"  Origin: ({box.origin_x:.1f}, {box.origin_y:.1f})")
            print(f"  Size:   {box.width:.1f} x {box.height:.1f}")
        region = display.camera_region
        if region is not None:
            print(
                f"  Camera: center ({region.center.latitude:.5f}, {region.center.longitude:.5f}), "
                f"span {region.latitude_delta:.5f} x {region.longitude_delta:.5f} deg"
            )


def main(argv: list[str] | None = None) -> None:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Trip itinerary geometry helper",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Decode a polyline
  otp-itineraries decode "_p~iF~ps|U_ulLnnqC"

  # Encode coordinates (use -- before values starting with '-')
  otp-itineraries encode -- 47.6062,-122.3321 45.5152,-122.6784

  # Show the legs of every itinerary in a saved plan response
  otp-itineraries legs plan.json

  # Show bounding boxes and camera regions
  otp-itineraries bbox plan.json --json
        """,
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    decode_parser = subparsers.add_parser("decode", help="Decode a polyline")
    decode_parser.add_argument("polyline", help="Encoded polyline (precision 5)")
    decode_parser.add_argument("--json", action="store_true", help="Output as JSON")

    encode_parser = subparsers.add_parser("encode", help="Encode coordinates")
    encode_parser.add_argument(
        "coordinates", nargs="+", type=parse_coordinate, help="Coordinates as lat,lon"
    )

    legs_parser = subparsers.add_parser("legs", help="List relevant legs of a plan")
    legs_parser.add_argument("plan_file", help="JSON file with a trip planner response")
    legs_parser.add_argument("--json", action="store_true", help="Output as JSON")

    bbox_parser = subparsers.add_parser("bbox", help="Show map bounds of a plan")
    bbox_parser.add_argument("plan_file", help="JSON file with a trip planner response")
    bbox_parser.add_argument("--json", action="store_true", help="Output as JSON")

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    try:
        config = AppConfig().apply_config_file()
        logging.basicConfig(
            level=config.log_level,
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
            stream=sys.stderr,
        )

        if args.command == "decode":
            coordinates = decode_polyline(args.polyline)
            if args.json:
                print(json.dumps([asdict(c) for c in coordinates], indent=2))
            else:
                if not coordinates:
                    print("No coordinates (empty or malformed polyline).", file=sys.stderr)
                for c in coordinates:
                    print(f"{c.latitude:.5f},{c.longitude:.5f}")

        elif args.command == "encode":
            print(encode_coordinates(args.coordinates))

        elif args.command in ("legs", "bbox"):
            displays = build_service(args.plan_file, config).display_plan()
            if args.json:
                print(json.dumps([_display_to_dict(d) for d in displays], indent=2))
            elif args.command == "legs":
                print_legs(displays, LegFormatter(config))
            else:
                print_bounding_boxes(displays)

    except KeyboardInterrupt:
        print("\nInterrupted.", file=sys.stderr)
        sys.exit(1)
    except Exception as e:
        logger.debug("Command failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


def cli_main() -> None:
    """Synchronous entry point for the CLI command."""
    main()


if __name__ == "__main__":
    cli_main()
