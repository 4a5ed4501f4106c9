"""Command-line entry point.

Usage:
    python -m travel_journeys show trip.json
    python -m travel_journeys roundtrip trip.json
    python -m travel_journeys open ITINERARY_ID

The JSON file holds either a bare array of flat segments (read as the
outbound journey) or a full itinerary document with ``outboundJourney``,
``returnJourney`` and ``additionalTravel`` arrays.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from .config import get_config
from .container import get_container
from .domain.errors import TravelJourneyError
from .domain.models import ItineraryTravel
from .io.wire import itinerary_from_dict, itinerary_to_dict, segments_from_list
from .services import TravelEditorService

logger = logging.getLogger(__name__)


def load_travel_file(path: Path) -> ItineraryTravel:
    with path.open(encoding="utf-8") as f:
        document = json.load(f)
    if isinstance(document, list):
        return ItineraryTravel(outbound=segments_from_list(document))
    return itinerary_from_dict(document)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="travel_journeys",
        description="Build structured journeys from flat travel segments.",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Override the configured log level (DEBUG, INFO, ...)",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    show = commands.add_parser("show", help="Print the structured journeys of a file")
    show.add_argument("path", type=Path, help="JSON file with travel segments")

    roundtrip = commands.add_parser(
        "roundtrip", help="Build and flatten again, printing the resulting JSON"
    )
    roundtrip.add_argument("path", type=Path, help="JSON file with travel segments")

    open_cmd = commands.add_parser("open", help="Print the stored travel of an itinerary")
    open_cmd.add_argument("itinerary_id", help="Identifier of the itinerary")
    return parser


def configure_logging(level: Optional[str] = None) -> None:
    observability = get_config().observability
    logging.basicConfig(
        level=(level or observability.level).upper(),
        format=observability.format,
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level)

    editor: TravelEditorService = get_container().resolve(TravelEditorService)
    try:
        if args.command == "open":
            session = editor.open_session(args.itinerary_id)
            print(editor.summarize(session))
            return 0

        travel = load_travel_file(args.path)
        session = editor.session_from_travel(travel)
        if args.command == "show":
            print(editor.summarize(session))
        else:
            print(json.dumps(itinerary_to_dict(editor.flatten(session)), indent=2))
    except (OSError, json.JSONDecodeError) as e:
        logger.error("Cannot read input", extra={"error": str(e)})
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except TravelJourneyError as e:
        logger.error("Travel data rejected", extra={"error": str(e)})
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0
