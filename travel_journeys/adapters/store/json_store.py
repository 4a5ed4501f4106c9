"""JSON file travel store adapter.

One JSON document per itinerary under the configured data directory,
holding the three boundary arrays:

    {"outboundJourney": [...], "returnJourney": [...], "additionalTravel": [...]}
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path

from ...config import StoreConfig, get_config
from ...domain.errors import ItineraryNotFoundError, SegmentFormatError, StoreError
from ...domain.models import ItineraryTravel
from ...io.wire import itinerary_from_dict, itinerary_to_dict


@dataclass
class JsonFileTravelStore:
    """Travel store backed by JSON files.

    This adapter implements TravelStorePort.

    Attributes:
        config: Store configuration (data directory, file suffix)
    """

    config: StoreConfig = field(default_factory=lambda: get_config().store)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def _path(self, itinerary_id: str) -> Path:
        return self.config.path_for(itinerary_id)

    def load(self, itinerary_id: str) -> ItineraryTravel:
        """Read and decode the itinerary document.

        Raises:
            ItineraryNotFoundError: If the document does not exist.
            StoreError: If it cannot be read or is not valid travel JSON.
        """
        path = self._path(itinerary_id)
        if not path.exists():
            raise ItineraryNotFoundError(
                f"No travel data for itinerary {itinerary_id!r}",
                itinerary_id=itinerary_id,
                file_path=str(path),
            )

        self._logger.debug("Loading travel", extra={"path": str(path)})
        try:
            with path.open(encoding="utf-8") as f:
                document = json.load(f)
            travel = itinerary_from_dict(document)
        except (OSError, json.JSONDecodeError, SegmentFormatError) as e:
            raise StoreError(
                f"Failed to load travel for itinerary {itinerary_id!r}",
                itinerary_id=itinerary_id,
                file_path=str(path),
                cause=e,
            )

        self._logger.info(
            "Travel loaded",
            extra={
                "itinerary_id": itinerary_id,
                "outbound": len(travel.outbound),
                "return": len(travel.return_),
                "additional": len(travel.additional),
            },
        )
        return travel

    def save(self, itinerary_id: str, travel: ItineraryTravel) -> None:
        path = self._path(itinerary_id)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            tmp_path = path.with_suffix(path.suffix + ".tmp")
            with tmp_path.open("w", encoding="utf-8") as f:
                json.dump(itinerary_to_dict(travel), f, indent=2, ensure_ascii=False)
            tmp_path.replace(path)
        except OSError as e:
            raise StoreError(
                f"Failed to save travel for itinerary {itinerary_id!r}",
                itinerary_id=itinerary_id,
                file_path=str(path),
                cause=e,
            )
        self._logger.info("Travel saved", extra={"path": str(path)})

    def exists(self, itinerary_id: str) -> bool:
        return self._path(itinerary_id).exists()
