# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-09-16
# Description: GeoDatasetLoader
# -----------------------------------------------------------------------------
import json
import logging
from pathlib import Path
from typing import Any, Dict, Sequence, Tuple

from geometry.BoundingBox import parse_bounding_box
from record.GeoRecord import GeoRecord
from search.errors import BoundingBoxParseError, DatasetLoadError
from utility.logging_utils import get_class_logger


class GeoDatasetLoader:
    """
    Reads the static dataset (a JSON array of objects) once and returns an
    immutable tuple of GeoRecord in file order.
    """

    def __init__(self, path: Path | str, logger: logging.Logger | None = None) -> None:
        self.path = Path(path)
        self.logger = logger or get_class_logger(self.__class__)

    def load(self) -> Tuple[GeoRecord, ...]:
        self.logger.info("Loading dataset from '%s'", self.path)

        if not self.path.is_file():
            raise DatasetLoadError(f"Dataset file not found: {self.path}")

        try:
            with self.path.open("r", encoding="utf-8") as f:
                raw = json.load(f)
        except json.JSONDecodeError as e:
            raise DatasetLoadError(f"Dataset file is not valid JSON: {self.path}: {e}") from e

        records = self.from_objects(raw)
        stats = self.describe(records)
        self.logger.info(
            "Dataset loaded: %d records (%d described, %d with valid bbox)",
            stats["records"],
            stats["described"],
            stats["valid_bbox"],
        )
        return records

    @staticmethod
    def from_objects(raw: Any) -> Tuple[GeoRecord, ...]:
        if not isinstance(raw, list):
            raise DatasetLoadError(f"Dataset must be a JSON array, got {type(raw).__name__}")

        records = []
        for i, obj in enumerate(raw):
            if not isinstance(obj, dict):
                raise DatasetLoadError(f"Dataset entry {i} is not an object: {obj!r}")
            records.append(GeoRecord.from_dict(i, obj))
        return tuple(records)

    @staticmethod
    def describe(records: Sequence[GeoRecord]) -> Dict[str, int]:
        valid_bbox = 0
        for r in records:
            try:
                parse_bounding_box(r.bbox)
                valid_bbox += 1
            except BoundingBoxParseError:
                pass

        return {
            "records": len(records),
            "described": sum(1 for r in records if r.has_description()),
            "valid_bbox": valid_bbox,
        }
