# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-09-15
# Description: GeoRecord
# -----------------------------------------------------------------------------
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional

import settings


@dataclass(frozen=True)
class GeoRecord:
    """
    One geographic entity from the fixed dataset.

    `bbox` is kept raw (string or numeric sequence); parsing happens only in
    the geometry steps, so a bad bbox never affects scoring.
    """

    index: int
    description: Optional[str]
    bbox: Any = None
    extra: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, index: int, raw: Mapping[str, Any]) -> "GeoRecord":
        description = raw.get(settings.DESCRIPTION_FIELD)
        if description is not None and not isinstance(description, str):
            description = str(description)

        extra = {
            k: v for k, v in raw.items()
            if k not in (settings.DESCRIPTION_FIELD, settings.BBOX_FIELD)
        }
        return cls(
            index=index,
            description=description,
            bbox=raw.get(settings.BBOX_FIELD),
            extra=extra,
        )

    def has_description(self) -> bool:
        return bool(self.description and self.description.strip())

    def embedding_text(self) -> str:
        """Description followed by the other string-valued fields, in file order."""
        parts = [self.description] if self.has_description() else []
        parts.extend(v.strip() for v in self.extra.values() if isinstance(v, str) and v.strip())
        return " ".join(parts)

    def to_dict(self) -> Dict[str, Any]:
        """Source object shape, pass-through fields included."""
        out: Dict[str, Any] = dict(self.extra)
        out[settings.DESCRIPTION_FIELD] = self.description
        out[settings.BBOX_FIELD] = self.bbox
        return out


@dataclass(frozen=True)
class ScoredRecord:
    """A record paired with its non-negative relevance for one query."""
    record: GeoRecord
    relevance: float

    @property
    def index(self) -> int:
        return self.record.index

    @property
    def description(self) -> Optional[str]:
        return self.record.description
