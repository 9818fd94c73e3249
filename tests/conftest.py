# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-09-15
# Description: conftest.py
# -----------------------------------------------------------------------------

import os
import sys
from pathlib import Path

import pytest

# add project root to sys.path
ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))

# keep test runs out of ./logs and skip the Gradio mount on `import api.main`
os.environ.setdefault("GEO_LOG_TO_FILE", "0")
os.environ.setdefault("GEO_MOUNT_UI", "0")

from loader.GeoDatasetLoader import GeoDatasetLoader  # noqa: E402


@pytest.fixture
def two_record_dataset():
    return GeoDatasetLoader.from_objects([
        {"description_from_model": "a blue bridge over a river", "bbox": "(0,0,1,1)"},
        {"description_from_model": "a red house", "bbox": "(2,2,3,3)"},
    ])


@pytest.fixture
def river_dataset():
    return GeoDatasetLoader.from_objects([
        {"id": "a", "description_from_model": "River bank with a river path and a riverside temple", "bbox": "(85.50,27.61,85.51,27.62)"},
        {"id": "b", "description_from_model": "A road next to the river", "bbox": [85.52, 27.62, 85.53, 27.63]},
        {"id": "c", "description_from_model": "Farm fields", "bbox": "(85.54,27.63,85.55,27.64)"},
        {"id": "d", "description_from_model": "A river crossing", "bbox": "not a bbox"},
        {"id": "e", "description_from_model": None, "bbox": "(85.56,27.64,85.57,27.65)"},
    ])
