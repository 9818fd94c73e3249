# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-09-16
# Description: test_dataset_loader.py
# -----------------------------------------------------------------------------
import json

import pytest

import settings
from loader.GeoDatasetLoader import GeoDatasetLoader
from search.errors import DatasetLoadError


def _write(tmp_path, payload):
    path = tmp_path / "dataset.json"
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path


def test_loads_records_in_file_order(tmp_path):
    path = _write(tmp_path, [
        {"description_from_model": "a bridge", "bbox": "(0,0,1,1)", "id": "x1", "tile": 7},
        {"description_from_model": "a road", "bbox": [2, 2, 3, 3]},
    ])

    records = GeoDatasetLoader(path).load()

    assert isinstance(records, tuple)
    assert [r.index for r in records] == [0, 1]
    assert records[0].description == "a bridge"
    assert records[0].extra == {"id": "x1", "tile": 7}
    assert records[1].bbox == [2, 2, 3, 3]


def test_pass_through_fields_survive_round_trip(tmp_path):
    obj = {"description_from_model": "a bridge", "bbox": "(0,0,1,1)", "id": "x1", "nested": {"k": [1, 2]}}
    records = GeoDatasetLoader(_write(tmp_path, [obj])).load()

    assert records[0].to_dict() == obj


def test_missing_file(tmp_path):
    with pytest.raises(DatasetLoadError):
        GeoDatasetLoader(tmp_path / "nope.json").load()


def test_invalid_json(tmp_path):
    path = tmp_path / "bad.json"
    path.write_text("[{", encoding="utf-8")
    with pytest.raises(DatasetLoadError):
        GeoDatasetLoader(path).load()


@pytest.mark.parametrize("payload", [{"description_from_model": "x"}, [1, 2], ["text"]])
def test_wrong_shape(tmp_path, payload):
    with pytest.raises(DatasetLoadError):
        GeoDatasetLoader(_write(tmp_path, payload)).load()


def test_describe_counts(river_dataset):
    assert GeoDatasetLoader.describe(river_dataset) == {"records": 5, "described": 4, "valid_bbox": 4}


def test_embedding_text_concatenates_string_fields(river_dataset):
    assert river_dataset[1].embedding_text() == "A road next to the river b"
    assert river_dataset[4].embedding_text() == "e"


def test_bundled_dataset_is_usable():
    records = GeoDatasetLoader(settings.DATASET_PATH).load()
    stats = GeoDatasetLoader.describe(records)

    assert stats["records"] > 0
    assert stats["records"] == stats["described"] == stats["valid_bbox"]
