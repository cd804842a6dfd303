from datetime import datetime, timedelta, timezone

import pytest

from ryan.ollama_types import Details, Model, PsResponse, PullResponse, TagsResponse

SAMPLE_MODEL = {
    "name": "llama3.1:8b",
    "model": "llama3.1:8b",
    "size": 4661211808,
    "digest": "abc123",
    "details": {
        "parent_model": "",
        "format": "gguf",
        "family": "llama",
        "families": ["llama"],
        "parameter_size": "8.0B",
        "quantization_level": "Q4_0",
    },
    "expires_at": "2024-06-04T14:38:31.83753-07:00",
    "size_vram": 4661211808,
}


def test_model_from_dict_reads_all_fields():
    model = Model.from_dict(SAMPLE_MODEL)
    assert model.name == "llama3.1:8b"
    assert model.model == "llama3.1:8b"
    assert model.size == 4661211808
    assert model.size_vram == 4661211808
    assert model.digest == "abc123"
    assert model.details.format == "gguf"
    assert model.details.families == ["llama"]
    assert model.details.parameter_size == "8.0B"
    assert model.details.quantization_level == "Q4_0"


def test_expires_at_accepts_five_fraction_digits():
    model = Model.from_dict(SAMPLE_MODEL)
    expected = datetime(2024, 6, 4, 14, 38, 31, 837530, tzinfo=timezone(timedelta(hours=-7)))
    assert model.expires_at == expected


def test_expires_at_z_suffix_is_utc():
    zulu = Model.from_dict({"expires_at": "2024-06-04T21:38:31Z"}).expires_at
    offset = Model.from_dict({"expires_at": "2024-06-04T21:38:31+00:00"}).expires_at
    assert zulu == offset
    assert zulu.utcoffset() == timedelta(0)


def test_missing_fields_get_empty_defaults():
    model = Model.from_dict({})
    assert model == Model()
    assert model.expires_at is None
    assert model.details == Details()


def test_invalid_timestamp_raises():
    with pytest.raises(ValueError):
        Model.from_dict({"expires_at": "yesterday"})


def test_tags_and_ps_responses_hold_models():
    tags = TagsResponse.from_dict({"models": [SAMPLE_MODEL, {"name": "other"}]})
    assert [m.name for m in tags.models] == ["llama3.1:8b", "other"]
    ps = PsResponse.from_dict({"models": None})
    assert ps.models == []


def test_pull_response_defaults_and_values():
    progress = PullResponse.from_dict({"status": "downloading", "completed": 5, "total": 10})
    assert progress.status == "downloading"
    assert (progress.completed, progress.total) == (5, 10)
    assert progress.error == ""
    failed = PullResponse.from_dict({"error": "boom"})
    assert failed.error == "boom"
    assert failed.status == ""