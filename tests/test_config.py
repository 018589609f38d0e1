"""Tests for LookupConfig."""

import dataclasses

import pytest

from county_processor.config import LookupConfig


def write_yaml(path, text):
    path.write_text(text)
    return path


class TestLookupConfig:
    def test_defaults(self, sample_geojson):
        config = LookupConfig(counties_path=sample_geojson)
        assert config.name_property == "navn"
        assert config.include_holes is False
        assert config.max_workers is None
        assert config.log_level == "INFO"

    def test_missing_counties_file(self, tmp_path):
        with pytest.raises(FileNotFoundError, match="Counties file not found"):
            LookupConfig(counties_path=tmp_path / "missing.geojson")

    def test_counties_path_must_be_file(self, tmp_path):
        with pytest.raises(ValueError, match="must be a file"):
            LookupConfig(counties_path=tmp_path)

    def test_rejects_bad_workers(self, sample_geojson):
        with pytest.raises(ValueError, match="max_workers"):
            LookupConfig(counties_path=sample_geojson, max_workers=0)

    def test_rejects_bad_log_level(self, sample_geojson):
        with pytest.raises(ValueError, match="log_level"):
            LookupConfig(counties_path=sample_geojson, log_level="LOUD")

    def test_log_level_normalized(self, sample_geojson):
        assert LookupConfig(counties_path=sample_geojson, log_level="debug").log_level == "DEBUG"

    def test_rejects_empty_name_property(self, sample_geojson):
        with pytest.raises(ValueError, match="name_property"):
            LookupConfig(counties_path=sample_geojson, name_property="")

    def test_is_frozen(self, sample_geojson):
        config = LookupConfig(counties_path=sample_geojson)
        with pytest.raises(dataclasses.FrozenInstanceError):
            config.max_workers = 4

    def test_from_yaml(self, tmp_path, sample_geojson):
        path = write_yaml(tmp_path / "lookup.yaml", f"""
counties_path: "{sample_geojson.as_posix()}"
name_property: "navn"
include_holes: true
batch:
  max_workers: 3
logging:
  level: "WARNING"
""")
        config = LookupConfig.from_yaml(path)
        assert config.counties_path == sample_geojson
        assert config.include_holes is True
        assert config.max_workers == 3
        assert config.log_level == "WARNING"

    def test_from_yaml_relative_path(self, tmp_path, sample_geojson):
        (tmp_path / "geo").mkdir()
        target = tmp_path / "geo" / "counties.geojson"
        target.write_text(sample_geojson.read_text(encoding="utf-8"), encoding="utf-8")
        path = write_yaml(tmp_path / "lookup.yaml", 'counties_path: "geo/counties.geojson"\n')

        assert LookupConfig.from_yaml(path).counties_path == target

    def test_from_yaml_requires_counties_path(self, tmp_path):
        path = write_yaml(tmp_path / "lookup.yaml", "name_property: navn\n")
        with pytest.raises(ValueError, match="counties_path"):
            LookupConfig.from_yaml(path)

    def test_from_yaml_invalid(self, tmp_path):
        path = write_yaml(tmp_path / "lookup.yaml", "counties_path: [unclosed\n")
        with pytest.raises(ValueError, match="Invalid YAML"):
            LookupConfig.from_yaml(path)

    def test_shipped_example_config(self, data_dir):
        config = LookupConfig.from_yaml(data_dir.parent.parent / "config" / "lookup.yaml")
        assert config.counties_path.resolve() == (data_dir / "sample.geojson").resolve()

    @pytest.mark.parametrize("workers", ["4", 2.5, True])
    def test_rejects_non_integer_workers(self, sample_geojson, workers):
        with pytest.raises(ValueError, match="max_workers must be an integer"):
            LookupConfig(counties_path=sample_geojson, max_workers=workers)

    def test_rejects_non_string_log_level(self, sample_geojson):
        with pytest.raises(ValueError, match="log_level must be a string"):
            LookupConfig(counties_path=sample_geojson, log_level=10)

    @pytest.mark.parametrize("body, message", [
        ("batch:\n  max_workers: \"4\"\n", "max_workers"),
        ("logging:\n  level: 10\n", "log_level"),
        ("batch: 4\n", "'batch' must be a mapping"),
    ])
    def test_from_yaml_wrong_types(self, tmp_path, sample_geojson, body, message):
        path = write_yaml(
            tmp_path / "lookup.yaml",
            f'counties_path: "{sample_geojson.as_posix()}"\n{body}',
        )
        with pytest.raises(ValueError, match=message):
            LookupConfig.from_yaml(path)

    @pytest.mark.parametrize("text", ["- a\n- b\n", "just a string\n"])
    def test_from_yaml_requires_mapping(self, tmp_path, text):
        path = write_yaml(tmp_path / "lookup.yaml", text)
        with pytest.raises(ValueError, match="expected a mapping"):
            LookupConfig.from_yaml(path)

    def test_from_yaml_counties_path_must_be_string(self, tmp_path):
        path = write_yaml(tmp_path / "lookup.yaml", "counties_path: 42\n")
        with pytest.raises(ValueError, match="counties_path must be a string"):
            LookupConfig.from_yaml(path)
