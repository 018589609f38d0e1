"""Tests for the county-lookup CLI."""

import csv
import io
import json
import logging

from county_cli.cli import main
from county_processor.logging import LogEvent


class TestCLI:
    def test_no_command_prints_help(self, capsys):
        assert main([]) == 1
        assert "usage" in capsys.readouterr().out

    def test_point(self, capsys, sample_geojson):
        code = main(["--counties", str(sample_geojson), "point", "60.524035", "5.552604"])
        assert code == 0
        assert capsys.readouterr().out.strip() == "Osterøy"

    def test_point_no_match(self, capsys, sample_geojson):
        code = main(["--counties", str(sample_geojson), "point", "0", "0"])
        assert code == 2
        assert capsys.readouterr().out.strip() == "-"

    def test_include_holes_flag(self, capsys, sample_geojson):
        code = main(["--counties", str(sample_geojson), "--include-holes", "point", "59.2761", "11.0531"])
        assert code == 2

    def test_records_to_file(self, tmp_path, capsys, sample_geojson, sample_csv):
        output = tmp_path / "out.csv"
        code = main([
            "--counties", str(sample_geojson), "--workers", "2",
            "records", str(sample_csv), "-o", str(output),
        ])
        assert code == 0

        with open(output, newline="", encoding="utf-8") as f:
            rows = list(csv.DictReader(f))
        assert [(r["testid"], r["county"]) for r in rows] == [
            ("2200000001", "Osterøy"),
            ("2200000002", "Fredrikstad"),
            ("2200000003", "Vaksdal"),
            ("2200000004", ""),
            ("2200000007", "Fredrikstad"),
        ]
        assert "Skipped 2 malformed record(s)" in capsys.readouterr().err

    def test_records_to_stdout(self, capsys, sample_geojson, sample_csv):
        assert main(["--counties", str(sample_geojson), "records", str(sample_csv)]) == 0
        rows = list(csv.reader(io.StringIO(capsys.readouterr().out)))
        assert rows[0] == ["testid", "county"]
        assert len(rows) == 6

    def test_regions(self, capsys, sample_geojson):
        assert main(["--counties", str(sample_geojson), "regions"]) == 0
        lines = capsys.readouterr().out.splitlines()
        assert [line.split("\t")[0] for line in lines] == ["Osterøy", "Vaksdal", "Fredrikstad"]

    def test_config_file(self, capsys, data_dir):
        config = data_dir.parent.parent / "config" / "lookup.yaml"
        assert main(["--config", str(config), "--log-level", "ERROR", "point", "60.5", "6.0"]) == 0
        assert capsys.readouterr().out.strip() == "Vaksdal"

    def test_missing_counties(self, capsys):
        assert main(["point", "1", "2"]) == 1
        assert "--counties" in capsys.readouterr().err

    def test_missing_file(self, capsys, tmp_path):
        assert main(["--counties", str(tmp_path / "nope.geojson"), "point", "1", "2"]) == 1
        assert "not found" in capsys.readouterr().err

    def test_bad_config_value(self, capsys, tmp_path, sample_geojson):
        config = tmp_path / "lookup.yaml"
        config.write_text(
            f'counties_path: "{sample_geojson.as_posix()}"\n'
            'batch:\n  max_workers: "4"\n'
        )
        assert main(["--config", str(config), "point", "60.5", "6.0"]) == 1
        assert "max_workers" in capsys.readouterr().err

    def test_config_error_is_logged(self, caplog, tmp_path):
        with caplog.at_level(logging.ERROR):
            assert main(["--counties", str(tmp_path / "nope.geojson"), "regions"]) == 1

        entries = [json.loads(r.getMessage()) for r in caplog.records if r.name == "county_processor.cli"]
        assert [e["event"] for e in entries] == [LogEvent.CONFIG_ERROR.value]
        assert entries[0]["exception"]["type"] == "FileNotFoundError"

    def test_records_written_is_logged(self, caplog, sample_geojson, sample_csv):
        with caplog.at_level(logging.INFO):
            assert main([
                "--counties", str(sample_geojson), "--log-level", "INFO",
                "records", str(sample_csv),
            ]) == 0

        entries = [
            json.loads(r.getMessage()) for r in caplog.records
            if r.name == "county_processor.service"
        ]
        written = [e for e in entries if e["event"] == LogEvent.RECORDS_WRITTEN.value]
        assert len(written) == 1
        assert written[0]["metadata"] == {"rows": 5, "matched": 4, "skipped": 2}
