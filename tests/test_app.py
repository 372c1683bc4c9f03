"""Tests for the rfs command line (rfs/app.py)."""
import json
import logging
import xml.etree.ElementTree as ET

import pytest

from rfs import app as rfs_app
from rfs.app import build_parser, main


@pytest.fixture(autouse=True)
def _in_tmp(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)


@pytest.mark.parametrize("argv", [
    ["chain-link", "0", "0", "12.7", "0"],
    ["sprocket", "12.7", "17"],
    ["threaded-bar", "40", "10", "1.5", "--option", "left-end-capped", "--option", "thread-lines-drawn"],
    ["thread-lines", "40", "10", "1.5"],
    ["hex-head", "6.4", "18", "--option", "hex-face-curves-drawn"],
    ["bolt", "30", "8", "1.25", "13", "5.5", "--shank", "10", "--option", "centre-line"],
    ["crop-marks", "0", "0", "210", "297", "--extension", "3"],
    ["crop-marks", "0", "0", "210", "297", "--length", "5"],
])
def test_main_writes_svg(tmp_path, argv):
    out = tmp_path / "shape.svg"
    assert main(["-o", str(out), *argv]) == 0
    root = ET.parse(out).getroot()
    assert root.attrib["viewBox"]


def test_main_invalid_geometry_returns_2(tmp_path):
    out = tmp_path / "bad.svg"
    assert main(["-o", str(out), "sprocket", "12.7", "2"]) == 2
    assert not out.exists()


def test_main_unknown_option_returns_2(tmp_path):
    out = tmp_path / "bad.svg"
    assert main(["-o", str(out), "hex-head", "5", "10", "--option", "knurled"]) == 2


def test_parser_requires_shape():
    with pytest.raises(SystemExit):
        build_parser().parse_args([])


# --- logging / project settings ---

def test_main_sets_up_logging_before_project_settings(tmp_path, monkeypatch):
    calls = []
    monkeypatch.setattr(rfs_app, "setup_logging", lambda *a, **k: calls.append("logging"))
    monkeypatch.setattr(rfs_app, "apply_project_settings", lambda **k: calls.append("settings") or {})
    assert main(["-o", str(tmp_path / "s.svg"), "sprocket", "12.7", "17"]) == 0
    assert calls == ["logging", "settings"]


def test_main_applies_project_log_level(tmp_path, monkeypatch):
    (tmp_path / "rfs_settings.json").write_text(json.dumps({"log": {"level": "warning"}}), encoding="utf-8")
    root = logging.getLogger()
    monkeypatch.setattr(root, "level", root.level)
    assert main(["-o", str(tmp_path / "s.svg"), "sprocket", "12.7", "17"]) == 0
    assert root.level == logging.WARNING


def test_main_project_settings_logged_after_setup(tmp_path, caplog):
    (tmp_path / "rfs_settings.json").write_text(json.dumps({"export": {"margin_mm": 2}}), encoding="utf-8")
    caplog.set_level(logging.INFO)
    assert main(["-o", str(tmp_path / "s.svg"), "sprocket", "12.7", "17"]) == 0
    assert any("Project settings aplicados" in r.getMessage() for r in caplog.records)
