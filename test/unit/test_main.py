"""Command line parsing and startup failures (no window is opened)."""

from pathlib import Path

from curvedit.main import load_startup_curves, main, parse_args


class TestParseArgs:
    def test_defaults(self):
        args = parse_args([])
        assert args.files == []
        assert args.config is None
        assert args.verbose is False

    def test_options(self):
        args = parse_args(["-v", "-c", "editor.yaml", "a.dat", "b.json"])
        assert args.files == ["a.dat", "b.json"]
        assert args.config == Path("editor.yaml")
        assert args.verbose is True


def test_load_startup_curves(tmp_path):
    path = tmp_path / "shape.dat"
    path.write_text("1\nP,2\n0,0\n1,1\n", encoding="utf-8")
    ((stem, curves),) = load_startup_curves([str(path)])
    assert stem == "shape"
    assert len(curves) == 1


def test_unreadable_curve_file_exits_with_error(tmp_path):
    assert main([str(tmp_path / "missing.dat")]) == 1


def test_malformed_curve_file_exits_with_error(tmp_path):
    path = tmp_path / "bad.json"
    path.write_text('{"type": "bezier2d"}', encoding="utf-8")
    assert main([str(path)]) == 1


def test_invalid_config_exits_with_error(tmp_path):
    path = tmp_path / "editor.yaml"
    path.write_text("n_samples: 0\n", encoding="utf-8")
    assert main(["-c", str(path)]) == 1


def test_undecodable_curve_file_exits_with_error(tmp_path):
    path = tmp_path / "bad.dat"
    path.write_bytes(b"\xff\xfe\x00garbage")
    assert main([str(path)]) == 1


def test_unparsable_config_exits_with_error(tmp_path):
    path = tmp_path / "editor.yaml"
    path.write_text("curve_color: 5\n", encoding="utf-8")
    assert main(["-c", str(path)]) == 1
