from __future__ import annotations

import csv

import numpy as np

from filterscope.tools.cli import main


def _read_csv(path):
    with path.open("r", encoding="utf-8", newline="") as fh:
        return list(csv.reader(fh))


def test_demo_run_prints_roots(capsys) -> None:
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Filter: Butterworth, order 4" in out
    assert "Zeros:" in out
    assert "Poles:" in out
    assert "Candles: 256 of 2 samples" in out


def test_writes_all_outputs(tmp_path) -> None:
    out_dir = tmp_path / "out"
    rc = main(["--filter", "cheby1", "--ripple", "3", "--order", "3", "-o", str(out_dir)])
    assert rc == 0

    for name in ("zeros", "poles", "bode", "candles", "spectrum", "filtered"):
        assert (out_dir / f"{name}.csv").exists()

    poles = _read_csv(out_dir / "poles.csv")
    assert poles[0] == ["real", "imag"]
    assert len(poles) == 1 + 3

    bode = _read_csv(out_dir / "bode.csv")
    assert bode[0] == ["frequency", "magnitude"]
    assert len(bode) == 1 + 100


def test_db_flag_converts_at_output(tmp_path) -> None:
    out_dir = tmp_path / "db"
    assert main(["--db", "-o", str(out_dir)]) == 0
    bode = _read_csv(out_dir / "bode.csv")
    assert bode[0] == ["frequency", "magnitude_db"]
    # unity DC gain -> about 0 dB at the lowest frequency
    assert abs(float(bode[1][1])) < 1e-3


def test_reads_column_from_file(tmp_path, capsys) -> None:
    path = tmp_path / "series.csv"
    values = np.sin(np.arange(60) / 5.0)
    rows = "\n".join(f"{i},{v}" for i, v in enumerate(values))
    path.write_text("day,value\n" + rows + "\n", encoding="utf-8")

    assert main(["-f", str(path), "-c", "value", "--candle-size", "weekly"]) == 0
    out = capsys.readouterr().out
    assert "Candles: 8 of 7 samples" in out


def test_config_file_with_override(tmp_path, capsys) -> None:
    cfg = tmp_path / "analysis.yaml"
    cfg.write_text("analysis:\n  filter_type: cheby2\n  order: 2\n", encoding="utf-8")

    assert main(["--config", str(cfg), "--order", "5"]) == 0
    out = capsys.readouterr().out
    assert "Filter: Chebyshev II, order 5" in out


def test_analysis_error_returns_one(capsys) -> None:
    assert main(["--cutoff-period", "1.5"]) == 1
    err = capsys.readouterr().err
    assert "below the nyquist period" in err


def test_bad_file_returns_one(tmp_path, capsys) -> None:
    path = tmp_path / "series.csv"
    path.write_text("a,b\n1,2\n", encoding="utf-8")
    assert main(["-f", str(path), "-c", "missing"]) == 1
    assert "not found" in capsys.readouterr().err
