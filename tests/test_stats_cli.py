import math

import pytest

from numlab.stats import mean, sampled_variance
from numlab.stats_cli import main, temperature_trend


def _write_years(directory, data):
    for year, values in data.items():
        (directory / f"{year}.txt").write_text(" ".join(str(v) for v in values))


def test_temperature_trend_summaries(tmp_path):
    data = {
        2000: [0.1, 0.3, -0.2, 0.5, 0.0, 0.2, 0.4, 0.6, -0.1],
        2001: [1.0, 1.5, 0.5],
    }
    _write_years(tmp_path, data)
    summaries = temperature_trend(tmp_path, 2000, 2001)
    assert [s.year for s in summaries] == [2000, 2001]
    for s in summaries:
        values = data[s.year]
        assert s.mean == pytest.approx(mean(values))
        assert s.error == pytest.approx(math.sqrt(sampled_variance(values)))


def test_temperature_trend_missing_year(tmp_path):
    _write_years(tmp_path, {2000: [1.0, 2.0]})
    with pytest.raises(FileNotFoundError):
        temperature_trend(tmp_path, 2000, 2001)


def test_temperature_trend_rejects_reversed_years(tmp_path):
    with pytest.raises(ValueError):
        temperature_trend(tmp_path, 2001, 2000)


def test_main_trend_prints_each_year(tmp_path, capsys):
    _write_years(tmp_path, {1990: [1.0, 3.0], 1991: [2.0, 2.0]})
    assert main(["trend", "--directory", str(tmp_path), "--first", "1990", "--last", "1991"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert len(out) == 2
    assert out[0].startswith("  Anno 1990  delta medio = 2 +/- ")


def test_main_trend_missing_file(tmp_path, capsys):
    assert main(["trend", "--directory", str(tmp_path), "--first", "1990", "--last", "1990"]) == 1
    assert "Errore caricamento file" in capsys.readouterr().err


def test_main_describe(tmp_path, capsys):
    path = tmp_path / "data.txt"
    path.write_text("4 1 3 2\n")
    assert main(["describe", "4", str(path)]) == 0
    out = capsys.readouterr().out.splitlines()
    assert "1) 4" in out
    assert "Mediana= 2.5" in out
    assert out[-2] == "Vettore ordinato:"
    assert out[-1] == "1 2 3 4"


def test_main_describe_too_few_values(tmp_path, capsys):
    path = tmp_path / "data.txt"
    path.write_text("1 2\n")
    assert main(["describe", "5", str(path)]) == 1
    assert "Errore caricamento file" in capsys.readouterr().err