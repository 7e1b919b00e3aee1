import math

import pytest

from numlab.distributions_cli import main, sample_distributions, sums_of_uniforms
from numlab.random_gen import RandomGen
from numlab.stats import mean


def test_sample_is_reproducible_and_sized():
    a = sample_distributions(RandomGen(1), 200)
    b = sample_distributions(RandomGen(1), 200)
    assert a == b
    assert all(len(values) == 200 for values in a.values())


def test_sample_ranges():
    s = sample_distributions(RandomGen(7), 500)
    assert all(5.0 <= v < 10.0 for v in s["Uniforme"])
    assert all(v >= 0.0 for v in s["Esponenziale"])
    assert all(-2.0 <= v <= 4.0 for v in s["Gaussiana Accept-Reject"])


def test_sample_means_are_plausible():
    s = sample_distributions(RandomGen(3), 5000)
    assert abs(mean(s["Uniforme"]) - 7.5) < 0.1
    assert abs(mean(s["Esponenziale"]) - 1.0) < 0.1
    assert abs(mean(s["Gaussiana Box-Muller"]) - 1.0) < 0.1


def test_sums_bounds_and_mean():
    sums = sums_of_uniforms(RandomGen(1), 4, 2000)
    assert len(sums) == 2000
    assert all(0.0 <= s < 4.0 for s in sums)
    assert abs(mean(sums) - 2.0) < 0.1


def test_sums_reject_non_positive_n():
    with pytest.raises(ValueError):
        sums_of_uniforms(RandomGen(1), 0, 10)


def test_main_sums_prints_histograms(capsys):
    assert main(["sums", "3", "--trials", "100"]) == 0
    out = capsys.readouterr().out
    assert out.startswith("Numeri")
    assert "Somme" in out


def test_main_rejects_non_positive_n():
    with pytest.raises(SystemExit):
        main(["sums", "0"])


def test_main_clt_spread_grows(capsys):
    assert main(["clt", "--trials", "400"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "N sigma"
    spreads = [float(line.split()[1]) for line in lines[1:]]
    assert len(spreads) == 12
    assert spreads[-1] > spreads[0]
    assert math.isclose(spreads[-1] / spreads[0], math.sqrt(12), rel_tol=0.2)


def test_main_sample_output(capsys):
    assert main(["sample", "--count", "50"]) == 0
    out = capsys.readouterr().out
    for title in ("Uniforme", "Esponenziale", "Gaussiana Box-Muller"):
        assert title in out