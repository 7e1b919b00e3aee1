import math

import pytest

from numlab.functions import XSinX
from numlab.integration import MidPoint, Simpson
from numlab.quadrature_cli import error_table, main


def test_error_table_doubles_steps():
    rows = error_table(MidPoint(0, math.pi / 2), XSinX(), 4, 1.0, 5)
    assert [row.nstep for row in rows] == [4, 8, 16, 32, 64]
    assert rows[0].h == pytest.approx((math.pi / 2) / 4)


def test_error_table_errors_decrease():
    rows = error_table(MidPoint(0, math.pi / 2), XSinX(), 2, 1.0, 6)
    errors = [row.error for row in rows]
    assert errors == sorted(errors, reverse=True)


def test_error_table_default_has_ten_rows():
    rows = error_table(Simpson(0, math.pi / 2), XSinX(), 2)
    assert len(rows) == 10
    assert rows[-1].nstep == 2 * 2**9


def test_error_table_rejects_zero_steps():
    with pytest.raises(ValueError):
        error_table(MidPoint(0, 1), XSinX(), 0)


@pytest.mark.parametrize("method", ["midpoint", "simpson", "trapezoid"])
def test_main_prints_result(method, capsys):
    assert main(["1e-4", "--method", method]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out[0].startswith("Risultato dell'integrale I =")
    assert sum(line.startswith("Numero passi=") for line in out) == 10


def test_main_rejects_non_positive_precision():
    with pytest.raises(SystemExit) as info:
        main(["-1"])
    assert info.value.code == 2