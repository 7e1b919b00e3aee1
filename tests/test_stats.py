import statistics

import pytest

from numlab.stats import (
    Histogram,
    format_numbered,
    mean,
    median,
    read_values,
    sampled_variance,
    selection_sort,
    variance,
)

DATA = [3.5, -1.25, 7.0, 2.0, 0.5, 9.75, 4.0, -3.0, 6.5]


def test_read_values_reads_requested_count(tmp_path):
    path = tmp_path / "data.dat"
    path.write_text("1.5 2.5\n3.5\n4.5 5.5\n", encoding="utf-8")
    assert read_values(path, 3) == [1.5, 2.5, 3.5]


def test_read_values_reads_all_without_count(tmp_path):
    path = tmp_path / "data.dat"
    path.write_text("1.5 2.5\n3.5\n", encoding="utf-8")
    assert read_values(path) == [1.5, 2.5, 3.5]


def test_read_values_too_few(tmp_path):
    path = tmp_path / "data.dat"
    path.write_text("1 2", encoding="utf-8")
    with pytest.raises(ValueError):
        read_values(path, 3)


def test_read_values_negative_count(tmp_path):
    path = tmp_path / "data.dat"
    path.write_text("1 2", encoding="utf-8")
    with pytest.raises(ValueError):
        read_values(path, -1)


def test_read_values_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_values(tmp_path / "missing.dat", 1)


def test_read_values_not_a_number(tmp_path):
    path = tmp_path / "data.dat"
    path.write_text("1 abc", encoding="utf-8")
    with pytest.raises(ValueError):
        read_values(path, 2)


def test_mean_matches_statistics():
    assert mean(DATA) == pytest.approx(statistics.fmean(DATA))


def test_mean_of_single_value():
    assert mean([4.25]) == 4.25


def test_mean_empty():
    with pytest.raises(ValueError):
        mean([])


def test_variance_matches_population_variance():
    assert variance(DATA) == pytest.approx(statistics.pvariance(DATA))


def test_variance_of_constant_is_zero():
    assert variance([2.5] * 6) == 0.0


def test_variance_is_shift_invariant():
    shifted = [v + 100.0 for v in DATA]
    assert variance(shifted) == pytest.approx(variance(DATA))


def test_sampled_variance_with_stride_one_is_variance():
    assert sampled_variance(DATA, 1) == pytest.approx(variance(DATA))


def test_sampled_variance_uses_every_seventh_value():
    values = [0.0, -1.0, 1.0, -2.0, 2.0, -3.0, 3.0, 0.0]
    assert sampled_variance(values, 7) == 0.0
    assert variance(values) > 0.0


def test_sampled_variance_bad_stride():
    with pytest.raises(ValueError):
        sampled_variance(DATA, 0)


def test_median_matches_statistics():
    assert median(DATA) == statistics.median(DATA)
    assert median(DATA[:-1]) == statistics.median(DATA[:-1])


def test_median_odd_count():
    assert median([3.0, 1.0, 2.0]) == 2.0


def test_median_empty():
    with pytest.raises(ValueError):
        median([])


def test_selection_sort_orders_values():
    result = selection_sort(DATA)
    assert result == sorted(DATA)
    assert DATA[0] == 3.5


def test_selection_sort_keeps_duplicates():
    assert selection_sort([2.0, 1.0, 2.0, 1.0]) == [1.0, 1.0, 2.0, 2.0]


def test_format_numbered():
    assert format_numbered([1.5, 2.0, -3.25]) == "1) 1.5\n2) 2\n3) -3.25"


def test_format_numbered_empty():
    assert format_numbered([]) == ""


def test_histogram_counts_every_value():
    h = Histogram(10, 0.0, 1.0)
    values = [k / 37 for k in range(37)]
    h.fill_all(values)
    assert sum(h.counts) == 37
    assert h.entries == 37
    assert h.underflow == 0
    assert h.overflow == 0


def test_histogram_under_and_overflow():
    h = Histogram(5, 0.0, 10.0)
    h.fill_all([-1.0, 10.0, 12.0, 0.0, 9.999])
    assert h.underflow == 1
    assert h.overflow == 2
    assert h.counts[0] == 1
    assert h.counts[-1] == 1
    assert h.entries == 5


def test_histogram_bin_edges():
    h = Histogram(4, 2.0, 6.0)
    edges = h.bin_edges()
    assert len(edges) == 5
    assert edges[0] == 2.0
    assert edges[-1] == 6.0
    assert edges == sorted(edges)


def test_histogram_value_falls_between_its_edges():
    h = Histogram(7, -5.0, 5.0)
    edges = h.bin_edges()
    for value in (-4.9, -0.1, 0.0, 3.3, 4.99):
        before = list(h.counts)
        h.fill(value)
        index = next(i for i, (a, b) in enumerate(zip(before, h.counts)) if a != b)
        assert edges[index] <= value < edges[index + 1]


def test_histogram_rejects_nan():
    with pytest.raises(ValueError):
        Histogram(3, 0.0, 1.0).fill(float("nan"))


@pytest.mark.parametrize("nbins, low, high", [(0, 0.0, 1.0), (5, 1.0, 1.0), (5, 2.0, 1.0)])
def test_histogram_bad_construction(nbins, low, high):
    with pytest.raises(ValueError):
        Histogram(nbins, low, high)