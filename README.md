# numlab

A small toolkit of classic numerical methods that needs nothing beyond the
Python standard library.

- **Statistics** (`numlab.stats`): `read_values` reads whitespace-separated
  numbers from a text file; `mean`, `variance` (population), `sampled_variance`
  (every `stride`-th value about the full mean), `median`, `selection_sort`,
  `format_numbered`, and a fixed-bin `Histogram` with underflow and overflow
  counts.
- **Random numbers** (`numlab.random_gen`): `RandomGen`, a 32-bit linear
  congruential generator with `rand`, `unif`, `exp`, `gaus` (Box–Muller) and
  `gaus_ar` (accept–reject within mean ± 3 sigma).
- **Functions** (`numlab.functions`): callable one-variable functions
  `XSinX`, `Parabola` (with `vertex`), `Sign` and `TanEquation`
  (sin x − x cos x, zero where tan x = x).
- **Quadrature** (`numlab.integration`): `MidPoint`, `Simpson` and
  `Trapezoid`, each with `integrate(nstep, f)` and
  `integrate_to_precision(prec, f)`, which doubles the steps until
  4/3 of the difference between successive results is within `prec` and
  returns `(value, steps)`. Reversed interval ends flip the sign.
  `MeanIntegrator` estimates an integral by the mean-value Monte Carlo method
  and leaves the statistical uncertainty in `error`.
- **Root finding** (`numlab.roots`): `Bisection.find_zero` stops when
  `|f(c)| < prec` or after `nmax` halvings; `find_zero_by_width` stops when the
  half-width is at most `prec`. Both raise `RootNotBracketedError` when the
  function does not change sign on the interval.
- **Geometry and fields** (`numlab.geometry`): `Position` (Cartesian,
  spherical and cylindrical coordinates, `distance`), `VectorField` (addable,
  `magnitude`), `Particle` and `MaterialPoint` with `electric_field` and
  `gravitational_field`; asking for a field at the point itself raises
  `ValueError`.
- **Vectors** (`numlab.vectors`): component-wise `vadd`, `vsub`, `dot`,
  `scale`, `divide`, `add_inplace`, `sub_inplace` on plain sequences; sizes
  that differ raise `ValueError`.
- **ODEs** (`numlab.ode`): `Euler` and `RungeKutta` steppers for first-order
  systems such as `HarmonicOscillator`, `Pendulum` and `ForcedOscillator`.

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## Library use

```python
import math

from numlab.functions import XSinX
from numlab.integration import Simpson
from numlab.random_gen import RandomGen
from numlab.stats import mean, median

f = XSinX()
rule = Simpson(0, math.pi / 2)
print(rule.integrate(100, f))          # close to 1.0

gen = RandomGen(1)
samples = [gen.unif(5.0, 10.0) for _ in range(1000)]
print(mean(samples), median(samples))
```

## Commands

Every command prints plain text to standard output.

### `numlab-stats`

- `numlab-stats describe N_DATA FILENAME` — reads the first `N_DATA` numbers
  of the file and prints them numbered, with their mean, variance, median and
  the sorted list.
- `numlab-stats trend [--directory DIR] [--first 1941] [--last 2023]` — for
  each year reads `<year>.txt` and prints the mean and the square root of the
  variance sampled every seventh value.

### `numlab-distributions`

- `sample [--count 10000]` — histograms (70 bins) of uniform, exponential and
  two Gaussian samplers.
- `sums N [--trials 10000]` — histograms of the uniform numbers drawn and of
  their sums in groups of `N`.
- `clt [--trials 100000]` — standard deviation of sums of 1 to 12 uniform
  numbers.

All take `--seed` (default 1).

### `numlab-quadrature`

`numlab-quadrature PRECISION [--method midpoint|simpson|trapezoid]`
integrates x·sin(x) over [0, π/2] to the given precision, then prints the
absolute error against 1 for ten doublings of the step count.

### `numlab-montecarlo`

- `generate [--repeats 10000] [--seed 1]` — writes repeated mean-value
  estimates of the integral of x·sin(x) over [0, π/2] to `1.txt`, `2.txt`, …,
  one file per point count.
- `histogram [--bins 30]` — reads those files back and prints mean, spread and
  a histogram of each.

Both take `--directory` (default the current one) and `--points` (default
500 1000 5000 10000 50000 100000).

### `numlab-fields`

- `numlab-fields dipole X Y Z` — electric field at the point of an electron at
  z = d/2 and a proton at z = −d/2, with d = 1e-10 m.
- `numlab-fields tan PRECISION NMIN NMAX` — solutions of tan x = x by bisection
  in each interval [iπ, (i+1)π] for i from `NMIN` (at least 1) to `NMAX`.

### `numlab-ode`

- `oscillator H [--tmax 70] [--rounds 10]` — Runge–Kutta trajectory of a
  harmonic oscillator, then its final error for steps 0.1, 0.05, ….
- `pendulum [--h 0.1] [--count 30] [--g 9.8067] [--length 1]` — period
  against amplitudes 0.1, 0.2, ….
- `forced [--omega W] [--h 0.01] [--tmax 300]` — with `--omega` (a value from
  9 to 11 in steps of 0.05) prints one driven, damped trajectory; without it,
  prints the peak amplitude for every such frequency.

## What it does not do

The commands print numbers and text tables only: they draw no plots, open no
windows and save no images. Histograms are printed as bin edges and counts.
`Solver` has no tangent or secant method; `Bisection` is the only root finder.
`MeanIntegrator` is the only Monte Carlo integrator.