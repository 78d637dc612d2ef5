import math
import numbers

import numpy as np
import pandas as pd


class InvalidArgument(ValueError):
    """Raised when a shape parameter or sample count is out of range."""


def _check_shapes(a, b):
    # NaN fails both comparisons, so it is rejected too
    if not (a > 0 and b > 0):
        raise InvalidArgument(f"shape parameters must be > 0, got a={a}, b={b}")
    if math.isinf(a) or math.isinf(b):
        raise InvalidArgument(f"shape parameters must be finite, got a={a}, b={b}")


def _ratio(x, y):
    # x / (x + y) without overflowing x + y for huge draws
    if x > 0:
        return 1.0 / (1.0 + y / x)
    if y > 0:
        return 0.0
    return math.nan


def draw_betas(n, a, b, seed=None):
    """
    Draws n samples from Beta(a, b) with the gamma-ratio method.
    x ~ Gamma(a, 1) and y ~ Gamma(b, 1) are drawn from one shared generator,
    and each sample is x / (x + y).

    seed is passed to np.random.default_rng: None seeds from OS entropy,
    an int or SeedSequence fixes the stream, a Generator is used as-is.

    n must be an integer (bool is rejected).
    If both gamma draws underflow to 0.0 the sample is NaN instead of raising.
    """
    if not isinstance(n, numbers.Integral) or isinstance(n, bool):
        raise InvalidArgument(f"sample count must be an integer, got n={n!r}")
    if n < 0:
        raise InvalidArgument(f"sample count must be >= 0, got n={n}")
    _check_shapes(a, b)

    # fresh bit source per call
    rng = np.random.default_rng(seed)

    beta_variates = []
    for _ in range(n):
        x = float(rng.gamma(a, 1.0))
        y = float(rng.gamma(b, 1.0))
        beta_variates.append(_ratio(x, y))

    return beta_variates


def format_message(value, a, b):
    """
    Console line for one sample, e.g. 'beta(2,1) sample: 0.634512'.
    Shapes and value use %g so 2.0 renders as 2.
    """
    return f"beta({a:g},{b:g}) sample: {value:g}"


def beta_moments(a, b):
    """
    Theoretical mean and variance of Beta(a, b).
    mean = a / (a + b)
    var = a*b / ((a + b)^2 * (a + b + 1))
    """
    from scipy.stats import beta
    _check_shapes(a, b)

    mean, var = beta.stats(a, b, moments='mv')
    return float(mean), float(var)


def summarize_samples(samples):
    """
    Summary of a sample sequence as a pandas Series.
    NaN samples are counted separately and excluded from the statistics.
    """
    s = pd.Series(samples, dtype=float)
    valid = s.dropna()

    return pd.Series({
        'count': len(s),
        'nan': int(s.isna().sum()),
        'mean': valid.mean(),
        'var': valid.var(ddof=0),
        'min': valid.min(),
        'max': valid.max(),
    })
