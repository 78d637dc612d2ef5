import numpy as np
from scipy.stats import beta, kstest

from sampling import beta_moments, draw_betas, summarize_samples

SIZE = 100000


def test_beta_moments():
    print("Testing draw_betas moments...")

    # Example 1: Beta(2, 1), mean 2/3, variance 1/18
    a, b = 2.0, 1.0
    mean, var = beta_moments(a, b)
    summary = summarize_samples(draw_betas(SIZE, a, b, seed=2024))
    print(f"Beta({a}, {b}) -> Sample Mean: {summary['mean']:.4f} (Expected ~{mean:.4f})")
    print(f"Beta({a}, {b}) -> Sample Var: {summary['var']:.4f} (Expected ~{var:.4f})")
    assert summary['count'] == SIZE
    assert abs(summary['mean'] - mean) < 0.01, f"Mean {summary['mean']} too far from {mean}"
    assert abs(summary['var'] - var) < 0.005, f"Variance {summary['var']} too far from {var}"
    assert summary['min'] >= 0 and summary['max'] <= 1

    # Example 2: symmetric shapes
    summary = summarize_samples(draw_betas(SIZE, 3.0, 3.0, seed=2025))
    print(f"Beta(3, 3) -> Sample Mean: {summary['mean']:.4f} (Expected ~0.5)")
    assert abs(summary['mean'] - 0.5) < 0.01


def test_beta_fit():
    print("Testing draw_betas against scipy Beta CDF...")

    for a, b in [(2.0, 1.0), (0.5, 0.5), (2.0, 5.0)]:
        samples = np.array(draw_betas(20000, a, b, seed=7))
        stat, p_value = kstest(samples, beta(a, b).cdf)
        print(f"Beta({a}, {b}) -> KS stat: {stat:.4f}, p-value: {p_value:.4f}")
        assert p_value > 0.001, f"KS test rejects Beta({a}, {b}) (p={p_value})"


if __name__ == "__main__":
    test_beta_moments()
    test_beta_fit()
    print("\nVerification successful!")
