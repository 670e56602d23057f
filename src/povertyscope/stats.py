"""Two-sample Kolmogorov-Smirnov test for binary (0/1) samples."""

from __future__ import annotations

import logging
import math
from collections.abc import Sequence

import numpy as np

from .types import KSResult

logger = logging.getLogger(__name__)

KS_SERIES_TOLERANCE = 1e-8
KS_SERIES_MAX_TERMS = 100


def _proportion_of_ones(sample: Sequence[int]) -> float:
    arr = np.asarray(sample, dtype=np.float64)
    return int(np.count_nonzero(arr == 1.0)) / arr.size


def kolmogorov_p_value(scaled_statistic: float) -> float:
    """
    Asymptotic Kolmogorov tail probability ``Q(lambda)``.

    Evaluates ``2 * sum_{j>=1} (-1)^(j-1) exp(-2 j^2 lambda^2)``, stopping after
    the first term whose magnitude drops below ``KS_SERIES_TOLERANCE`` and never
    summing more than ``KS_SERIES_MAX_TERMS`` terms. When the cap is reached
    before the terms fall below tolerance (``lambda`` close to zero) the
    alternating partial sums have not converged and the limit ``Q(0) = 1`` is
    returned. The result is clamped into ``[0, 1]``.
    """
    lam_sq = scaled_statistic * scaled_statistic
    total = 0.0
    converged = False
    for j in range(1, KS_SERIES_MAX_TERMS + 1):
        term = math.exp(-2.0 * j * j * lam_sq)
        total += term if j % 2 == 1 else -term
        if term < KS_SERIES_TOLERANCE:
            converged = True
            break
    if not converged:
        logger.debug("KS series did not converge for lambda=%s; using Q(0)=1", scaled_statistic)
        return 1.0
    logger.debug("KS series converged after %d term(s)", j)
    return min(max(2.0 * total, 0.0), 1.0)


def binary_ks_test(sample_a: Sequence[int], sample_b: Sequence[int]) -> KSResult:
    """
    Compare two 0/1 samples with a two-sample KS statistic.

    A binary ECDF is ``1 - p`` on ``[0, 1)`` and ``1`` from ``1`` onward, so the
    two ECDFs can only differ on ``[0, 1)`` and ``D = |pA - pB|``. Returns NaN
    statistic and p-value when either sample is empty.
    """
    n1 = len(sample_a)
    n2 = len(sample_b)
    if n1 == 0 or n2 == 0:
        return KSResult(statistic=float("nan"), p_value=float("nan"), n1=n1, n2=n2)

    p_a = _proportion_of_ones(sample_a)
    p_b = _proportion_of_ones(sample_b)
    statistic = abs(p_a - p_b)

    n_eff = (n1 * n2) / (n1 + n2)
    scaled = math.sqrt(n_eff) * statistic
    return KSResult(statistic=statistic, p_value=kolmogorov_p_value(scaled), n1=n1, n2=n2)
