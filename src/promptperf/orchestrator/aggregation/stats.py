# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from collections.abc import Sequence

import numpy as np

from promptperf.common.models import Stats


def compute_stats(values: Sequence[float]) -> Stats:
    """Population mean and standard deviation (ddof=0) of `values`.

    An empty sample set yields Stats(mean=0, sd=0) rather than an error.
    """
    if len(values) == 0:
        return Stats(mean=0.0, sd=0.0)

    samples = np.asarray(values, dtype=np.float64)
    return Stats(mean=float(np.mean(samples)), sd=float(np.std(samples, ddof=0)))
