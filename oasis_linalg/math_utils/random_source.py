################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Random number capability injected into stochastic vector operations.

Callers own the generator. Concurrent callers should each use an independent
generator, for example one ``np.random.default_rng(seed)`` per worker.
"""

from __future__ import annotations

from typing import Any
from typing import Protocol
from typing import Sequence

import numpy as np


class RandomSource(Protocol):
    """Source of the draws used by genetic crossover.

    ``numpy.random.Generator`` satisfies this protocol.
    """

    def random(self) -> Any:
        """Return a uniform draw in [0, 1)."""
        ...

    def normal(self, loc: float, scale: float) -> Any:
        """Return a Gaussian draw with the given mean and standard deviation."""
        ...

    def choice(self, a: Sequence[float]) -> Any:
        """Return a uniformly selected element of the candidates."""
        ...


def default_random_source(seed: int | None = None) -> np.random.Generator:
    """Return a numpy generator, seeded for reproducible runs."""
    return np.random.default_rng(seed)
