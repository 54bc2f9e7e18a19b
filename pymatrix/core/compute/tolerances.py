"""
Tolerance tiers for numerical comparison.

Defines precision expectations for results of the matrix routines:
- CPU_FP64: results that pass through sqrt or long elimination chains
- CPU_FP64_ILL_CONDITIONED: relaxed, for inputs with large condition number

Used by the test suite when comparing against closed-form or scipy
reference values.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


# Double precision, well-conditioned input
CPU_FP64 = ToleranceTier(
    rtol=1e-12,
    atol=1e-14,
    name='cpu_fp64',
    description='CPU double precision, a few ulps of rounding',
)

# Double precision, ill-conditioned input (cond > 1e4)
CPU_FP64_ILL_CONDITIONED = ToleranceTier(
    rtol=1e-6,
    atol=1e-8,
    name='cpu_fp64_ill_conditioned',
    description='CPU double precision, ill-conditioned (cond > 1e4)',
)

_TIERS = {tier.name: tier for tier in (CPU_FP64, CPU_FP64_ILL_CONDITIONED)}


def select_tolerance(
    name: str,
    is_ill_conditioned: bool = False,
) -> ToleranceTier:
    """Select a tolerance tier by name, relaxing it for ill-conditioned input."""
    if name not in _TIERS:
        raise KeyError(f"Unknown tolerance tier: {name!r}")
    if is_ill_conditioned:
        return CPU_FP64_ILL_CONDITIONED
    return _TIERS[name]
