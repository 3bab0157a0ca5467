"""
Core math modules

Математические примитивы формульного движка с семантикой IEEE-754.
"""

# Numerical Safeguards
from src.core.math.numerical_safeguards import (
    # Integer limits
    INT32_MAX,
    INT64_MAX,
    # IEEE-754 arithmetic
    ieee_cosh,
    ieee_divide,
    ieee_log,
    ieee_sinh,
    ieee_sqrt,
    # Validation
    is_valid_float,
    to_float,
    # Rounding
    floor_float,
    truncate_toward_zero,
)

# Angles
from src.core.math.angles import (
    degrees_to_grads,
    degrees_to_radians,
    grads_to_degrees,
    grads_to_radians,
    radians_to_degrees,
    radians_to_grads,
)

# Hyperbolic
from src.core.math.hyperbolic import (
    acosh,
    acoth,
    acsch,
    asech,
    asinh,
    atanh,
    coth,
    csch,
    sech,
)

# Combinatorics
from src.core.math.combinatorics import (
    CombinLimits,
    combin,
    combin_checked,
    factorial,
)

# Parity
from src.core.math.parity import (
    is_even,
    is_even_float,
    is_even_int,
    is_odd,
    is_odd_float,
    is_odd_int,
)

__all__ = [
    # Numerical Safeguards — Integer limits
    "INT32_MAX",
    "INT64_MAX",
    # Numerical Safeguards — IEEE-754 arithmetic
    "ieee_cosh",
    "ieee_divide",
    "ieee_log",
    "ieee_sinh",
    "ieee_sqrt",
    # Numerical Safeguards — Validation
    "is_valid_float",
    "to_float",
    # Numerical Safeguards — Rounding
    "floor_float",
    "truncate_toward_zero",
    # Angles
    "degrees_to_grads",
    "degrees_to_radians",
    "grads_to_degrees",
    "grads_to_radians",
    "radians_to_degrees",
    "radians_to_grads",
    # Hyperbolic
    "acosh",
    "acoth",
    "acsch",
    "asech",
    "asinh",
    "atanh",
    "coth",
    "csch",
    "sech",
    # Combinatorics — Config
    "CombinLimits",
    # Combinatorics — Functions
    "combin",
    "combin_checked",
    "factorial",
    # Parity
    "is_even",
    "is_even_float",
    "is_even_int",
    "is_odd",
    "is_odd_float",
    "is_odd_int",
]
