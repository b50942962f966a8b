"""Constants for filter coefficient conversions."""

# Largest imaginary residual that zero-pole-gain to polynomial-ratio
# conversion discards silently, in units of machine epsilon of the
# coefficient dtype, per coefficient, relative to the largest coefficient
# magnitude. Larger residuals mean the zeros or poles are not conjugate
# symmetric.
IMAGINARY_RESIDUAL_TOLERANCE: float = 100.0
