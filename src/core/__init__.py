"""
Core numeric primitives, domain types, and contracts.

This package contains the stateless building blocks consumed by the formula
evaluation engine. It is independent of the parser, the cell model and I/O.
"""
