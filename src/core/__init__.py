"""
Core primitives: canonical null values, numeric bounds, and format classifiers.

This package is the foundational layer shared by higher-level systems. It is
stateless: every value is an import-time constant and every function is pure.
"""
