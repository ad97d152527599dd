"""
Core numeric helpers: angle conversion, truncation, log10, linear and curved range mapping.
"""
