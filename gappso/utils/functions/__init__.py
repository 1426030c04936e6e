"""
The mod:`gappso.utils.functions` module implements various test functions
for optimization.
"""
