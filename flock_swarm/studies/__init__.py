"""
Studies: runnable experiments.

Watch before you tune.
"""
