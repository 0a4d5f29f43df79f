"""
Observations: watching and measuring the flock.
"""
