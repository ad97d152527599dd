"""
Utility transformations over sequences (frequency tallies).
"""
