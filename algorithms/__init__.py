"""
Algorithms package for the Banker's Safety Checker.
Contains the safety evaluation (Banker's algorithm) and the blocked-process report.
"""
