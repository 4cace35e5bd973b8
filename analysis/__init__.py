"""
Analysis package for the Banker's Safety Checker.
Contains the evaluation trace recorded during the safety search.
"""
