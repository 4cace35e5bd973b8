"""
Utilities package for the Banker's Safety Checker.
Contains the console/file logger and the JSON scenario loader.
"""
