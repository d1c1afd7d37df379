"""
Core infrastructure: settings, logging and error types.
"""
