"""
Core infrastructure: settings, structured logging and errors.
"""
