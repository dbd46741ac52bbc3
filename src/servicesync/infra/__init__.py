"""
Infrastructure layer - settings, logging, and error types.
"""
