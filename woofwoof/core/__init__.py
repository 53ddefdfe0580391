"""
woofwoof.core — Constants, configuration and structured logging.
"""
