"""
API Package - HTTP boundary for the assistant.
"""
