"""
Shared utilities for the handler layer: observability, errors, response
envelopes and request routing.
"""
