"""
Shared helpers for pwgen.
"""
