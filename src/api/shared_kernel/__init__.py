"""Shared Kernel module.

Components shared by more than one bounded context. Keep it small: every
change here affects each context that depends on it.
"""
