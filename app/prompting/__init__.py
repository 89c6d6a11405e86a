"""Prompting package.

This package contains the deterministic extraction prompt attached to every
question screenshot. It does not perform validation, payload construction, or
model invocation.
"""
