"""Condition evaluation utilities.

Responsibilities:
  - Provide the evaluate entry point and Result rendering helpers.
  - Must not catch accessor failures; they belong to the caller.
"""
