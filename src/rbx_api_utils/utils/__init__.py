#!/usr/bin/env python3

"""Utility helpers."""

from .deep_copy import deep_copy

__all__ = ["deep_copy"]
