"""Example programs exercising the public linal API."""

from .programs import DEMOS, DemoSpec, main

__all__ = ["DEMOS", "DemoSpec", "main"]
