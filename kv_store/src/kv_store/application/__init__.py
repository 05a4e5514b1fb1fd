"""Application layer - entry points built on the store."""

from kv_store.application.demo import DemoResult, DemoStep, cli, main, run_demo

__all__ = [
    "DemoResult",
    "DemoStep",
    "cli",
    "main",
    "run_demo",
]
