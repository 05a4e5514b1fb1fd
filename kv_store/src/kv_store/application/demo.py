"""Demonstration harness for the key-value store.

Runs a fixed sequence of set/get/remove calls against a store and checks
each result. Wired from configuration so the console diagnostics, logs and
metrics all come from the same settings a real caller would use.

Usage:
    python -m kv_store
    KV_STORE_STORE__DIAGNOSTICS='["console","log"]' kv-store-demo
"""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass, field
from typing import Callable, Sequence

from kv_store.infrastructure.container import Container
from kv_store.infrastructure.tracing import trace_span
from kv_store.ports.inbound import KeyValueStore


@dataclass(frozen=True)
class DemoStep:
    """One call of the demo sequence and its checked result."""

    call: str
    expected: str | None
    actual: str | None

    @property
    def passed(self) -> bool:
        return self.expected == self.actual


@dataclass
class DemoResult:
    """Outcome of a demo run."""

    steps: list[DemoStep] = field(default_factory=list)

    @property
    def success(self) -> bool:
        return all(step.passed for step in self.steps)

    @property
    def failures(self) -> list[DemoStep]:
        return [step for step in self.steps if not step.passed]


# (method, args, expected return)
DEMO_SEQUENCE: tuple[tuple[str, tuple[str, ...], str | None], ...] = (
    ("set", ("cat", "meow"), None),
    ("set", ("dog", "bark"), None),
    ("set", ("horse", "neigh"), None),
    ("get", ("dog",), "bark"),
    ("get", ("cat",), "meow"),
    ("remove", ("horse",), "neigh"),
    ("get", ("horse",), None),
)


def run_demo(store: KeyValueStore) -> DemoResult:
    """Run the demo sequence against ``store`` and record every result."""
    result = DemoResult()
    for method, args, expected in DEMO_SEQUENCE:
        call: Callable[..., str | None] = getattr(store, method)
        actual = call(*args)
        rendered = f"{method}({', '.join(repr(arg) for arg in args)})"
        result.steps.append(DemoStep(rendered, expected, actual))
    return result


def build_parser() -> argparse.ArgumentParser:
    """Build the demo argument parser.

    The demo takes no options; settings come from KV_STORE_ variables.
    """
    return argparse.ArgumentParser(
        prog="kv-store-demo",
        description="Run the fixed set/get/remove sequence against a configured store.",
    )


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point: run the demo with the configured observers.

    Args:
        argv: Command-line arguments, without the program name. None means
            no arguments. Unknown arguments exit with status 2.

    Returns:
        0 if every step returned what it should, 1 otherwise.
    """
    build_parser().parse_args(list(argv) if argv is not None else [])

    container = Container.get()
    logger = container.logger.bind(component="demo")
    store = container.build_store()

    with trace_span("kv_store.demo", {"steps": len(DEMO_SEQUENCE)}) as span:
        result = run_demo(store)
        span.set_attribute("success", result.success)

    for step in result.failures:
        logger.error(
            "demo_step_failed",
            call=step.call,
            expected=step.expected,
            actual=step.actual,
        )

    logger.info(
        "demo_completed",
        steps=len(result.steps),
        failed=len(result.failures),
        entries=store.get_stats().size,
    )
    return 0 if result.success else 1


def cli() -> int:
    """Console-script entry point reading ``sys.argv``."""
    return main(sys.argv[1:])
