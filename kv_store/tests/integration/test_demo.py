"""Integration tests for the demo harness and container wiring."""

from __future__ import annotations

import io

import pytest

from kv_store.adapters.outbound import (
    CompositeStoreObserver,
    ConsoleStoreObserver,
    LoggingStoreObserver,
    MetricsStoreObserver,
)
from kv_store.application import cli, main, run_demo
from kv_store.domain.entities import KVStore
from kv_store.infrastructure.config import Config, StoreConfig
from kv_store.infrastructure.container import Container, get_container
from kv_store.infrastructure.metrics import MetricsRegistry


CONSOLE_LINES = [
    "Record successfully set",
    "Record successfully set",
    "Record successfully set",
    "Item with key 'dog' found",
    "Item with key 'cat' found",
    "Item with key 'horse' and value 'neigh' successfully removed",
    "Item with key 'horse' doesn't exist in store",
]


def _container(
    diagnostics: list,
    metrics_registry: MetricsRegistry,
    stream: io.StringIO,
) -> Container:
    config = Config(store=StoreConfig(diagnostics=diagnostics))
    return Container.create(config=config, metrics=metrics_registry, stream=stream)


@pytest.mark.integration
class TestRunDemo:
    """Tests for run_demo."""

    def test_demo_passes_on_fresh_store(self) -> None:
        result = run_demo(KVStore())

        assert result.success
        assert len(result.steps) == 7
        assert result.failures == []
        assert result.steps[3].call == "get('dog')"

    def test_demo_fails_on_prefilled_store(self) -> None:
        """A pre-existing key makes the first set return a value."""
        result = run_demo(KVStore(initial={"cat": "purr"}))

        assert not result.success
        assert [step.call for step in result.failures] == ["set('cat', 'meow')"]
        assert result.failures[0].actual == "purr"

    def test_demo_leaves_two_entries(self) -> None:
        store = KVStore()
        run_demo(store)

        assert set(store.iter()) == {"cat: meow", "dog: bark"}


@pytest.mark.integration
class TestContainer:
    """Tests for Container wiring."""

    def test_singleton(self, metrics_registry: MetricsRegistry, stream: io.StringIO) -> None:
        container = _container(["console"], metrics_registry, stream)

        assert Container.get() is container
        assert get_container() is container

    def test_console_only(self, metrics_registry: MetricsRegistry, stream: io.StringIO) -> None:
        container = _container(["console"], metrics_registry, stream)
        assert isinstance(container.build_observer(), ConsoleStoreObserver)

    def test_no_diagnostics(self, metrics_registry: MetricsRegistry, stream: io.StringIO) -> None:
        container = _container([], metrics_registry, stream)
        store = container.build_store()

        assert store.observer is None
        store.set("a", "1")

    def test_all_diagnostics(self, metrics_registry: MetricsRegistry, stream: io.StringIO) -> None:
        container = _container(["console", "log", "metrics"], metrics_registry, stream)
        observer = container.build_observer()

        assert isinstance(observer, CompositeStoreObserver)
        assert [type(o) for o in observer.observers] == [
            ConsoleStoreObserver,
            LoggingStoreObserver,
            MetricsStoreObserver,
        ]

    def test_build_store_seeds_entries(
        self, metrics_registry: MetricsRegistry, stream: io.StringIO
    ) -> None:
        container = _container(["metrics"], metrics_registry, stream)
        store = container.build_store(initial={"cat": "meow"})

        assert store.get("cat") == "meow"
        assert metrics_registry.registry.get_sample_value(
            "kv_store_operations_total", {"operation": "get", "outcome": "found"}
        ) == 1.0


@pytest.mark.integration
class TestMain:
    """Tests for the demo entry point."""

    def test_main_prints_outcomes_in_order(
        self, metrics_registry: MetricsRegistry, stream: io.StringIO
    ) -> None:
        _container(["console"], metrics_registry, stream)

        assert main() == 0

        lines = [line for line in stream.getvalue().splitlines() if line in CONSOLE_LINES]
        assert lines == CONSOLE_LINES
        assert "demo_completed" in stream.getvalue()

    def test_main_with_metrics(
        self, metrics_registry: MetricsRegistry, stream: io.StringIO
    ) -> None:
        _container(["metrics"], metrics_registry, stream)

        assert main() == 0

        assert metrics_registry.registry.get_sample_value(
            "kv_store_operations_total", {"operation": "set", "outcome": "inserted"}
        ) == 3.0
        assert metrics_registry.registry.get_sample_value("kv_store_entries") == 2.0
        assert "Record successfully set" not in stream.getvalue()

    def test_main_accepts_argv_none(
        self, metrics_registry: MetricsRegistry, stream: io.StringIO
    ) -> None:
        _container([], metrics_registry, stream)

        assert main(argv=None) == 0

    def test_main_accepts_empty_argv(
        self, metrics_registry: MetricsRegistry, stream: io.StringIO
    ) -> None:
        _container([], metrics_registry, stream)

        assert main([]) == 0

    def test_main_rejects_unknown_arguments(
        self,
        metrics_registry: MetricsRegistry,
        stream: io.StringIO,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        _container([], metrics_registry, stream)

        with pytest.raises(SystemExit) as exc_info:
            main(["--bogus"])

        assert exc_info.value.code == 2
        assert "unrecognized arguments" in capsys.readouterr().err

    def test_cli_reads_sys_argv(
        self,
        metrics_registry: MetricsRegistry,
        stream: io.StringIO,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        _container([], metrics_registry, stream)
        monkeypatch.setattr("sys.argv", ["kv-store-demo"])

        assert cli() == 0
