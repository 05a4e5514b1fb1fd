"""Run the key-value store demo: ``python -m kv_store``."""

from kv_store.application.demo import cli

if __name__ == "__main__":
    raise SystemExit(cli())
