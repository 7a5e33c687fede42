"""Allow running with ``python -m relayview``."""

from relayview.cli.app import run

if __name__ == "__main__":
    run()
