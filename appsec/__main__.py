"""
Main entry point for running the appsec package directly.

    python -m appsec list --config-id 12345 --version 7
"""

from appsec.cli import entrypoint

if __name__ == "__main__":
    entrypoint()
