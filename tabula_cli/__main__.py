"""Standalone entry point: python -m tabula_cli"""
from tabula_cli.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
