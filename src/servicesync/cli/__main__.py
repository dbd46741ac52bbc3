#!/usr/bin/env python3
"""
CLI entry point for servicesync.cli module.

This allows running: python -m servicesync.cli
"""

from .main import cli

if __name__ == "__main__":
    cli()
