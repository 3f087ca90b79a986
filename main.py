#!/usr/bin/env python3
"""
Design pattern catalog runner.

Thin wrapper around the gof-catalog command line.

Usage:
    python main.py list
    python main.py run-all --fixtures fixtures/catalog.yaml
"""

from dotenv import load_dotenv

from catalog.cli import main

# Real environment variables take precedence over .env values
load_dotenv(override=False)

if __name__ == "__main__":
    main()
