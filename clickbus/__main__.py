#!/usr/bin/env python3
"""
Module: clickbus.__main__

This module allows the clickbus package to be executed as a module using:
    python -m clickbus

It serves as an alternative entry point to the root main.py script.
"""

import sys

from main import main

if __name__ == "__main__":
    sys.exit(main())
