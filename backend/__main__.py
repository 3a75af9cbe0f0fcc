#!/usr/bin/env python3
"""
Main entry point for the INP analyzer

    python backend parse model.inp
"""
import sys

from core.cli import main

if __name__ == '__main__':
    sys.exit(main())
