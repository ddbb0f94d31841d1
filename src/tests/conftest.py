"""Pytest configuration for all tests."""

import os
import sys

# Make the src modules (constants, common, bb_parser, web) importable
SRC_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if SRC_DIR not in sys.path:
    sys.path.insert(0, SRC_DIR)
