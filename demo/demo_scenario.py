#!/usr/bin/env python3
"""
Demo scenario for the Registrar engine.
"""

import sys
import os

# Add the project root to the Python path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from registrar.main import RegistrarPlatform


def run_demo():
    """Walk through registration, grading, status changes and queries."""
    print("=" * 60)
    print("REGISTRAR ACADEMIC RECORDS - DEMO")
    print("=" * 60)

    platform = RegistrarPlatform({'log_level': 'WARNING'})
    platform.run_demo()

    print("\n" + "=" * 60)
    print("DEMO COMPLETED SUCCESSFULLY!")
    print("=" * 60)


if __name__ == "__main__":
    run_demo()
