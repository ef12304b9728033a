#!/usr/bin/env python3
"""
Main script to launch Terminal Pong in the current terminal
"""

import importlib.util
import sys

try:
    from term_pong.tui.game_app import main

except ImportError as e:
    print(f"Import error: {e}")
    print()
    print("Checking dependencies:")
    for module, package in (("blessed", "blessed"), ("numpy", "numpy"), ("pydantic", "pydantic")):
        if importlib.util.find_spec(module) is not None:
            print(f"✓ {package} is installed")
        else:
            print(f"✗ {package} is not installed - pip install {package}")
    sys.exit(1)

if __name__ == "__main__":
    print("=== TERMINAL PONG ===")
    print("  Player 1 (Left): W/S")
    print("  Player 2 (Right): Arrow keys")
    print("  Q: Quit")
    print()
    sys.exit(main())
