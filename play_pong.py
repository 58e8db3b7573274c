#!/usr/bin/env python3
"""
Main script to launch Paddle Duel with PyGame graphical interface
"""

import importlib.util
import sys

if __name__ == "__main__":
    missing = [
        name for name in ("pygame", "pydantic", "numpy") if importlib.util.find_spec(name) is None
    ]
    if missing:
        print("Checking dependencies:")
        for name in missing:
            print(f"✗ {name} is not installed - pip install {name}")
        sys.exit(1)

    from paddle_duel.gui.game_app import main

    main()
