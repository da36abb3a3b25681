#!/usr/bin/env python3
"""
Returnfix - Extra Returns Remover

Main entry point for the Returnfix application.
Launches the PyQt5 GUI interface for removing extra hard returns.

Usage:
    python main.py

Requirements:
    - PyQt5

Author: Returnfix Development Team
Version: 1.0.0
"""

import sys
import os

# Add the current directory to Python path for module imports
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))


def check_dependencies():
    """Check for required dependencies and provide helpful error messages."""
    try:
        import PyQt5  # noqa: F401
    except ImportError:
        print("ERROR: Missing required dependency: PyQt5")
        print("\nPlease install it with:")
        print("  pip install PyQt5")
        print("\nThen run the application again.")
        sys.exit(1)


def main():
    """Main application entry point."""
    print("Returnfix v1.0.0 - Extra Returns Remover")
    print("=" * 50)

    check_dependencies()

    try:
        from returnfix.gui import main as gui_main
    except ImportError as e:
        print(f"ERROR: Could not import Returnfix modules: {e}")
        print("\nPlease ensure you're running from the correct directory")
        print("and that all required files are present.")
        sys.exit(1)

    gui_main()


if __name__ == '__main__':
    main()
