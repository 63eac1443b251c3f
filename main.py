"""
Entry point for running blockdrop from a source checkout.

Usage:
    python main.py --config config/default.yaml
"""

from blockdrop.cli import main

if __name__ == "__main__":
    main()
