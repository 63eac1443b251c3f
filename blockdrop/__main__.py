"""Allow `python -m blockdrop`."""

from blockdrop.cli import main

main()
