"""Allow `python -m envlens`."""

from envlens.cli.main import main

main()
