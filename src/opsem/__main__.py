"""Entry point for `python -m opsem`."""

from .cli import main

main()
