"""Allow ``python -m create_stack``."""

from create_stack.cli import main

main()
