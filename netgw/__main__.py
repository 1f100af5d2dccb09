"""Allow ``python -m netgw``."""

from netgw.cli import main

main()
