"""Allow `python -m dots`."""

from dots.cli import main

raise SystemExit(main())
