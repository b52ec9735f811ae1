"""Allow ``python -m ffshortcuts``."""

from .cli import main

raise SystemExit(main())
