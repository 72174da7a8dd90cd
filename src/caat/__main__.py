"""Allow running caat as ``python -m caat``."""

from .cli import main

raise SystemExit(main())
