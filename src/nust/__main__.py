"""Allow ``python -m nust``."""

from .app import main

raise SystemExit(main())
