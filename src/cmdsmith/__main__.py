"""Allow running cmdsmith as `python -m cmdsmith`."""

from cmdsmith.cli import main

raise SystemExit(main())
