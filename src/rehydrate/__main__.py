"""Allow ``python -m rehydrate``."""

from rehydrate.cli.main import main

raise SystemExit(main())
