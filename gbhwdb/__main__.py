"""Allow `python -m gbhwdb`."""

from gbhwdb.interfaces.cli.main import main

raise SystemExit(main())
