from autosync.cli import main

raise SystemExit(main())
