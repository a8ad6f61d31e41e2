from dieroll.cli import main

raise SystemExit(main())
