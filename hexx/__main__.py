from hexx.cli import main

raise SystemExit(main())
