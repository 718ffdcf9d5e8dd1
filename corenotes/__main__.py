from corenotes.server import main

raise SystemExit(main())
