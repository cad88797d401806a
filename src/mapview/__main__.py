from .mapview import main

raise SystemExit(main())
