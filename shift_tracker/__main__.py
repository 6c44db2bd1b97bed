from shift_tracker.cli import main

raise SystemExit(main())
