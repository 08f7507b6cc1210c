from drrs_toggle.main import main

raise SystemExit(main())
