from mdinput.main import main

raise SystemExit(main())
