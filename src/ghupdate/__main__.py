from ghupdate.main import main

raise SystemExit(main())
