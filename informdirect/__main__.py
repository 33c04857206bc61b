from informdirect.cli.main import main

raise SystemExit(main())
