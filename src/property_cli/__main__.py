from property_cli.cli.main import main

raise SystemExit(main())
