from bypassh import cli

raise SystemExit(cli.main())
