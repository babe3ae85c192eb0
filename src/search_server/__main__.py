from search_server.cli import main


raise SystemExit(main())
