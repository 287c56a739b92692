from little_search_engine.cli import main


raise SystemExit(main())
