from src.cli.repl import main

raise SystemExit(main())
