from jbshell.cli import main

raise SystemExit(main())
