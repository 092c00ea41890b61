from gzipkit.cli import main

raise SystemExit(main())
