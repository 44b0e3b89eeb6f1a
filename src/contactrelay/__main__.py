from contactrelay.cli.serve import main

raise SystemExit(main())
