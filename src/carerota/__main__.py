from carerota.cli import main

raise SystemExit(main())
