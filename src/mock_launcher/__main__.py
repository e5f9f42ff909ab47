from mock_launcher.cli import main

raise SystemExit(main())
