from weather_backend.app import main

raise SystemExit(main())
