from speakerline.cli import main

raise SystemExit(main())
