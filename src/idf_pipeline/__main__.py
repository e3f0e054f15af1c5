from idf_pipeline.cli import main

raise SystemExit(main())
