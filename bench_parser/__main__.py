import sys

from bench_parser.run_parser import main

sys.exit(main())
