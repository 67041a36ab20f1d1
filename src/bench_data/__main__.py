import sys

from bench_data.cli import main

sys.exit(main())
