import sys

from oas_model_generator.cli import main

sys.exit(main())
