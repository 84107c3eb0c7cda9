import sys

from expert_router.main import main

sys.exit(main())
