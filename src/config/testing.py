"""Settings for the test run.

Reuses ``config.settings`` with a throwaway ``SECRET_KEY`` so the
fail-fast lookup succeeds without a ``.env`` file.
"""

import os

os.environ.setdefault("SECRET_KEY", "insecure-test-only-secret-key")

from config.settings import *  # noqa: E402,F401,F403
