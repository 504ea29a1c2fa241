"""
Script to generate the five INSERT scripts from the XML fixtures
"""

import sys
import os
import logging

# Add current directory to path to allow imports from core, pipeline, etc.
sys.path.append(os.getcwd())

from core.config import settings
from core.exceptions import GenerationError
from core.logging import setup_logging
from pipeline.runner import MigrationRunner

logger = logging.getLogger(__name__)


def generate() -> int:
    """Run the generator; failures are reported on stdout, never via the exit code"""
    setup_logging()

    try:
        runner = MigrationRunner.from_settings(settings)
        runner.run()
    except GenerationError as e:
        print(str(e))

    if settings.PAUSE_ON_EXIT:
        try:
            input("Push 'Enter' to exit ...")
        except EOFError:
            pass

    return 0


if __name__ == "__main__":
    sys.exit(generate())
