"""
Wire a standalone site monorepo's GitHub repository into a platform.sh project.

Run from the monorepo root. The script creates a GitHub integration for the
project and sets the platform.sh environment variables the site build and
deployment need.

GitHub no longer accepts account passwords for HTTPS Git operations, so a
personal access token (PAT) is asked for instead.
"""

# stdlib
import logging
import sys

# first party
from psh_setup.config import Settings
from psh_setup.logging_config import setup_logging
from psh_setup.services.orchestrator import SetupOrchestrator
from psh_setup.utils import serialize_error

logger = logging.getLogger(__name__)

SUCCESS_MESSAGE = "Success!"


def main():
    try:
        settings = Settings.from_env()

        # Set up logging before any stage runs
        setup_logging(settings.log_level)

        orchestrator = SetupOrchestrator(settings)
        orchestrator.run()

        print(SUCCESS_MESSAGE)
        sys.exit(0)
    except Exception as e:
        # Whatever was already created on platform.sh stays in place
        logger.debug("Setup failed", exc_info=True)
        print(serialize_error(e))


if __name__ == "__main__":  # pragma: no cover
    main()
