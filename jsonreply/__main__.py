"""Entry point for python -m jsonreply."""
from __future__ import annotations

import logging


def main() -> None:
    """Parse arguments and run the demo server."""
    from jsonreply.app import build_app
    from jsonreply.cli import build_parser, run
    from jsonreply.utils.logging import configure_root

    configure_root()
    logger = logging.getLogger("jsonreply.cli")

    parser = build_parser()
    args = parser.parse_args()
    run(args, logger=logger, app_factory=build_app)


if __name__ == "__main__":
    main()
