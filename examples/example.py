#!/usr/bin/env python3
# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Example usage of the seq_sink module.

Start a local Seq server first, for example:

    docker run --rm -e ACCEPT_EULA=Y -p 5341:80 datalust/seq

Settings are read from SEQ_* environment variables or a .env file.
"""

import logging

from seq_sink import TRACE, install_from_config, load_config


def main():
    """Send a few events to Seq."""
    config = load_config(application="example-service", module_filter="example")
    sink = install_from_config(config)
    print(f"Installed {sink!r}")
    print()

    service_logger = logging.getLogger("example.service")
    other_logger = logging.getLogger("thirdparty.client")

    # Forwarded: logger name contains the module filter
    service_logger.info("Service started")
    service_logger.info("Processing request %s for user %d", "req-123", 456)
    service_logger.warning('Rate limit approaching: "%d of %d"', 95, 100)

    # Dropped: below the minimum level
    service_logger.debug("This debug message won't appear (below INFO level)")
    service_logger.log(TRACE, "Neither will this trace message")

    # Dropped: INFO from a module outside the filter
    other_logger.info("Connection pool resized")

    # Forwarded: WARN and above always bypass the module filter
    other_logger.error("Failed to connect to upstream")

    try:
        1 / 0
    except ZeroDivisionError:
        service_logger.exception("Computation failed")


if __name__ == "__main__":
    main()
