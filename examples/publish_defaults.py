"""
Publish a resolved default so code reading ``os.environ`` directly sees it.

Run without OTEL_SERVICE_NAME set:
  python examples/publish_defaults.py
"""

import os
import subprocess
import sys

from env_vars_config import env_vars_config
from env_vars_config.logger import configure_logging

config = env_vars_config(
    OTEL_SERVICE_NAME=(str, "test-service"),
    OTEL_EXPORTER_OTLP_TIMEOUT=(int, 10000),
)


def main():
    configure_logging()

    config.init()
    if not config.check_all_present():
        print("some variables fell back to their defaults")

    config.publish_all()
    print("os.environ:", os.environ["OTEL_SERVICE_NAME"])

    # Child processes inherit the published values
    child = subprocess.run(
        [sys.executable, "-c", "import os; print(os.environ['OTEL_SERVICE_NAME'])"],
        capture_output=True,
        text=True,
        check=True,
    )
    print("child process:", child.stdout.strip())


if __name__ == "__main__":
    main()
