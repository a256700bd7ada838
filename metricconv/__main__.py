"""Allow ``python -m metricconv``."""

from metricconv.cli import main

if __name__ == "__main__":
    main()
