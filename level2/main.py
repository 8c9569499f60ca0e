"""Small demonstration entry point."""

from __future__ import annotations

from level2.logger import get_logger


def main(argv: list[str] | None = None) -> int:
    """Log a greeting, print one, and return 0."""
    get_logger().info("Hello from the logger")
    print("Hello Word")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())