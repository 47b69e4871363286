"""
CLI that runs the load test through Locust.

Usage:
    echobench-load --vus 10 --duration 30s --variant timestamp
    echobench-load --dry-run
"""
import argparse
import os
import subprocess
import sys
from pathlib import Path
from typing import List, Optional

from pydantic import ValidationError

from ..logging_config import bind_context, get_logger, setup_logging
from .config import LoadConfig

logger = get_logger(__name__)

USER_CLASSES = {
    "static": "StaticPayloadUser",
    "timestamp": "TimestampPayloadUser",
}

# Ships inside the package so installed copies can find it
DEFAULT_LOCUSTFILE = str(Path(__file__).resolve().with_name("locustfile.py"))

# Directory holding the echobench package, for the Locust child process
PACKAGE_ROOT = str(Path(__file__).resolve().parents[2])


def build_command(config: LoadConfig, locustfile: str) -> List[str]:
    """Locust command line for a headless run of the configured variant."""
    return [
        sys.executable, "-m", "locust",
        "-f", locustfile,
        "--headless",
        "--host", config.host,
        USER_CLASSES[config.variant],
    ]


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run the endpoint load test")
    parser.add_argument("--vus", type=int, help="Number of virtual users (default 10)")
    parser.add_argument("--duration", help="Test duration, e.g. 30s, 2m, 1h30m (default 30s)")
    parser.add_argument("--host", help="Target base URL (default http://localhost:9999)")
    parser.add_argument("--path", help="Target path (default /endpoint)")
    parser.add_argument(
        "--variant",
        choices=sorted(USER_CLASSES),
        help="Payload variant (default static)"
    )
    parser.add_argument(
        "--locustfile",
        default=os.getenv("LOCUSTFILE", DEFAULT_LOCUSTFILE),
        help="Path to the locustfile"
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Log the command instead of running it"
    )
    return parser.parse_args(argv)


def child_env(config: LoadConfig) -> dict:
    """Current environment plus the config, with echobench importable."""
    env = {**os.environ, **config.to_env()}
    pythonpath = env.get("PYTHONPATH")
    env["PYTHONPATH"] = PACKAGE_ROOT + (os.pathsep + pythonpath if pythonpath else "")
    return env


def main(argv: Optional[List[str]] = None) -> int:
    setup_logging(component="load-runner")
    args = parse_args(argv)

    try:
        config = LoadConfig.from_env(
            vus=args.vus,
            duration=args.duration,
            host=args.host,
            path=args.path,
            variant=args.variant,
        )
    except ValidationError as e:
        logger.error("Invalid load test configuration", extra={"error": str(e)})
        return 2

    bind_context(variant=config.variant, user_class=USER_CLASSES[config.variant])
    command = build_command(config, args.locustfile)
    logger.info(
        "Load test configured",
        extra={**config.model_dump(), "command": " ".join(command)}
    )
    if args.dry_run:
        return 0

    completed = subprocess.run(command, env=child_env(config))
    logger.info("Load test finished", extra={"returncode": completed.returncode})
    return completed.returncode


if __name__ == "__main__":
    sys.exit(main())
