"""
Locust users for the endpoint load test.

Run one variant at a time, e.g.:
    locust -f echobench/load/locustfile.py --headless StaticPayloadUser

The shape below holds LOAD_VUS users for LOAD_DURATION and then stops.
"""
from locust import HttpUser, LoadTestShape, constant, events, task

from echobench.load.client import post_static, post_timestamp
from echobench.load.config import LoadConfig, target_users
from echobench.logging_config import get_logger

logger = get_logger(__name__)

# Read once when Locust imports the file
config = LoadConfig.from_env()


class StaticPayloadUser(HttpUser):
    host = config.host
    wait_time = constant(0)  # Back-to-back iterations

    @task
    def send_static(self):
        post_static(self.client, config.path)


class TimestampPayloadUser(HttpUser):
    host = config.host
    wait_time = constant(0)

    @task
    def send_timestamp(self):
        post_timestamp(self.client, config.path)


class FixedVirtualUsersShape(LoadTestShape):
    """Every user spawned at once, held until the duration runs out."""

    def tick(self):
        return target_users(config, self.get_run_time())


@events.test_start.add_listener
def on_test_start(environment, **kwargs):
    logger.info(
        "Load test starting",
        extra={
            "vus": config.vus,
            "duration": config.duration,
            "host": environment.host or config.host,
            "path": config.path,
            "variant": config.variant,
        }
    )
