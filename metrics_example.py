#!/usr/bin/env python3
# SPDX-License-Identifier: MIT
# Copyright (c) 2025 metric-facade contributors

"""Example demonstrating the metric facade in a worker.

Run with METRIC_CLIENT_BACKEND=logging to see every event as a JSON log line.
"""

import logging
import random
import time

from metric_facade import Metric, create_metric

logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


class ExampleWorker:
    """Example worker demonstrating metric recording patterns."""

    def __init__(self, metric: Metric = None):
        """Initialize the worker.

        Args:
            metric: Metric facade (auto-creates one from the environment if None)
        """
        self.metric = metric or create_metric()
        logger.info(f"Worker initialized with {type(self.metric.config.client).__name__}")
        self.metric.increment("worker_starts")

    def process_job(self, job_id: str, job_type: str) -> None:
        """Process a job and emit metrics."""
        meta = {"job_type": job_type}
        self.metric.increment("jobs_in_flight", meta=meta)
        try:
            with self.metric.timer("job_duration_ms", meta=meta):
                time.sleep(random.uniform(0.01, 0.05))
            self.metric.unique("job_ids", hash(job_id), meta=meta)
        finally:
            self.metric.decrement("jobs_in_flight", meta=meta)

    def report_load(self) -> None:
        """Emit point-in-time load readings."""
        load = random.uniform(0, 100)
        self.metric.gauge("cpu_pct", load)
        self.metric.mean("cpu_pct_mean", load)
        self.metric.max("cpu_pct_peak", load)
        self.metric.min("cpu_pct_low", load)


def main():
    """Run the example worker."""
    worker = ExampleWorker(create_metric("logging"))
    for i in range(5):
        worker.process_job(f"job-{i}", random.choice(["email", "document"]))
        worker.report_load()


if __name__ == "__main__":
    main()
