"""Async job backends and the worker that runs handed-off handlers."""

from domain_pubsub.infrastructure.jobs.event_job_worker import EventJobWorker
from domain_pubsub.infrastructure.jobs.in_memory_job_queue import (
    FailedJob,
    InMemoryJobQueue,
)
from domain_pubsub.infrastructure.jobs.job_codec import EventJob, decode_job, encode_job

__all__ = [
    "EventJob",
    "EventJobWorker",
    "FailedJob",
    "InMemoryJobQueue",
    "decode_job",
    "encode_job",
]
