"""
Dramatiq worker infrastructure for background notification delivery.

Sets up the broker shared by all worker modules: Redis in deployment, the
in-memory StubBroker when TASK_BROKER=stub (tests, local development).
"""
import dramatiq
from dramatiq.brokers.redis import RedisBroker
from dramatiq.brokers.stub import StubBroker

from app.config import settings

if settings.task_broker == "stub":
    broker = StubBroker()
    broker.emit_after("process_boot")
else:
    broker = RedisBroker(url=settings.redis_url)

dramatiq.set_broker(broker)
