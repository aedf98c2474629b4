"""
Shared fixtures.

Settings are read once per process, so the environment is prepared before
any hr_assistant module is imported.
"""
import copy
import json
import os

os.environ.setdefault("OPENAI_API_KEY", "test-key")
os.environ.setdefault("REDIS_URL", "redis://localhost:6379/15")

import fakeredis
import pytest
from fakeredis import aioredis as fake_aioredis

from hr_assistant.services.redis_client import set_redis


@pytest.fixture(autouse=True)
def fake_redis():
    """Every test gets its own empty in-memory Redis."""
    client = fake_aioredis.FakeRedis(server=fakeredis.FakeServer(), decode_responses=True)
    set_redis(client)
    yield client
    set_redis(None)


def function_call(name, arguments, call_id):
    return {
        "type": "function_call",
        "call_id": call_id,
        "name": name,
        "arguments": json.dumps(arguments),
    }


def message(*texts):
    return {
        "type": "message",
        "role": "assistant",
        "content": [{"type": "output_text", "text": text} for text in texts],
    }


class ScriptedModel:
    """
    Stand-in for the completion endpoint. Replays the given responses and
    keeps a deep copy of every request body, since the loop mutates it.
    """
    def __init__(self, responses):
        self.responses = list(responses)
        self.requests = []

    async def __call__(self, body):
        self.requests.append(copy.deepcopy(body))
        return self.responses.pop(0)


class FakeTask:
    """Replaces the Celery task; records what would have been queued."""
    def __init__(self):
        self.calls = []

    def delay(self, *args):
        self.calls.append(args)

        class _Result:
            id = f"task-{len(self.calls)}"
        return _Result()


@pytest.fixture
def fake_mail_task(monkeypatch):
    from hr_assistant.tools.supervisor import send_email_tool

    task = FakeTask()
    monkeypatch.setattr(send_email_tool, "deliver_notification_email", task)
    return task
