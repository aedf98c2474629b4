"""
Tests for the supervisor tool-call loop.

Verifies:
- Final answer assembly and the number of completion calls
- Pairing and ordering of function_call / function_call_output items
- Stats propagation, transport errors, the round limit
- Failure handling for unknown tools, throwing tools and bad arguments
"""
import json
from datetime import datetime

import pytest

from conftest import ScriptedModel, function_call, message
from hr_assistant.core.context import ToolContext
from hr_assistant.core.orchestrator import (
    MAX_ROUNDS_ERROR,
    SupervisorDispatcher,
    extract_final_text,
)
from hr_assistant.core.tool_registry import DEFAULT_TOOL_RESULT, TOOL_FAILURE_MESSAGE, supervisor_registry
from hr_assistant.models.common import Message
from hr_assistant.models.hr import SickLog
from hr_assistant.services.llm_connector import TRANSPORT_ERROR
from hr_assistant.services.sick_log_store import sick_log_store
from hr_assistant.utils.logger import console


def dispatcher(model, max_rounds=10):
    return SupervisorDispatcher(supervisor_registry, fetch=model, max_rounds=max_rounds, model="test-model")


def appended_items(request):
    # The first two items are the system and the user message
    return request["input"][2:]


def test_extract_final_text_joins_parts_and_messages():
    output = [
        message("Hallo ", "Julia."),
        {"type": "reasoning", "summary": []},
        message("Gute Besserung!"),
    ]
    assert extract_final_text(output) == "Hallo Julia.\nGute Besserung!"


@pytest.mark.asyncio
async def test_text_only_response_needs_one_call():
    model = ScriptedModel([{"output": [message("Alles erledigt.")]}])

    answer = await dispatcher(model).get_next_response("Frage", ToolContext())

    assert answer.text == "Alles erledigt."
    assert answer.stats is None
    assert answer.error is None
    assert len(model.requests) == 1


@pytest.mark.asyncio
async def test_request_carries_catalog_history_and_sequential_flag():
    model = ScriptedModel([{"output": [message("ok")]}])
    context = ToolContext(history=[Message(role="user", content="Ich bin krank.")])

    await dispatcher(model).get_next_response("Max Mustermann, Grippe", context)

    request = model.requests[0]
    assert request["model"] == "test-model"
    assert request["parallel_tool_calls"] is False
    assert request["input"][0]["role"] == "system"
    assert "Ich bin krank." in request["input"][1]["content"]
    assert "Max Mustermann, Grippe" in request["input"][1]["content"]
    names = {tool["name"] for tool in request["tools"]}
    assert {"reportEmployeeSick", "sendEmail", "getSickLeaveStats", "reportEmployeeVacation"} <= names


@pytest.mark.asyncio
async def test_report_then_email_are_appended_in_call_order(fake_mail_task):
    model = ScriptedModel([
        {"output": [function_call("reportEmployeeSick", {"name": "Maria Weber", "reason": "Grippe"}, "call_1")]},
        {"output": [function_call("sendEmail", {"type": "sick", "name": "Maria Weber", "reason": "Grippe"}, "call_2")]},
        {"output": [message("Krankmeldung erfasst und HR informiert.")]},
    ])

    answer = await dispatcher(model).get_next_response("Maria Weber ist krank", ToolContext())

    assert answer.text == "Krankmeldung erfasst und HR informiert."
    assert len(model.requests) == 3

    third = appended_items(model.requests[2])
    assert [(item["type"], item["call_id"]) for item in third] == [
        ("function_call", "call_1"),
        ("function_call_output", "call_1"),
        ("function_call", "call_2"),
        ("function_call_output", "call_2"),
    ]
    assert json.loads(third[1]["output"])["success"] is True
    assert json.loads(third[3]["output"])["success"] is True
    assert len(fake_mail_task.calls) == 1
    assert len(await sick_log_store.active()) == 1


@pytest.mark.asyncio
async def test_n_rounds_issue_n_plus_one_calls():
    rounds = 3
    responses = [
        {"output": [function_call("lookupPolicyDocument", {"topic": "urlaub"}, f"call_{i}")]}
        for i in range(rounds)
    ]
    responses.append({"output": [message("fertig")]})
    model = ScriptedModel(responses)

    await dispatcher(model).get_next_response("Urlaubsregeln?", ToolContext())

    assert len(model.requests) == rounds + 1
    for n, request in enumerate(model.requests):
        items = appended_items(request)
        assert len(items) == 2 * n
        assert [item["call_id"] for item in items[::2]] == [f"call_{i}" for i in range(n)]


@pytest.mark.asyncio
async def test_batch_with_several_calls_is_fully_paired():
    model = ScriptedModel([
        {"output": [
            message("Ich schaue nach."),
            function_call("lookupPolicyDocument", {"topic": "urlaub"}, "a"),
            function_call("findNearestStore", {"zip_code": "68159"}, "b"),
        ]},
        {"output": [message("fertig")]},
    ])

    answer = await dispatcher(model).get_next_response("?", ToolContext())

    assert answer.text == "fertig"
    items = appended_items(model.requests[1])
    assert [(item["type"], item["call_id"]) for item in items] == [
        ("function_call", "a"), ("function_call_output", "a"),
        ("function_call", "b"), ("function_call_output", "b"),
    ]


@pytest.mark.asyncio
async def test_stats_are_attached_to_the_answer():
    for day in (4, 12, 20):
        await sick_log_store.put(SickLog(name="Lars Fischer", reason="Grippe", reported_at=datetime(2025, 8, day, 9)))
    model = ScriptedModel([
        {"output": [function_call("getSickLeaveStats", {"period": "August 2025", "groupBy": "month"}, "s1")]},
        {"output": [message("Im August gab es 3 Krankmeldungen.")]},
    ])

    answer = await dispatcher(model).get_next_response("Statistik August", ToolContext())

    assert answer.text == "Im August gab es 3 Krankmeldungen."
    assert [point.model_dump() for point in answer.stats] == [{"name": "August 2025", "value": 3}]


@pytest.mark.asyncio
async def test_invalid_period_becomes_a_german_tool_output():
    model = ScriptedModel([
        {"output": [function_call("getSickLeaveStats", {"period": "irgendwann", "groupBy": "day"}, "s1")]},
        {"output": [message("Bitte nenne einen gültigen Zeitraum.")]},
    ])

    answer = await dispatcher(model).get_next_response("Statistik", ToolContext())

    assert answer.text == "Bitte nenne einen gültigen Zeitraum."
    output = json.loads(appended_items(model.requests[1])[1]["output"])
    assert output["success"] is False
    assert "Ungültiges Datumsformat" in output["message"]


@pytest.mark.asyncio
async def test_error_in_first_response_fails_the_turn():
    model = ScriptedModel([{"error": TRANSPORT_ERROR}])

    answer = await dispatcher(model).get_next_response("?", ToolContext())

    assert answer.error == "Something went wrong."
    assert answer.failed
    assert answer.text is None


@pytest.mark.asyncio
async def test_error_after_successful_rounds_fails_the_turn():
    model = ScriptedModel([
        {"output": [function_call("lookupPolicyDocument", {"topic": "urlaub"}, "c1")]},
        {"output": [function_call("lookupPolicyDocument", {"topic": "arbeitszeit"}, "c2")]},
        {"error": TRANSPORT_ERROR},
    ])

    answer = await dispatcher(model).get_next_response("?", ToolContext())

    assert answer.error == "Something went wrong."
    assert len(model.requests) == 3


@pytest.mark.asyncio
async def test_unknown_tool_yields_default_result_and_continues():
    model = ScriptedModel([
        {"output": [function_call("doSomethingUnsupported", {}, "u1")]},
        {"output": [message("weiter")]},
    ])

    answer = await dispatcher(model).get_next_response("?", ToolContext())

    assert answer.text == "weiter"
    output = appended_items(model.requests[1])[1]
    assert output["call_id"] == "u1"
    assert json.loads(output["output"]) == DEFAULT_TOOL_RESULT == {"result": True}


@pytest.mark.asyncio
async def test_throwing_tool_becomes_failure_output(monkeypatch):
    async def boom(context, **kwargs):
        raise RuntimeError("database down")

    monkeypatch.setattr(supervisor_registry.tools["lookupPolicyDocument"], "execute", boom)
    model = ScriptedModel([
        {"output": [function_call("lookupPolicyDocument", {"topic": "urlaub"}, "t1")]},
        {"output": [message("Das hat leider nicht geklappt.")]},
    ])

    answer = await dispatcher(model).get_next_response("?", ToolContext())

    assert answer.text == "Das hat leider nicht geklappt."
    output = json.loads(appended_items(model.requests[1])[1]["output"])
    assert output == {"success": False, "message": TOOL_FAILURE_MESSAGE, "error": "database down"}


@pytest.mark.asyncio
async def test_unreadable_and_invalid_arguments_become_failure_outputs():
    bad_json = {"type": "function_call", "call_id": "j1", "name": "lookupPolicyDocument", "arguments": "{topic:"}
    model = ScriptedModel([
        {"output": [bad_json, function_call("reportEmployeeSick", {"reason": "Grippe"}, "j2")]},
        {"output": [message("ok")]},
    ])

    await dispatcher(model).get_next_response("?", ToolContext())

    items = appended_items(model.requests[1])
    assert items[0]["arguments"] == "{topic:"
    assert json.loads(items[1]["output"])["success"] is False
    assert json.loads(items[3]["output"])["success"] is False
    assert await sick_log_store.active() == []


@pytest.mark.asyncio
async def test_round_limit_ends_the_turn():
    model = ScriptedModel([
        {"output": [function_call("lookupPolicyDocument", {"topic": "urlaub"}, f"c{i}")]}
        for i in range(3)
    ])

    answer = await dispatcher(model, max_rounds=2).get_next_response("?", ToolContext())

    assert answer.error == MAX_ROUNDS_ERROR
    assert len(model.requests) == 3


@pytest.mark.asyncio
async def test_same_script_gives_same_answer():
    def script():
        return ScriptedModel([
            {"output": [function_call("lookupPolicyDocument", {"topic": "krankmeldung"}, "p1")]},
            {"output": [message("Bis 9 Uhr melden.")]},
        ])

    first = await dispatcher(script()).get_next_response("?", ToolContext())
    second = await dispatcher(script()).get_next_response("?", ToolContext())

    assert first == second
    assert first.text == "Bis 9 Uhr melden."


@pytest.mark.asyncio
async def test_breadcrumbs_record_calls_and_results():
    model = ScriptedModel([
        {"output": [function_call("lookupPolicyDocument", {"topic": "urlaub"}, "b1")]},
        {"output": [message("ok")]},
    ])
    context = ToolContext()

    await dispatcher(model).get_next_response("?", context)

    assert [crumb.title for crumb in context.breadcrumbs] == [
        "[supervisorAgent] function call: lookupPolicyDocument",
        "[supervisorAgent] function call result: lookupPolicyDocument",
    ]
    assert context.breadcrumbs[0].data == {"topic": "urlaub"}


@pytest.mark.asyncio
async def test_bracketed_arguments_do_not_break_the_turn():
    model = ScriptedModel([
        {"output": [function_call("reportEmployeeSick", {"name": "Max [bold]", "reason": "Grippe [/b]"}, "m1")]},
        {"output": [message("ok")]},
    ])

    answer = await dispatcher(model).get_next_response("Max [/i] ist krank", ToolContext())

    assert answer.text == "ok"
    output = json.loads(appended_items(model.requests[1])[1]["output"])
    assert output["success"] is True
    assert (await sick_log_store.active())[0].reason == "Grippe [/b]"


def test_console_panels_show_brackets_verbatim():
    console.display_tool_call("odd[/red]Name", {"reason": "[/b]", "nested": {"note": "[link=x]"}, "tags": ["[/]"]})
    console.display_turn_failure("Turn [/bold] failed", "closing [/i] tag")
    console.rule("Round [/cyan] 1")
