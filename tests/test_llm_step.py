"""Tests for LLMSummaryStep (the LLM client is faked)."""

from __future__ import annotations

from typing import Any

import pytest

from vcscout.schemas.enrichment import NO_SUMMARY_PLACEHOLDER
from vcscout.steps.base import PageContext, SummaryStep
from vcscout.steps.llm import SYSTEM_PROMPT, LLMSummaryStep
from vcscout.steps.providers.base import LLMAPIError

from conftest import FakeLLMClient

FETCHED_AT = "2026-03-01T12:00:00.000Z"

GOOD_PAYLOAD = {
    "summary": "Acme builds payments APIs for marketplaces.",
    "whatTheyDo": ["Payments API", "Payouts", "Fraud tooling"],
    "keywords": ["payments", "api", "marketplaces", "payouts", "fraud"],
    "signals": [
        {"type": "Hiring", "description": "Careers page lists 12 roles", "confidence": "high"},
        {"type": "Changelog", "description": "Weekly product updates", "confidence": "Medium"},
    ],
}


def _make_ctx(**overrides: Any) -> PageContext:
    defaults: dict[str, Any] = dict(
        url="https://acme.test/",
        html="<html><body>Acme payments</body></html>",
        text="Acme payments",
        fetched_at=FETCHED_AT,
    )
    defaults.update(overrides)
    return PageContext(**defaults)


# -- construction --------------------------------------------------------


class TestLLMSummaryStepConstruction:
    def test_satisfies_protocol(self):
        assert isinstance(LLMSummaryStep(client=FakeLLMClient()), SummaryStep)

    def test_defaults(self):
        step = LLMSummaryStep(client=FakeLLMClient())
        assert step.name == "generative"
        assert step.model == "gpt-4o-mini"
        assert step.temperature == 0.7
        assert step.max_tokens == 1000


# -- request -------------------------------------------------------------


class TestLLMSummaryRequest:
    @pytest.mark.asyncio
    async def test_request_parameters(self):
        client = FakeLLMClient(GOOD_PAYLOAD)
        step = LLMSummaryStep(client=client, model="gpt-4.1-mini", temperature=0.2, max_tokens=500)

        await step.run(_make_ctx(text="Acme builds payments APIs"))

        assert len(client.calls) == 1
        call = client.calls[0]
        assert call["model"] == "gpt-4.1-mini"
        assert call["temperature"] == 0.2
        assert call["max_tokens"] == 500
        assert call["response_format"] == {"type": "json_object"}

    @pytest.mark.asyncio
    async def test_messages_embed_page_text(self):
        client = FakeLLMClient(GOOD_PAYLOAD)
        await LLMSummaryStep(client=client).run(_make_ctx(text="Acme builds payments APIs"))

        system, user = client.calls[0]["messages"]
        assert system == {"role": "system", "content": SYSTEM_PROMPT}
        assert user["role"] == "user"
        assert "Acme builds payments APIs" in user["content"]
        assert "first 5000 chars" in user["content"]
        assert '"whatTheyDo"' in user["content"]

    @pytest.mark.asyncio
    async def test_html_is_not_sent(self):
        client = FakeLLMClient(GOOD_PAYLOAD)
        ctx = _make_ctx(html="<script>secret()</script>", text="visible")
        await LLMSummaryStep(client=client).run(ctx)
        assert "secret()" not in client.calls[0]["messages"][1]["content"]


# -- parsing -------------------------------------------------------------


class TestLLMSummaryParsing:
    @pytest.mark.asyncio
    async def test_builds_result(self):
        result = await LLMSummaryStep(client=FakeLLMClient(GOOD_PAYLOAD)).run(_make_ctx())

        assert result is not None
        assert result.summary == GOOD_PAYLOAD["summary"]
        assert result.what_they_do == GOOD_PAYLOAD["whatTheyDo"]
        assert result.keywords == GOOD_PAYLOAD["keywords"]
        assert [(s.type, s.confidence) for s in result.signals] == [
            ("Hiring", "high"),
            ("Changelog", "medium"),
        ]
        assert result.sources[0].url == "https://acme.test/"
        assert result.sources[0].timestamp == FETCHED_AT
        assert result.enriched_at == FETCHED_AT

    @pytest.mark.asyncio
    async def test_missing_fields_use_defaults(self):
        result = await LLMSummaryStep(client=FakeLLMClient({"keywords": ["fintech"]})).run(
            _make_ctx()
        )

        assert result is not None
        assert result.summary == NO_SUMMARY_PLACEHOLDER
        assert result.what_they_do == []
        assert result.keywords == ["fintech"]
        # Never empty: the default signal stands in
        assert [s.type for s in result.signals] == ["Website Active"]

    @pytest.mark.asyncio
    async def test_null_and_blank_fields(self):
        payload = {"summary": "  ", "whatTheyDo": None, "keywords": None, "signals": None}
        result = await LLMSummaryStep(client=FakeLLMClient(payload)).run(_make_ctx())

        assert result.summary == NO_SUMMARY_PLACEHOLDER
        assert result.what_they_do == []
        assert result.keywords == []
        assert len(result.signals) == 1

    @pytest.mark.asyncio
    async def test_accepts_snake_case_keys(self):
        payload = {"summary": "Acme.", "what_they_do": ["Payments"]}
        result = await LLMSummaryStep(client=FakeLLMClient(payload)).run(_make_ctx())
        assert result.what_they_do == ["Payments"]


# -- degradation ---------------------------------------------------------


class TestLLMSummaryDegradation:
    @pytest.mark.asyncio
    async def test_api_error_returns_none(self):
        client = FakeLLMClient(error=LLMAPIError("boom", status_code=500))
        assert await LLMSummaryStep(client=client).run(_make_ctx()) is None

    @pytest.mark.asyncio
    async def test_empty_content_returns_none(self):
        assert await LLMSummaryStep(client=FakeLLMClient("")).run(_make_ctx()) is None

    @pytest.mark.asyncio
    async def test_non_json_returns_none(self):
        client = FakeLLMClient("Sure! Here is the summary you asked for.")
        assert await LLMSummaryStep(client=client).run(_make_ctx()) is None

    @pytest.mark.asyncio
    async def test_json_array_returns_none(self):
        client = FakeLLMClient('["payments", "api"]')
        assert await LLMSummaryStep(client=client).run(_make_ctx()) is None

    @pytest.mark.asyncio
    async def test_signal_without_description_is_rejected(self):
        payload = {"summary": "Acme.", "signals": [{"type": "Launch", "confidence": "low"}]}
        assert await LLMSummaryStep(client=FakeLLMClient(payload)).run(_make_ctx()) is None

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "payload",
        [
            {"keywords": "payments, api"},
            {"whatTheyDo": "Payments"},
            {"signals": [{"type": "Hiring", "confidence": "very high"}]},
            {"signals": ["Hiring"]},
            {"summary": ["not", "a", "string"]},
        ],
    )
    async def test_malformed_fields_return_none(self, payload):
        assert await LLMSummaryStep(client=FakeLLMClient(payload)).run(_make_ctx()) is None

    @pytest.mark.asyncio
    async def test_failure_is_logged(self, caplog):
        client = FakeLLMClient("not json")
        with caplog.at_level("WARNING", logger="vcscout"):
            await LLMSummaryStep(client=client).run(_make_ctx())
        assert "Failed to parse LLM summary" in caplog.text
