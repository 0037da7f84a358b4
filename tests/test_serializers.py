"""Tests for output serializers."""

import json
import random
import re
from datetime import datetime, timezone

import pytest

from ticketsmith.models.options import OutputFormat
from ticketsmith.services.serializers import (
    SQLInsertRenderer,
    dollar_quote,
    quote_literal,
    render,
    render_json,
    render_webhook,
)

FULL_FIELDS = {
    "idempotency_key",
    "channel",
    "sender_email",
    "sender_name",
    "subject",
    "body",
    "category",
    "sub_category",
    "expected_sentiment",
    "expected_intensity",
    "status",
    "priority",
    "attachments",
    "is_spam",
    "raw_metadata",
}

INTERVAL_PATTERN = re.compile(r"NOW\(\) - INTERVAL '(\d+) hours'")


class TestJSONEncoding:
    """Test the structured-record encoding."""

    def test_full_field_set(self, sample_batch):
        records = json.loads(render_json(sample_batch))

        assert len(records) == len(sample_batch)
        for record in records:
            assert set(record) == FULL_FIELDS
            assert record["status"] == "new"
            assert record["priority"] == "medium"
            assert record["attachments"] == []
            assert set(record["raw_metadata"]) == {"source", "generated", "timestamp"}

    def test_preserves_order(self, sample_batch):
        records = json.loads(render_json(sample_batch))

        assert [r["idempotency_key"] for r in records] == [
            t.idempotency_key for t in sample_batch
        ]

    def test_empty_batch(self):
        assert json.loads(render_json([])) == []


class TestWebhookEncoding:
    """Test the webhook-payload encoding."""

    def test_field_subset(self, sample_batch):
        payloads = json.loads(render_webhook(sample_batch))

        assert len(payloads) == len(sample_batch)
        for payload, ticket in zip(payloads, sample_batch):
            assert set(payload) == {"email", "name", "subject", "message", "source"}
            assert payload["email"] == ticket.sender_email
            assert payload["message"] == ticket.body
            assert payload["source"] == ticket.channel.value


class TestSQLEncoding:
    """Test the insert-statement encoding."""

    def test_statement_per_ticket(self, sample_batch):
        sql = SQLInsertRenderer(rng=random.Random(1)).render(sample_batch)

        assert sql.startswith("-- Generated Test Tickets\n")
        assert sql.count("INSERT INTO tickets (") == len(sample_batch)
        assert sql.count(");\n") == len(sample_batch)

    def test_empty_batch_has_header_only(self):
        sql = SQLInsertRenderer().render([])

        assert "INSERT" not in sql
        assert "-- Generated at:" in sql

    def test_default_columns(self, sample_batch):
        sql = SQLInsertRenderer().render(sample_batch[:1])

        assert (
            "INSERT INTO tickets (idempotency_key, channel, sender_email, sender_name, "
            "subject, body, status, priority, raw_metadata, created_at)"
        ) in sql
        assert "sub_category" not in sql.split("INSERT", 1)[1].split("VALUES")[0]

    def test_free_text_dollar_quoted(self, sample_batch):
        ticket = sample_batch[2]
        sql = SQLInsertRenderer().render(sample_batch)

        assert f"$TICKET_2_SUBJECT${ticket.subject}$TICKET_2_SUBJECT$" in sql
        assert f"$TICKET_2_BODY${ticket.body}$TICKET_2_BODY$" in sql

    def test_comment_line(self, sample_batch):
        ticket = sample_batch[0]
        sql = SQLInsertRenderer().render(sample_batch)

        assert f"-- Ticket 1: {ticket.category} - {ticket.subject}\n" in sql

    def test_comment_line_flattens_newlines(self, sample_batch):
        ticket = sample_batch[0].model_copy(update={"subject": "Line one\r\nDROP TABLE tickets;"})
        sql = SQLInsertRenderer().render([ticket])

        assert f"-- Ticket 1: {ticket.category} - Line one  DROP TABLE tickets;\nINSERT INTO" in sql

    def test_metadata_jsonb_literal(self, first_pick_rng):
        from ticketsmith.services.generator import TicketSynthesizer

        ticket = TicketSynthesizer(rng=first_pick_rng).synthesize(0)
        sql = SQLInsertRenderer(columns=["raw_metadata"]).render([ticket])

        literal = re.search(r"'(\{.*\})'::jsonb", sql).group(1)
        assert json.loads(literal)["source"] == "email"
        assert json.loads(literal)["generated"] is True

    def test_backdate_offset_bounds(self, sample_batch):
        renderer = SQLInsertRenderer(rng=random.Random(11))
        hours = [
            int(h)
            for _ in range(20)
            for h in INTERVAL_PATTERN.findall(renderer.render(sample_batch))
        ]

        assert len(hours) == 20 * len(sample_batch)
        assert all(0 <= h < 48 for h in hours)

    def test_backdate_upper_draw(self, sample_batch):
        class LastPick:
            def randrange(self, stop):
                return stop - 1

        sql = SQLInsertRenderer(rng=LastPick()).render(sample_batch[:1])

        assert INTERVAL_PATTERN.findall(sql) == ["47"]

    def test_configurable_columns(self, sample_batch):
        columns = ["idempotency_key", "category", "sub_category", "attachments", "is_spam"]
        sql = SQLInsertRenderer(columns=columns, table="test_tickets").render(sample_batch[:1])
        ticket = sample_batch[0]

        assert "INSERT INTO test_tickets (idempotency_key, category, sub_category, attachments, is_spam)" in sql
        assert f"'{ticket.sub_category}'" in sql
        assert "'[]'::jsonb" in sql
        assert "FALSE" in sql
        assert "NOW()" not in sql

    def test_unknown_column_rejected(self):
        with pytest.raises(ValueError, match="expected_sentiment"):
            SQLInsertRenderer(columns=["expected_sentiment"])

    def test_header_uses_clock(self):
        fixed = datetime(2026, 1, 2, 3, 4, 5, tzinfo=timezone.utc)
        sql = SQLInsertRenderer(clock=lambda: fixed).render([])

        assert "-- Generated at: 2026-01-02T03:04:05+00:00" in sql


class TestQuoting:
    """Test SQL quoting helpers."""

    def test_quote_literal_doubles_quotes(self):
        assert quote_literal("O'Brien") == "'O''Brien'"

    def test_dollar_quote_tags_by_index_and_field(self):
        assert dollar_quote("I'm stuck", 4, "body") == "$TICKET_4_BODY$I'm stuck$TICKET_4_BODY$"

    def test_dollar_quote_avoids_embedded_tag(self):
        text = "see $TICKET_0_BODY$ above"
        quoted = dollar_quote(text, 0, "body")

        assert quoted == f"$TICKET_0_BODY_X${text}$TICKET_0_BODY_X$"

    def test_dollar_quote_avoids_tag_at_end_of_text(self):
        """Text ending in the tag name must not fuse with the closing delimiter."""
        text = "price is 5$TICKET_0_BODY"
        quoted = dollar_quote(text, 0, "body")

        assert quoted == f"$TICKET_0_BODY_X${text}$TICKET_0_BODY_X$"
        assert quoted.index("$TICKET_0_BODY_X$", 1) == len("$TICKET_0_BODY_X$") + len(text)


class TestRender:
    """Test encoding selection."""

    @pytest.mark.parametrize(
        "output_format,marker",
        [
            (OutputFormat.JSON, '"idempotency_key"'),
            (OutputFormat.SQL, "INSERT INTO"),
            (OutputFormat.WEBHOOK, '"message"'),
        ],
    )
    def test_selects_encoding(self, sample_batch, output_format, marker):
        assert marker in render(sample_batch, output_format)
