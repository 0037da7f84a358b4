"""Tests for Pydantic models."""

import pytest
from pydantic import ValidationError

from ticketsmith.models.options import GeneratorOptions, OutputFormat, parse_count, parse_format
from ticketsmith.models.ticket import (
    Channel,
    GeneratedTicket,
    SubmissionResult,
    TicketMetadata,
    TicketPriority,
    TicketStatus,
    TicketTemplate,
    WebhookSubmission,
)


def make_ticket(**overrides) -> GeneratedTicket:
    values = {
        "idempotency_key": "a" * 64,
        "channel": Channel.SLACK,
        "sender_email": "emily.davis@startup.io",
        "sender_name": "Emily Davis",
        "subject": "Dashboard not loading",
        "body": "Blank white screen.",
        "category": "technical",
        "sub_category": "bug_report",
        "expected_sentiment": "confused",
        "expected_intensity": 6,
        "raw_metadata": TicketMetadata(source=Channel.SLACK),
    }
    values.update(overrides)
    return GeneratedTicket(**values)


class TestTicketModels:
    """Test ticket models."""

    def test_template_intensity_bounds(self):
        """Intensity must be on the 1-10 scale."""
        with pytest.raises(ValidationError):
            TicketTemplate(
                subject="x", body="y", sub_category="z", sentiment="neutral", intensity=11
            )

    def test_generated_ticket_defaults(self):
        """Test generated ticket default values."""
        ticket = make_ticket()

        assert ticket.status == TicketStatus.NEW
        assert ticket.priority == TicketPriority.MEDIUM
        assert ticket.attachments == []
        assert ticket.is_spam is False
        assert ticket.raw_metadata.generated is True

    def test_ticket_is_frozen(self):
        """Tickets are never mutated after creation."""
        ticket = make_ticket()

        with pytest.raises(ValidationError):
            ticket.status = TicketStatus.CLOSED

    def test_record_is_json_compatible(self):
        record = make_ticket().to_record()

        assert record["channel"] == "slack"
        assert record["raw_metadata"]["source"] == "slack"
        assert isinstance(record["raw_metadata"]["timestamp"], str)

    def test_webhook_payload(self):
        """Webhook payload carries the form fields only."""
        payload = make_ticket().to_webhook_payload()

        assert payload.model_dump() == {
            "email": "emily.davis@startup.io",
            "name": "Emily Davis",
            "subject": "Dashboard not loading",
            "message": "Blank white screen.",
            "source": "slack",
        }

    def test_webhook_submission_adds_category(self):
        submission = WebhookSubmission(
            email="a@b.co", name="A B", subject="s", message="m", source="web_portal",
            category="billing",
        )

        assert set(submission.model_dump()) == {
            "email", "name", "subject", "message", "category", "source",
        }

    def test_webhook_submission_schema_example(self):
        """The documented example lives in model_config."""
        example = WebhookSubmission.model_config["json_schema_extra"]["example"]

        assert example["source"] == "web_portal"
        assert WebhookSubmission.model_json_schema()["example"] == example

    def test_submission_result_numeric_id(self):
        """Numeric ticket ids are normalized to strings."""
        assert SubmissionResult.model_validate({"ticket_id": 42}).ticket_id == "42"

    def test_submission_result_requires_ticket_id(self):
        with pytest.raises(ValidationError):
            SubmissionResult.model_validate({"status": "ok"})


class TestGeneratorOptions:
    """Test command-line option parsing."""

    @pytest.mark.parametrize("value", [None, "", "abc", "ten", ".5", "-"])
    def test_count_falls_back_to_default(self, value):
        assert parse_count(value) == 20

    def test_count_parses_integers(self):
        assert parse_count(" 7 ") == 7
        assert parse_count("0") == 0

    @pytest.mark.parametrize("value,expected", [("12.5", 12), ("5abc", 5), ("+8", 8), ("  30 tickets", 30)])
    def test_count_reads_leading_integer(self, value, expected):
        """Trailing non-digits after a number are ignored."""
        assert parse_count(value) == expected

    def test_negative_count_clamps_to_zero(self):
        assert parse_count("-3") == 0
        assert parse_count("-3.9") == 0

    @pytest.mark.parametrize(
        "value,expected",
        [
            (None, OutputFormat.JSON),
            ("sql", OutputFormat.SQL),
            ("WEBHOOK", OutputFormat.WEBHOOK),
            ("yaml", OutputFormat.JSON),
        ],
    )
    def test_format_parsing(self, value, expected):
        assert parse_format(value) == expected

    def test_from_args_defaults(self):
        options = GeneratorOptions.from_args()

        assert options.count == 20
        assert options.output_format == OutputFormat.JSON
        assert options.sql_columns[0] == "idempotency_key"
        assert options.seed is None

    def test_unknown_sql_column_rejected(self):
        with pytest.raises(ValidationError):
            GeneratorOptions.from_args("5", "sql", sql_columns=["subject", "expected_sentiment"])

    def test_duplicate_sql_column_rejected(self):
        with pytest.raises(ValidationError):
            GeneratorOptions.from_args("5", "sql", sql_columns=["subject", "subject"])
