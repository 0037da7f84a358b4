"""
Intake Webhook Client

Submits generated tickets to the workflow webhook behind the portal's
submission form, using the same body the form sends.
"""

from collections.abc import Sequence

import httpx
import structlog
from pydantic import BaseModel, Field, ValidationError

from ticketsmith.config import settings
from ticketsmith.models.ticket import GeneratedTicket, SubmissionResult, WebhookSubmission

logger = structlog.get_logger(__name__)


class WebhookSubmissionError(Exception):
    """A ticket could not be submitted to the intake webhook."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class SubmittedTicket(BaseModel):
    index: int
    idempotency_key: str
    ticket_id: str


class FailedSubmission(BaseModel):
    index: int
    idempotency_key: str
    error: str
    status_code: int | None = None


class BatchSubmissionReport(BaseModel):
    """Outcome of submitting a batch, one entry per ticket."""

    submitted: list[SubmittedTicket] = Field(default_factory=list)
    failed: list[FailedSubmission] = Field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.submitted) + len(self.failed)

    @property
    def all_succeeded(self) -> bool:
        return not self.failed


class WebhookClient:
    """
    Async client for the intake webhook.

    Features:
    - Form-compatible request body
    - Non-2xx responses surfaced as WebhookSubmissionError
    - Batch submission that continues past individual failures
    """

    def __init__(
        self,
        url: str | None = None,
        timeout: float | None = None,
        source: str | None = None,
        use_ticket_channel: bool = False,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.url = url if url is not None else settings.webhook_url
        if not self.url.strip():
            raise ValueError("No webhook URL configured")
        self.timeout = timeout if timeout is not None else settings.webhook_timeout
        self.source = source or settings.webhook_source
        self.use_ticket_channel = use_ticket_channel
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    async def __aenter__(self) -> "WebhookClient":
        self._client = httpx.AsyncClient(timeout=self.timeout, transport=self._transport)
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()

    async def close(self) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    def build_submission(self, ticket: GeneratedTicket) -> WebhookSubmission:
        payload = ticket.to_webhook_payload()
        source = payload.source if self.use_ticket_channel else self.source
        return WebhookSubmission(
            **payload.model_dump(exclude={"source"}),
            category=ticket.category,
            source=source,
        )

    async def submit(self, ticket: GeneratedTicket) -> SubmissionResult:
        """
        Submit a single ticket.

        Raises:
            WebhookSubmissionError: On transport errors, non-2xx statuses,
                or a response without a ticket identifier
        """
        if self._client is None:
            raise RuntimeError("WebhookClient must be used as an async context manager")

        body = self.build_submission(ticket).model_dump()

        try:
            response = await self._client.post(self.url, json=body)
        except httpx.HTTPError as e:
            raise WebhookSubmissionError(f"Request failed: {e}") from e

        if not response.is_success:
            raise WebhookSubmissionError(
                f"Webhook returned {response.status_code}: {response.text[:200]}",
                status_code=response.status_code,
            )

        try:
            return SubmissionResult.model_validate(response.json())
        except (ValueError, ValidationError) as e:
            raise WebhookSubmissionError(
                "Webhook response did not include a ticket_id",
                status_code=response.status_code,
            ) from e

    async def submit_batch(self, tickets: Sequence[GeneratedTicket]) -> BatchSubmissionReport:
        """Submit tickets one after another, recording each outcome."""
        report = BatchSubmissionReport()

        for index, ticket in enumerate(tickets):
            try:
                result = await self.submit(ticket)
            except WebhookSubmissionError as e:
                logger.warning(
                    "Ticket submission failed",
                    index=index,
                    status_code=e.status_code,
                    error=str(e),
                )
                report.failed.append(
                    FailedSubmission(
                        index=index,
                        idempotency_key=ticket.idempotency_key,
                        error=str(e),
                        status_code=e.status_code,
                    )
                )
                continue

            report.submitted.append(
                SubmittedTicket(
                    index=index,
                    idempotency_key=ticket.idempotency_key,
                    ticket_id=result.ticket_id,
                )
            )

        logger.info(
            "Batch submitted",
            url=self.url,
            submitted=len(report.submitted),
            failed=len(report.failed),
        )
        return report
