"""
Template Catalog

Hand-authored support inquiries grouped by category, plus the fixed pools
synthetic identities are drawn from.
"""

from collections.abc import Mapping, Sequence

from ticketsmith.models.ticket import TicketTemplate

FIRST_NAMES: tuple[str, ...] = (
    "John", "Sarah", "Mike", "Emily", "David", "Jessica", "Carlos", "Lisa",
    "Tom", "Rachel", "Alex", "Jennifer", "Ryan", "Amanda", "Kevin",
)

LAST_NAMES: tuple[str, ...] = (
    "Smith", "Johnson", "Williams", "Brown", "Jones", "Garcia", "Miller", "Davis",
    "Rodriguez", "Martinez", "Hernandez", "Lopez", "Wilson", "Anderson", "Taylor",
)

EMAIL_DOMAINS: tuple[str, ...] = (
    "gmail.com", "outlook.com", "yahoo.com", "company.com",
    "business.co", "startup.io", "enterprise.com",
)

# =============================================================================
# TICKET TEMPLATES
# =============================================================================

TICKET_TEMPLATES: dict[str, list[dict]] = {
    "billing": [
        {
            "subject": "Need refund for double charge",
            "body": "I was charged twice for my subscription this month. My card was charged $99 on the 1st and again on the 3rd. Please refund one of these charges immediately.",
            "sub_category": "refund_request",
            "sentiment": "frustrated",
            "intensity": 7,
        },
        {
            "subject": "Can't update payment method",
            "body": "I'm trying to update my credit card information but the form keeps giving me an error. I need to update it before my subscription renews next week.",
            "sub_category": "payment_failed",
            "sentiment": "confused",
            "intensity": 5,
        },
        {
            "subject": "Question about invoice",
            "body": "I received invoice #INV-12345 but I don't recognize one of the line items. Can you explain what 'Additional Users (3x)' means? I only have 2 users on my account.",
            "sub_category": "invoice_issue",
            "sentiment": "neutral",
            "intensity": 3,
        },
        {
            "subject": "Want to upgrade to Enterprise plan",
            "body": "Our team is growing and we need more features. Can you help me upgrade to the Enterprise plan? What's the pricing difference?",
            "sub_category": "subscription_upgrade",
            "sentiment": "satisfied",
            "intensity": 2,
        },
        {
            "subject": "URGENT: Unauthorized charges on my account",
            "body": "I just saw three charges on my credit card from your company totaling $297. I did NOT authorize these. I cancelled my subscription months ago. This is completely unacceptable and I'm disputing these charges with my bank.",
            "sub_category": "refund_request",
            "sentiment": "angry",
            "intensity": 9,
        },
    ],
    "technical": [
        {
            "subject": "API returning 500 errors",
            "body": "For the past 2 hours, our production app has been getting 500 Internal Server Error from your API endpoint /api/v1/users. This is breaking our entire application. We need this fixed ASAP.",
            "sub_category": "api_error",
            "sentiment": "frustrated",
            "intensity": 8,
        },
        {
            "subject": "Dashboard not loading",
            "body": "When I try to access my dashboard, I just see a blank white screen. I've tried different browsers (Chrome, Firefox, Safari) and the problem persists. Can you help?",
            "sub_category": "bug_report",
            "sentiment": "confused",
            "intensity": 6,
        },
        {
            "subject": "Feature request: Export to CSV",
            "body": "It would be really helpful if we could export our data to CSV format. Currently we can only export to PDF which doesn't work well for our analysis needs.",
            "sub_category": "feature_request",
            "sentiment": "neutral",
            "intensity": 3,
        },
        {
            "subject": "Integration with Salesforce not working",
            "body": "I followed the integration guide but the data is not syncing between your platform and Salesforce. I've checked all the API keys and they seem correct. What am I missing?",
            "sub_category": "integration_issue",
            "sentiment": "frustrated",
            "intensity": 6,
        },
        {
            "subject": "Slow performance when loading reports",
            "body": "Ever since the update last week, loading reports takes 30+ seconds. It used to be instant. Is there a known issue with the latest version?",
            "sub_category": "performance_problem",
            "sentiment": "frustrated",
            "intensity": 5,
        },
    ],
    "account": [
        {
            "subject": "Can't log into my account",
            "body": "I'm getting 'Invalid credentials' error when trying to log in, but I'm 100% sure my password is correct. I need access urgently for a client meeting in 1 hour.",
            "sub_category": "cannot_login",
            "sentiment": "frustrated",
            "intensity": 8,
        },
        {
            "subject": "Password reset not working",
            "body": "I clicked 'Forgot Password' but I never received the reset email. I've checked my spam folder too. Can you manually reset my password?",
            "sub_category": "password_reset",
            "sentiment": "confused",
            "intensity": 5,
        },
        {
            "subject": "Need to delete my account",
            "body": "I no longer need this service and would like to completely delete my account and all associated data. How do I do this?",
            "sub_category": "account_deletion",
            "sentiment": "neutral",
            "intensity": 2,
        },
        {
            "subject": "Account locked after too many login attempts",
            "body": "My account got locked because I forgot my password and tried too many times. Can you unlock it? I need to access my data.",
            "sub_category": "account_locked",
            "sentiment": "frustrated",
            "intensity": 6,
        },
        {
            "subject": "Security concern - suspicious activity",
            "body": "I just received a notification about a login from an IP address in Russia. I'm in the US and have never been to Russia. I think my account may have been compromised. Please help immediately!",
            "sub_category": "security_concern",
            "sentiment": "worried",
            "intensity": 9,
        },
    ],
    "general": [
        {
            "subject": "How do I invite team members?",
            "body": "I just signed up and want to add my team members. Where do I find the option to invite users?",
            "sub_category": "general_question",
            "sentiment": "neutral",
            "intensity": 2,
        },
        {
            "subject": "Love the new feature!",
            "body": "Just wanted to say the new dashboard redesign is amazing! So much cleaner and easier to use. Great job!",
            "sub_category": "feedback",
            "sentiment": "happy",
            "intensity": 2,
        },
        {
            "subject": "Documentation unclear",
            "body": "I'm trying to follow the 'Getting Started' guide but step 3 doesn't make sense. The screenshot shows a button that I don't see in my interface. Can you clarify?",
            "sub_category": "documentation",
            "sentiment": "confused",
            "intensity": 4,
        },
        {
            "subject": "Partnership inquiry",
            "body": "I represent a marketing agency with 50+ clients who could benefit from your platform. I'd like to discuss partnership opportunities. Who should I speak with?",
            "sub_category": "partnership_inquiry",
            "sentiment": "neutral",
            "intensity": 2,
        },
    ],
}


class TemplateCatalog:
    """Read-only mapping of category to its ordered template list."""

    def __init__(self, templates: Mapping[str, Sequence[TicketTemplate | dict]]):
        if not templates:
            raise ValueError("Template catalog has no categories")

        self._templates: dict[str, tuple[TicketTemplate, ...]] = {}
        for category, entries in templates.items():
            if not entries:
                raise ValueError(f"Category '{category}' has no templates")
            self._templates[category] = tuple(
                entry if isinstance(entry, TicketTemplate) else TicketTemplate(**entry)
                for entry in entries
            )

    @property
    def categories(self) -> list[str]:
        """Categories in authored order."""
        return list(self._templates)

    def templates_for(self, category: str) -> tuple[TicketTemplate, ...]:
        """Return the templates listed under a category."""
        return self._templates[category]

    def __contains__(self, category: object) -> bool:
        return category in self._templates

    def __len__(self) -> int:
        return sum(len(entries) for entries in self._templates.values())


# Singleton instance
_catalog: TemplateCatalog | None = None


def get_catalog() -> TemplateCatalog:
    """Get or create the built-in template catalog."""
    global _catalog
    if _catalog is None:
        _catalog = TemplateCatalog(TICKET_TEMPLATES)
    return _catalog
