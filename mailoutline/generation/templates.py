"""Prompt templates for each supported document type.

Every template asks for a JSON array of objects with "title" and "content"
keys and interpolates `{title}` and `{content}`. Literal braces must not
appear anywhere else in a template.
"""

import logging
from typing import Dict

from ..config import DEFAULT_DOC_TYPE

logger = logging.getLogger(__name__)

_OUTPUT_RULES = """Your output must be a valid JSON array (without markdown code blocks).

Each object must contain:
1. "title": concise string for the section heading
2. "content": detailed string (plain text, "- " bullet points or "1. " numbered steps), a list, or an object of named details
"""

PRODUCT_DESCRIPTION_TEMPLATE = """
You are an expert marketer tasked with summarizing a product description for an email.

""" + _OUTPUT_RULES + """
Structure:
- First object: subject line with the product's name
- Subsequent objects: features, benefits and other key details
- If the document contains pricing, include it in the content.

Title: {title}
Content: {content}

Generate the JSON array as per the above rules:
"""

MEETING_AGENDA_TEMPLATE = """
You are an expert meeting organizer tasked with turning a meeting agenda into a structured email.

""" + _OUTPUT_RULES + """
Structure:
- First object: subject line with the meeting title
- Meeting details (place, date, time), using placeholders such as [Place], [Date] and [Time] if missing
- Key agenda items with time slots and step-by-step discussion points
- Preparation instructions for attendees if relevant
- An RSVP request with a short explanation
- Contact information at the end with placeholders such as [Email] and [Phone] (replace with actual values if found)

Title: {title}
Content: {content}

Generate the JSON array as per the above rules:
"""

NEWSLETTER_DRAFT_TEMPLATE = """
You are an expert content creator tasked with summarizing a newsletter draft for an email.

""" + _OUTPUT_RULES + """
Structure:
- First object: subject line with the newsletter's title
- Subsequent objects: key sections such as latest updates and upcoming events, using bullet points or sub-sections where helpful

Title: {title}
Content: {content}

Generate the JSON array as per the above rules:
"""

GENERAL_TEMPLATE = """
You are an expert email marketer tasked with extracting the most important key points and sections from a long document's title and content (such as a product description, a meeting agenda, or a newsletter draft) and returning them in a structured JSON array suitable for summarizing in an email.

""" + _OUTPUT_RULES + """
Structure:
- First object: email subject line using the document's title
- Subsequent objects: logical sections or key points
- If it has a welcoming part, add that in the introduction.
- If the email is about a meeting, include the meeting details (place, date, time) or placeholders if missing.
- For a meeting agenda, include step-by-step details with key points for each agenda item.
- Add preparation instructions for the meeting if relevant.
- Add an RSVP request with an explanation.
- Include contact information at the end with placeholders for the email and phone number (replace with actual values if found).

Title: {title}
Content: {content}

Generate the JSON array as per the above rules:
"""

TEMPLATES: Dict[str, str] = {
    "product_description": PRODUCT_DESCRIPTION_TEMPLATE,
    "meeting_agenda": MEETING_AGENDA_TEMPLATE,
    "newsletter_draft": NEWSLETTER_DRAFT_TEMPLATE,
    "general": GENERAL_TEMPLATE,
}

DOC_TYPES = tuple(TEMPLATES)

def get_template(doc_type: str) -> str:
    """Return the prompt template for a document type.

    Unknown types fall back to the general email template.
    """
    template = TEMPLATES.get(doc_type)
    if template is None:
        logger.warning(f"Unknown document type {doc_type!r}, using the {DEFAULT_DOC_TYPE} template")
        template = TEMPLATES[DEFAULT_DOC_TYPE]
    return template

def build_prompt(doc_type: str, title: str, content: str) -> str:
    """Fill the template for `doc_type` with a document's title and content."""
    return get_template(doc_type).format(title=title, content=content)
