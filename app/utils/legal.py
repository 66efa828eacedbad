"""
Legal page helpers: default content, date formatting and light markup.
"""
import re
from datetime import datetime
from typing import Any, Dict, Optional
from app.core.config import settings
from app.core.logging import logger
from app.schemas.entities import LegalPage

LEGAL_PAGE_TYPES = ("privacy", "terms", "cookies")

LEGAL_DESCRIPTIONS: Dict[str, Dict[str, str]] = {
    "privacy": {
        "description": (
            "Learn how {site} collects, uses, and protects your personal information. "
            "Our commitment to data privacy and security."
        ),
        "keywords": "privacy policy, data protection, user privacy, GDPR compliance, data security",
    },
    "terms": {
        "description": (
            "Read {site}'s terms of service for website usage, service agreements, "
            "and legal conditions."
        ),
        "keywords": "terms of service, website terms, service agreement, legal terms, conditions",
    },
    "cookies": {
        "description": (
            "Learn about {site}'s cookie usage, types of cookies we use, and how to "
            "manage your cookie preferences."
        ),
        "keywords": "cookie policy, website cookies, tracking, privacy, cookie management",
    },
}

DEFAULT_LEGAL_CONTENT: Dict[str, Dict[str, str]] = {
    "privacy": {
        "title": "Privacy Policy",
        "content": """This Privacy Policy explains how EtherCore collects, uses, and protects your personal information when you visit our website.

**Information We Collect:**
- Personal information (name, email, subject of inquiry)
- Technical information (IP address, browser type, pages visited)
- Cookies and tracking data

**How We Use Your Information:**
- Respond to inquiries
- Improve website and services
- Analyze traffic and enhance security

**Your Rights:**
You have the right to access, correct, or delete your data. Contact us at admin@ether-core.com.

**Data Security:**
We implement strict security measures to protect your data. However, no system is 100% secure.""",
    },
    "terms": {
        "title": "Terms of Service",
        "content": """Welcome to EtherCore. By accessing our website, you agree to these Terms of Service.

**Use of Our Website:**
- You must be at least 18 years old to use this site
- You cannot use our website for unlawful activities
- We may change or suspend services without notice

**Intellectual Property:**
All content on this site (text, images, branding) is owned by EtherCore. You cannot copy, distribute, or modify any content without permission.

**Disclaimers & Limitations:**
- No guarantees: We aim to provide accurate information but do not guarantee error-free content
- Limited liability: We are not responsible for any damages resulting from website use
- External links: We may link to third-party sites but do not control their content

**Contact Us:**
Contact us at admin@ether-core.com.""",
    },
    "cookies": {
        "title": "Cookie Policy",
        "content": """This Cookie Policy explains how EtherCore uses cookies and similar technologies.

**What Are Cookies?**
Cookies are small files stored on your device that help improve your browsing experience.

**How We Use Cookies:**
- Ensure website functionality
- Analyze traffic and improve performance
- Protect against spam and security threats

**Types of Cookies We Use:**
- Essential Cookies: Needed for website functionality
- Analytics Cookies: Track user behavior and performance
- Security Cookies: Prevent spam with Google reCAPTCHA
- Third-Party Cookies: Used by services like Google, YouTube, Facebook

**Managing Cookies:**
You can disable cookies in your browser settings. Visit your browser's help section for instructions.

**Contact Us:**
If you have questions about cookies, contact us at admin@ether-core.com.""",
    },
}


def default_legal_page(page_type: str) -> LegalPage:
    default = DEFAULT_LEGAL_CONTENT[page_type]
    return LegalPage(page_type=page_type, title=default["title"], content=default["content"])


def format_last_updated(value: Optional[str]) -> Optional[str]:
    """Format an ISO timestamp as e.g. '5 March 2024'; unparseable input is returned as is."""
    if not value:
        return None
    try:
        parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        logger.warning(f"Could not parse legal page date: {value}")
        return value
    return f"{parsed.day} {parsed.strftime('%B %Y')}"


def parse_content(content: str) -> str:
    """
    Convert the markdown-like legal copy to HTML: paragraphs, line breaks,
    bold, italics and links.
    """
    html = content.replace("\n\n", "</p><p>").replace("\n", "<br>")
    html = re.sub(r"\*\*(.*?)\*\*", r"<strong>\1</strong>", html)
    html = re.sub(r"\*(.*?)\*", r"<em>\1</em>", html)
    html = re.sub(r"\[(.*?)\]\((.*?)\)", r'<a href="\2">\1</a>', html)
    return f"<p>{html}</p>"


def generate_legal_page_metadata(legal_page: LegalPage) -> Dict[str, Any]:
    site = settings.SITE_NAME
    title = f"{legal_page.title} - {site}"
    copy = LEGAL_DESCRIPTIONS[legal_page.page_type]
    description = copy["description"].format(site=site)

    return {
        "title": title,
        "description": description,
        "keywords": f"{copy['keywords']}, {site}",
        "open_graph": {
            "title": title,
            "description": description,
            "url": f"{settings.SITE_URL.rstrip('/')}/{legal_page.page_type}",
            "site_name": site,
            "type": "website",
        },
    }
