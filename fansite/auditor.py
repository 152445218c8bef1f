"""Development-time check for Chinese text left in English pages.

The auditor only reports. It never changes the content it inspects and it
is disabled outside development mode.
"""

import logging
from typing import Iterable, Optional

from bs4 import BeautifulSoup
from bs4.element import Comment, Declaration, Doctype, ProcessingInstruction
from pydantic import BaseModel

from .chinese import contains_chinese
from .lang import Locale, parse_locale

logger = logging.getLogger(__name__)

SKIPPED_TAGS = ("script", "style")
NON_TEXT_NODES = (Comment, Declaration, Doctype, ProcessingInstruction)


class AuditBanner(BaseModel):
    message: str
    ttl_seconds: int = 5
    dismissible: bool = True


class AuditReport(BaseModel):
    locale: str = Locale.EN.value
    skipped: bool = False
    checked: int = 0
    findings: list[str] = []
    banner: Optional[AuditBanner] = None

    @property
    def clean(self) -> bool:
        return not self.findings


def extract_text_nodes(html: str) -> list[str]:
    """Return the stripped, non-empty text nodes of ``html``.

    Text inside ``<script>`` and ``<style>`` is ignored.
    """
    soup = BeautifulSoup(html, "html.parser")
    texts: list[str] = []
    for node in soup.find_all(string=True):
        if isinstance(node, NON_TEXT_NODES):
            continue
        parent = node.parent
        if parent is not None and parent.name in SKIPPED_TAGS:
            continue
        text = str(node).strip()
        if text:
            texts.append(text)
    return texts


class TextAuditor:
    def __init__(self, enabled: bool = False, banner_ttl_seconds: int = 5):
        self.enabled = enabled
        self.banner_ttl_seconds = banner_ttl_seconds

    def audit_texts(self, texts: Iterable[str], locale=Locale.EN) -> AuditReport:
        resolved = parse_locale(locale, Locale.EN)
        if not self.enabled or resolved is not Locale.EN:
            return AuditReport(locale=resolved.value, skipped=True)

        checked = 0
        findings: list[str] = []
        for raw in texts:
            text = raw.strip() if isinstance(raw, str) else ""
            if not text:
                continue
            checked += 1
            if contains_chinese(text):
                findings.append(text)

        report = AuditReport(locale=resolved.value, checked=checked, findings=findings)
        if findings:
            logger.warning("Chinese text detected in English mode:")
            for index, text in enumerate(findings, start=1):
                logger.warning('%d. "%s"', index, text)
            report.banner = AuditBanner(
                message=(
                    f"WARNING: {len(findings)} Chinese text(s) detected in English mode! "
                    "Check console for details."
                ),
                ttl_seconds=self.banner_ttl_seconds,
            )
        else:
            logger.info("No Chinese text detected in English mode")
        return report

    def audit_html(self, html: str, locale=Locale.EN) -> AuditReport:
        resolved = parse_locale(locale, Locale.EN)
        if not self.enabled or resolved is not Locale.EN:
            return AuditReport(locale=resolved.value, skipped=True)
        return self.audit_texts(extract_text_nodes(html), resolved)


def get_auditor() -> TextAuditor:
    from .config import get_config

    config = get_config()
    return TextAuditor(
        enabled=config.dev_mode and config.audit.enabled,
        banner_ttl_seconds=config.audit.banner_ttl_seconds,
    )
