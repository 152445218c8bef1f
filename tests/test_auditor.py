import logging

from fansite.auditor import TextAuditor, extract_text_nodes, get_auditor


HTML = """
<!DOCTYPE html>
<html>
  <head><title>Yang Hansen</title><style>.x::after { content: "中"; }</style></head>
  <body>
    <!-- 注释 -->
    <h1>Yang Hansen</h1>
    <p>Center</p>
    <span>波特兰开拓者</span>
    <script>var label = "杨瀚森";</script>
  </body>
</html>
"""


def test_extract_text_nodes_skips_scripts_styles_and_comments():
    assert extract_text_nodes(HTML) == ["Yang Hansen", "Yang Hansen", "Center", "波特兰开拓者"]


def test_disabled_auditor_skips():
    report = TextAuditor(enabled=False).audit_texts(["杨瀚森"])
    assert report.skipped
    assert report.findings == []
    assert report.banner is None


def test_chinese_locale_skips():
    report = TextAuditor(enabled=True).audit_texts(["杨瀚森"], "zh")
    assert report.skipped
    assert report.locale == "zh"


def test_reports_findings_with_banner(caplog):
    auditor = TextAuditor(enabled=True, banner_ttl_seconds=7)
    with caplog.at_level(logging.WARNING, logger="fansite.auditor"):
        report = auditor.audit_texts(["Center", "  ", "杨瀚森", "上周"], "en")

    assert not report.skipped
    assert report.checked == 3
    assert report.findings == ["杨瀚森", "上周"]
    assert not report.clean
    assert report.banner.ttl_seconds == 7
    assert report.banner.dismissible
    assert report.banner.message == (
        "WARNING: 2 Chinese text(s) detected in English mode! Check console for details."
    )
    assert '1. "杨瀚森"' in caplog.text
    assert '2. "上周"' in caplog.text


def test_clean_page_has_no_banner(caplog):
    with caplog.at_level(logging.INFO, logger="fansite.auditor"):
        report = TextAuditor(enabled=True).audit_texts(["Yang Hansen", "Center"])
    assert report.clean
    assert report.banner is None
    assert "No Chinese text detected in English mode" in caplog.text


def test_audit_html_only_reports():
    auditor = TextAuditor(enabled=True)
    report = auditor.audit_html(HTML, "en")
    assert report.findings == ["波特兰开拓者"]


def test_get_auditor_requires_dev_mode(dev_mode):
    assert get_auditor().enabled
    dev_mode.dev_mode = False
    assert not get_auditor().enabled


def test_get_auditor_disabled_by_default():
    assert not get_auditor().enabled
