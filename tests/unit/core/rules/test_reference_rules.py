"""Tests for history and source rules."""

from passrule.core.rules import DigestHistoryRule, DigestSourceRule, HistoryRule, SourceRule
from passrule.domain.entities import HistoricalReference, PasswordData, SourceReference
from passrule.infrastructure.digest import HashlibDigester


def history(*passwords: str) -> tuple[HistoricalReference, ...]:
    return tuple(HistoricalReference(f"h{i}", p) for i, p in enumerate(passwords))


class TestHistoryRule:
    """Test cleartext history matching."""

    def test_no_history_passes(self):
        """Test that the rule is a no-op without references."""
        assert HistoryRule().validate(PasswordData("t3stUs3r01")).valid is True

    def test_source_references_ignored(self):
        """Test that only historical references are considered."""
        data = PasswordData("t3stUs3r01", references=(SourceReference("other", "t3stUs3r01"),))
        assert HistoryRule().validate(data).valid is True

    def test_match_reported_with_history_size(self):
        """Test the detail of a historical match."""
        data = PasswordData("t3stUs3r02", references=history("t3stUs3r01", "t3stUs3r02", "t3stUs3r03"))
        result = HistoryRule().validate(data)

        assert result.error_codes == ["HISTORY_VIOLATION"]
        assert dict(result.details[0].parameters) == {"history_size": 3}

    def test_no_match(self):
        """Test that a new password passes."""
        data = PasswordData("fresh", references=history("t3stUs3r01"))
        assert HistoryRule().validate(data).valid is True

    def test_report_all(self):
        """Test that every matching reference is reported."""
        data = PasswordData("same", references=history("same", "other", "same"))
        assert len(HistoryRule().validate(data).details) == 2
        assert len(HistoryRule(report_all=False).validate(data).details) == 1

    def test_size_to_report(self):
        """Test that an explicit size overrides the reference count."""
        data = PasswordData("same", references=history("same"))
        result = HistoryRule(size_to_report=4).validate(data)
        assert result.details[0].parameters["history_size"] == 4


class TestDigestHistoryRule:
    """Test digest history matching."""

    def test_digest_match(self):
        """Test that a password whose digest is stored is rejected."""
        digester = HashlibDigester("sha256", salt="pepper")
        data = PasswordData(
            "t3stUs3r01",
            references=(HistoricalReference("h0", digester.digest("t3stUs3r01")),),
        )
        result = DigestHistoryRule(digester=digester).validate(data)
        assert result.error_codes == ["HISTORY_VIOLATION"]

    def test_cleartext_reference_does_not_match_digest(self):
        """Test that references are compared as digests only."""
        digester = HashlibDigester("sha256")
        data = PasswordData("t3stUs3r01", references=history("t3stUs3r01"))
        assert DigestHistoryRule(digester=digester).validate(data).valid is True

    def test_custom_digester(self):
        """Test that any object with a digest method can be injected."""

        class UpperDigester:
            def digest(self, cleartext: str) -> str:
                return cleartext.upper()

        data = PasswordData("abc", references=history("ABC"))
        rule = DigestHistoryRule(report_all=True, size_to_report=10, digester=UpperDigester())
        result = rule.validate(data)
        assert result.details[0].parameters["history_size"] == 10

    def test_positional_construction(self):
        """Test that the digester is the first positional argument."""
        digester = HashlibDigester("sha1")
        rule = DigestHistoryRule(digester, False, 3)

        assert rule.digester is digester
        assert rule.report_all is False
        assert rule.size_to_report == 3
        assert rule == DigestHistoryRule(digester=digester, report_all=False, size_to_report=3)


class TestSourceRule:
    """Test source matching."""

    def test_no_sources_passes(self):
        """Test that the rule is a no-op without source references."""
        data = PasswordData("secret", references=history("secret"))
        assert SourceRule().validate(data).valid is True

    def test_source_match(self):
        """Test that the matching source label is reported."""
        data = PasswordData(
            "secret",
            references=(SourceReference("System A", "other"), SourceReference("System B", "secret")),
        )
        result = SourceRule().validate(data)
        assert result.error_codes == ["SOURCE_VIOLATION"]
        assert result.details[0].parameters["source"] == "System B"

    def test_digest_source_match(self):
        """Test digest source matching."""
        digester = HashlibDigester("sha1", encoding="base64")
        data = PasswordData("secret", references=(SourceReference("LDAP", digester.digest("secret")),))
        result = DigestSourceRule(digester=digester).validate(data)
        assert result.details[0].parameters["source"] == "LDAP"

    def test_digest_source_positional_construction(self):
        """Test that the digest source rule takes the digester first."""
        digester = HashlibDigester("sha1")
        data = PasswordData(
            "secret",
            references=(
                SourceReference("A", digester.digest("secret")),
                SourceReference("B", digester.digest("secret")),
            ),
        )
        result = DigestSourceRule(digester, False).validate(data)
        assert [d.parameters["source"] for d in result.details] == ["A"]
