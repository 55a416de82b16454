"""Tests for namespace filtering."""

from resource_quota_check.check.filters import BLACKLIST, WHITELIST, should_skip_namespace, skip_reason


class TestShouldSkipNamespace:
    """Tests for blacklist/whitelist handling."""

    def test_no_lists_includes_everything(self, make_config):
        cfg = make_config()

        assert should_skip_namespace("default", cfg) is False

    def test_blacklist_wins_over_whitelist(self, make_config):
        cfg = make_config(blacklist=["kube-system"], whitelist=["app-a", "app-b", "kube-system"])

        assert should_skip_namespace("kube-system", cfg) is True
        assert skip_reason("kube-system", cfg) == BLACKLIST

    def test_blacklisted_namespace_skipped_with_other_whitelist(self, make_config):
        cfg = make_config(blacklist=["kube-system"], whitelist=["app-a", "app-b"])

        assert should_skip_namespace("kube-system", cfg) is True

    def test_namespace_not_in_whitelist_is_skipped(self, make_config):
        cfg = make_config(whitelist=["app-a"])

        assert should_skip_namespace("app-b", cfg) is True
        assert skip_reason("app-b", cfg) == WHITELIST

    def test_whitelisted_namespace_is_included(self, make_config):
        cfg = make_config(whitelist=["app-a"])

        assert should_skip_namespace("app-a", cfg) is False

    def test_blacklist_does_not_match_other_namespaces(self, make_config):
        cfg = make_config(blacklist=["kube-system"])

        assert should_skip_namespace("kube-public", cfg) is False

    def test_whitelist_applies_when_blacklist_does_not_match(self, make_config):
        cfg = make_config(blacklist=["kube-system"], whitelist=["app-a"])

        assert should_skip_namespace("app-b", cfg) is True
        assert should_skip_namespace("app-a", cfg) is False

    def test_exact_match_only(self, make_config):
        cfg = make_config(blacklist=["kube-*"], whitelist=["app"])

        assert should_skip_namespace("kube-system", cfg) is True
        assert skip_reason("kube-system", cfg) == WHITELIST
        assert should_skip_namespace("app", cfg) is False
