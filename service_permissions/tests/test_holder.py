"""
Unit tests for permission holders and accessors.
"""

import pytest
from unittest.mock import MagicMock, patch

from prometheus_client import CollectorRegistry

from shared.errors import (
    HolderNotConfiguredError, UnavailableActionError, PermissionResolutionError, ValidationError
)
from shared.logging import holder_id_var
from shared.metrics import MetricsCollector
from service_permissions.app.holders.accessors import PermissionAccessors
from service_permissions.app.holders.holder import PermissionHolder
from service_permissions.app.permissions.kinds import (
    Space, Resource, ResourcePermission, CustomPermission
)
from service_permissions.app.permissions.registry import build_default_registry
from service_permissions.app.rules.engine import RuleBase
from service_permissions.app.rules.builders import allow, deny, allow_all, deny_all


@pytest.fixture
def registry():
    return build_default_registry()


@pytest.fixture
def crm():
    return Space("crm")


@pytest.fixture
def account(crm):
    return Resource("account", crm)


@pytest.fixture
def contact(crm):
    return Resource("contact", crm)


class TestPermissionAccessors:
    """Test cases for the accessor mixin."""

    def test_has_permission_must_be_provided(self):
        """Test that a class without a rule base cannot answer checks."""
        with pytest.raises(HolderNotConfiguredError) as exc_info:
            PermissionAccessors().may_access(CustomPermission("reports"))

        assert exc_info.value.code == "HOLDER_NOT_CONFIGURED"

    def test_registry_required_for_raw_targets(self):
        with pytest.raises(HolderNotConfiguredError):
            PermissionAccessors().may_access("reports")

    def test_custom_has_permission(self, registry, account):
        class Group(PermissionAccessors):
            permission_registry = registry

            def __init__(self):
                self.checked = []

            def has_permission(self, permission):
                self.checked.append(permission)
                return permission.action == "view"

        group = Group()

        assert group.may("view", account) is True
        assert group.may_not("delete", account) is True
        assert group.checked == [ResourcePermission(account, "view"), ResourcePermission(account, "delete")]


class TestPermissionHolder:
    """Test cases for PermissionHolder."""

    @pytest.fixture
    def rules(self):
        return [
            deny_all(),
            allow("space", "crm"),
            allow_all("resource"),
            deny("resource", "account", "delete"),
        ]

    @pytest.fixture
    def holder(self, rules, registry):
        return PermissionHolder("user-1", rules, registry=registry)

    def test_may(self, holder, account, contact):
        assert holder.may("view", account) is True
        assert holder.may("delete", contact) is True
        assert holder.may("delete", account) is False
        assert holder.may_not("delete", account) is True

    def test_may_access(self, holder, crm):
        assert holder.may_access(crm) is True
        assert holder.may_access(Space("hr")) is False
        assert holder.may_not_access(Space("hr")) is True
        assert holder.may_access("reports") is False

    def test_may_rejects_unavailable_action(self, holder, account):
        with pytest.raises(UnavailableActionError) as exc_info:
            holder.may("publish", account)

        assert exc_info.value.code == "UNAVAILABLE_ACTION"
        assert "publish" in exc_info.value.message
        assert exc_info.value.details["available_actions"] == ["create", "delete", "update", "view"]

    def test_may_without_strict_actions(self, rules, registry, account):
        holder = PermissionHolder("user-1", rules, registry=registry, strict_actions=False)

        assert holder.may("publish", account) is True

    def test_may_unresolvable_target(self, holder):
        with pytest.raises(PermissionResolutionError):
            holder.may_access(42)

    def test_rule_base_is_cached(self, holder):
        rule_base = holder.rule_base()

        assert isinstance(rule_base, RuleBase)
        assert holder.rule_base() is rule_base
        assert holder.rule_base(reload=True) is not rule_base

    def test_rule_source_callable(self, registry):
        """Test that a callable source is re-read only when the cache is dropped."""
        current = [allow_all()]
        source = MagicMock(side_effect=lambda: list(current))
        holder = PermissionHolder("user-2", source, registry=registry)

        assert holder.may_access("reports") is True
        current.append(deny("custom", "reports"))
        assert holder.may_access("reports") is True
        assert source.call_count == 1

        holder.invalidate_rule_base()

        assert holder.may_access("reports") is False
        assert source.call_count == 2

    def test_invalidate_keeps_existing_rule_base_intact(self, registry):
        """Test that rebuilding does not mutate a rule base already handed out."""
        current = [allow_all()]
        holder = PermissionHolder("user-3", lambda: list(current), registry=registry)
        old_rule_base = holder.rule_base()

        current.append(deny_all())
        holder.invalidate_rule_base()

        assert old_rule_base.run(CustomPermission("reports")) is True
        assert holder.rule_base().run(CustomPermission("reports")) is False

    def test_may_with_permission_target(self, registry, account):
        """Test that a prebuilt permission is checked as is when the actions agree."""
        holder = PermissionHolder("user-1", [allow_all(), deny("resource", "account", "delete")], registry=registry)

        assert holder.may("delete", ResourcePermission(account, "delete")) is False
        assert holder.may("view", ResourcePermission(account, "view")) is True

    def test_may_rejects_conflicting_action(self, registry, account):
        """Test that an action differing from the permission's own action is refused."""
        holder = PermissionHolder("user-1", [allow_all(), deny("resource", "account", "delete")], registry=registry)

        with pytest.raises(ValidationError) as exc_info:
            holder.may("delete", ResourcePermission(account, "view"))

        assert exc_info.value.code == "VALIDATION_ERROR"
        assert exc_info.value.details == {"action": "delete", "permission_action": "view"}

    def test_holder_id_scoped_to_check(self, holder, crm):
        """Test that log context carries the holder only while its check runs."""
        seen = []
        evaluate = RuleBase.evaluate

        def recording_evaluate(rule_base, permission):
            seen.append(holder_id_var.get())
            return evaluate(rule_base, permission)

        with patch.object(RuleBase, "evaluate", autospec=True, side_effect=recording_evaluate):
            assert holder.may_access(crm) is True

        assert seen == ["user-1"]
        assert holder_id_var.get() is None

    def test_evaluate(self, holder, account):
        decision = holder.evaluate(ResourcePermission(account, "delete"))

        assert decision.allowed is False
        assert decision.rule_key == "resource:account:delete"

    def test_metrics(self, rules, registry, crm):
        metrics = MetricsCollector("permissions", CollectorRegistry())
        holder = PermissionHolder("user-1", rules, registry=registry, metrics=metrics)

        holder.may_access(crm)
        holder.may_access(Space("hr"))

        assert metrics.sample("rule_base_builds_total") == 1
        assert metrics.sample("rule_base_rules") == 4
        assert metrics.sample("permission_checks_total", {"decision": "allow"}) == 1
        assert metrics.sample("permission_checks_total", {"decision": "deny"}) == 1
