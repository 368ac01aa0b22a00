"""
Test helper functions and factory methods for the Permission Rules Service.
"""

from typing import Dict, Any, List
from dataclasses import dataclass, field


@dataclass
class TestHolder:
    """Test permission holder data."""
    __test__ = False

    holder_id: str
    description: str
    rules: List[Dict[str, Any]] = field(default_factory=list)


class TestDataFactory:
    """Factory for creating test data."""
    
    __test__ = False
    
    @staticmethod
    def create_test_spaces() -> List[Dict[str, Any]]:
        """Create test spaces and their resources."""
        return [
            {"name": "crm", "resources": ["account", "contact", "lead"]},
            {"name": "hr", "resources": ["employee", "payroll"]},
        ]
    
    @staticmethod
    def create_test_holders() -> List[TestHolder]:
        """Create test holders with rule attributes in priority order."""
        return [
            TestHolder(
                holder_id="sales-rep",
                description="CRM access, no account deletion",
                rules=[
                    {"kind": "all", "name": "all", "allow": False},
                    {"kind": "space", "name": "crm", "allow": True},
                    {"kind": "resource", "name": "all", "allow": True},
                    {"kind": "resource", "name": "account", "action": "delete", "allow": False},
                ]
            ),
            TestHolder(
                holder_id="hr-manager",
                description="HR space only",
                rules=[
                    {"kind": "all", "name": "all", "allow": False},
                    {"kind": "space", "name": "hr", "allow": True},
                    {"kind": "resource", "name": "all", "allow": True},
                ]
            ),
            TestHolder(
                holder_id="admin",
                description="Everything",
                rules=[
                    {"kind": "all", "name": "all", "allow": True},
                ]
            ),
            TestHolder(
                holder_id="guest",
                description="No rules at all"
            ),
        ]


def create_rule_attributes(kind: str, name: str, allow: bool, action: str = None) -> Dict[str, Any]:
    """Create rule attributes as they would come out of a rule store."""
    attributes = {"kind": kind, "name": name, "allow": allow}
    if action is not None:
        attributes["action"] = action
    return attributes
