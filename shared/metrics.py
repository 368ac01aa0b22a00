"""
Shared metrics configuration for the Permission Rules Service.
"""

from prometheus_client import Counter, Histogram, Gauge, Info, CollectorRegistry
from typing import Dict, Any, Optional
import threading


class MetricsCollector:
    """Centralized metrics collector for a service."""
    
    def __init__(self, service_name: str, registry: Optional[CollectorRegistry] = None):
        self.service_name = service_name
        self.registry = registry if registry is not None else CollectorRegistry()
        self._metrics: Dict[str, Any] = {}
        self._lock = threading.Lock()
        self._setup_metrics()
    
    def _setup_metrics(self):
        """Set up common metrics for the service."""
        
        # Service info
        self._metrics["service_info"] = Info(
            "service_info",
            "Service information",
            registry=self.registry
        )
        self._metrics["service_info"].info({
            "service": self.service_name,
            "version": "1.0.0"
        })
        
        # Error metrics
        self._metrics["errors_total"] = Counter(
            "errors_total",
            "Total errors",
            ["error_type", "service"],
            registry=self.registry
        )
        
        self._setup_permission_metrics()
    
    def _setup_permission_metrics(self):
        """Set up permission check metrics."""
        self._metrics["permission_checks_total"] = Counter(
            "permission_checks_total",
            "Total permission checks",
            ["decision"],
            registry=self.registry
        )
        
        self._metrics["permission_check_duration_seconds"] = Histogram(
            "permission_check_duration_seconds",
            "Permission check duration in seconds",
            registry=self.registry
        )
        
        self._metrics["rule_base_builds_total"] = Counter(
            "rule_base_builds_total",
            "Total rule base builds",
            registry=self.registry
        )
        
        self._metrics["rule_base_rules"] = Gauge(
            "rule_base_rules",
            "Number of rules in the most recently built rule base",
            registry=self.registry
        )
    
    def record_permission_check(self, allowed: bool, duration: float):
        """Record a permission decision."""
        decision = "allow" if allowed else "deny"
        self._metrics["permission_checks_total"].labels(decision=decision).inc()
        self._metrics["permission_check_duration_seconds"].observe(duration)
    
    def record_rule_base_build(self, rule_count: int):
        """Record a rule base (re)build."""
        with self._lock:
            self._metrics["rule_base_builds_total"].inc()
            self._metrics["rule_base_rules"].set(rule_count)
    
    def record_error(self, error_type: str, service: Optional[str] = None):
        """Record error metrics."""
        service_name = service or self.service_name
        self._metrics["errors_total"].labels(error_type=error_type, service=service_name).inc()
    
    def sample(self, name: str, labels: Optional[Dict[str, str]] = None) -> Optional[float]:
        """Read the current value of a sample from this collector's registry."""
        return self.registry.get_sample_value(name, labels or {})


def get_metrics_collector(service_name: str, registry: Optional[CollectorRegistry] = None) -> MetricsCollector:
    """Get a metrics collector for a service."""
    return MetricsCollector(service_name, registry)
