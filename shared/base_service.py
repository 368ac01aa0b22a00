"""
Base service class for the Permission Rules Service.
"""

from typing import Any, Dict, Optional

from shared.config import ServiceConfig, get_config
from shared.logging import configure_logging, get_logger
from shared.metrics import MetricsCollector, get_metrics_collector


class BaseService:
    """Base service class with common functionality."""
    
    def __init__(self, service_name: str, config: Optional[ServiceConfig] = None):
        self.service_name = service_name
        self.config = config or get_config(service_name)
        
        # Configure logging
        configure_logging(service_name, self.config.log_level, self.config.json_logs)
        self.logger = get_logger(service_name)
        
        self.metrics: Optional[MetricsCollector] = None
        if self.config.metrics_enabled:
            self.metrics = get_metrics_collector(service_name)
        
        self.logger.info(
            "Service initialized",
            env=self.config.env,
            metrics_enabled=self.config.metrics_enabled
        )
    
    def health(self) -> Dict[str, Any]:
        """Report basic service status."""
        return {
            "service": self.service_name,
            "status": "ok",
            "env": self.config.env,
            "version": "1.0.0"
        }
