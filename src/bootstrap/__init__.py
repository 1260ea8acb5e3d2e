"""
ブートストラップ関連の公開API。
"""

from .container import (
    BootstrapContainer,
    BootstrapContext,
    BootstrapError,
    ConfigBundle,
    InvalidConfigurationError,
    LoggingConfigurator,
    MetricsConfigurator,
    MissingConfigurationError,
)
from .config_loader import AppConfigModel, YamlConfigLoader
from .logging_setup import DictConfigLoggingConfigurator
from .metrics_setup import (
    MetricsConfiguratorRegistry,
    NoopMetricsConfigurator,
    PrometheusMetricsConfigurator,
    default_metrics_configurator,
)

__all__ = [
    "AppConfigModel",
    "BootstrapContainer",
    "BootstrapContext",
    "BootstrapError",
    "ConfigBundle",
    "InvalidConfigurationError",
    "LoggingConfigurator",
    "MetricsConfigurator",
    "MissingConfigurationError",
    "DictConfigLoggingConfigurator",
    "MetricsConfiguratorRegistry",
    "NoopMetricsConfigurator",
    "PrometheusMetricsConfigurator",
    "YamlConfigLoader",
    "default_metrics_configurator",
]
