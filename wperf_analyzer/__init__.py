"""
Wperf Analyzer - counting and timeline analysis for wperf JSON output
"""

__version__ = "1.0.0"

from .core.analyzer import WperfAnalyzer
from .core.types import AnalyzerConfig, DataSourceInfo, EventKey, WperfEvent

__all__ = ["WperfAnalyzer", "AnalyzerConfig", "DataSourceInfo", "EventKey", "WperfEvent"]
