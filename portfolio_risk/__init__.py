"""Portfolio risk engine: rule-based risk assessment and deal-screening recommendations."""

__version__ = "0.1.0"
