"""pagelens - text analytics, grouping and recommendations for harvested web pages."""

__version__ = "0.1.0"
