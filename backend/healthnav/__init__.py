"""
Health Navigator analytics backend.

- analytics: pure functions over health records (trends, risk, lifestyle,
  social, preventive, engagement, profile scoring, aggregate report)
- coaching: report rendered as plain-text context for the coaching assistant
- routers: FastAPI endpoints exposing the report and trend math
"""

__version__ = "1.0.0"
