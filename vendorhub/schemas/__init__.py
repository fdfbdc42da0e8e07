"""Pydantic schemas package.

Folder intent:
  common.py   - CamelModel base + HealthResponse (all schemas inherit CamelModel)
  vendor.py   - vendor request body and list item
"""
