"""Pydantic schemas package.

Folder intent:
  common.py  — CamelModel base + HealthResponse (all schemas inherit CamelModel)
  user.py    — User response model (no owned collections)
  post.py    — Post / Comment response models
"""
