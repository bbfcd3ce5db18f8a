"""
Contribution models

- domain: storage-agnostic dataclasses used by the stores and the facade
- api: pydantic models that validate inbound data and convert to domain
"""
