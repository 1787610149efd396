"""
HTTP integration clients.

Important:
- Clients must return data shaped according to skillboard/integrations/contracts/*
- They talk plain HTTP; whether a real server or the local simulator answers
  is decided by the httpx client they are given (see mock_api/factory.py).
"""

from .skills_api import SkillsApiClient

__all__ = ["SkillsApiClient"]
