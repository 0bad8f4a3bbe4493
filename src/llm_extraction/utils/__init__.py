"""
LLM Utilities Package
Contains utility modules for API handling and result parsing.
"""

from .api_utils import InferenceClient, InferenceError
from .result_parser import ResultParser, recover_json

__all__ = ['InferenceClient', 'InferenceError', 'ResultParser', 'recover_json']
