"""
Utility functions
"""
from .id_generator import generate_hex_id, generate_session_id, validate_hex_id

__all__ = ['generate_hex_id', 'generate_session_id', 'validate_hex_id']
