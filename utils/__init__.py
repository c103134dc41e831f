from .helpers import round_half_up, clean_json_response, generate_session_id, setup_logging

__all__ = ['round_half_up', 'clean_json_response', 'generate_session_id', 'setup_logging']
