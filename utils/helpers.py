# utils/helpers.py
import re
import json
import math
import uuid
import logging
from datetime import datetime, timezone
from typing import Dict, Any, Optional, Union

logger = logging.getLogger(__name__)


def round_half_up(value: float, ndigits: int = 0) -> Union[int, float]:
    """
    Round half away from zero for positive values (2.5 -> 3, 5.125 -> 5.13).

    The built-in round() uses banker's rounding, which would move scores that
    land exactly on a .5 boundary down instead of up.
    """
    factor = 10 ** ndigits
    rounded = math.floor(value * factor + 0.5) / factor
    if ndigits == 0:
        return int(rounded)
    return rounded


def clean_json_response(llm_response: str) -> str:
    """
    Clean LLM response to extract valid JSON

    Args:
        llm_response: Raw LLM response that might contain markdown or extra text

    Returns:
        Clean JSON string
    """
    cleaned = re.sub(r'```json\s*', '', llm_response)
    cleaned = re.sub(r'```\s*', '', cleaned)

    match = re.search(r'(\{.*\}|\[.*\])', cleaned, re.DOTALL)
    if match:
        cleaned = match.group(1)

    return cleaned.strip()


def generate_session_id(prefix: str = "session") -> str:
    """Generate unique session ID"""
    timestamp = datetime.now(timezone.utc).strftime('%Y%m%d%H%M%S')
    return f"{prefix}_{timestamp}_{uuid.uuid4().hex[:8]}"


def utc_now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


def calculate_duration(start_time: datetime, end_time: Optional[datetime] = None) -> Dict[str, Any]:
    """Calculate elapsed time between two instants and provide formatted output"""
    if not end_time:
        end_time = datetime.now(timezone.utc)

    total_seconds = max(0, round_half_up((end_time - start_time).total_seconds()))
    minutes = total_seconds // 60
    seconds = total_seconds % 60

    return {
        'total_seconds': total_seconds,
        'minutes': minutes,
        'seconds': seconds,
        'formatted': f"{minutes}m {seconds}s" if minutes > 0 else f"{seconds}s"
    }


def log_assessment_event(event_type: str, session_id: str, data: Dict[str, Any] = None):
    """Log assessment events for monitoring and analytics"""
    log_entry = {
        'timestamp': utc_now_iso(),
        'event_type': event_type,
        'session_id': session_id,
        'data': data or {}
    }

    logger.info(f"[ASSESSMENT_LOG] {json.dumps(log_entry, default=str)}")


def setup_logging(level: str = "INFO"):
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s"
    )
    return logging.getLogger("doomscroll_assessment")
