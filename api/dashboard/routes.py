# api/dashboard/routes.py
from flask import request, jsonify
import logging

from ..base.base_schemas import BaseResponse
from .usecases import DEFAULT_PERIOD, get_admin_stats, get_dashboard_stats
from . import dashboard_bp

logger = logging.getLogger("debug_logger")


@dashboard_bp.route('/stats', methods=['GET'])
def dashboard_stats():
    """Aggregated research-sample statistics for the dashboard"""
    try:
        period = request.args.get('period', DEFAULT_PERIOD)
        return jsonify(BaseResponse.success(data=get_dashboard_stats(period)).model_dump()), 200

    except Exception as e:
        logger.error(f"Error fetching dashboard stats: {e}", exc_info=True)
        response, status = BaseResponse.from_exception(e, "Failed to fetch statistics")
        return jsonify(response.model_dump()), status


@dashboard_bp.route('/admin/stats', methods=['GET'])
def admin_stats():
    """Overview, construct averages and severity counts of the research sample"""
    try:
        return jsonify(BaseResponse.success(data=get_admin_stats()).model_dump()), 200

    except Exception as e:
        logger.error(f"Error fetching admin stats: {e}", exc_info=True)
        response, status = BaseResponse.from_exception(e, "Failed to fetch statistics")
        return jsonify(response.model_dump()), status
