from flask import Blueprint, jsonify, request

from services.language_utils import get_all_languages, search_languages

bp = Blueprint('api', __name__, url_prefix='/api')


@bp.route('/languages', methods=['GET'])
def get_languages():
    """
    Get all supported languages in display order.

    Query params:
        - q: Filter by English name, native name or code (optional, case-insensitive)

    Returns:
        JSON array of language objects with code, name, native_name, flag
    """
    query = request.args.get('q', '', type=str).strip()
    languages = search_languages(query) if query else get_all_languages()

    languages_data = [{
        'code': lang.code,
        'name': lang.name,
        'native_name': lang.native_name,
        'flag': lang.flag
    } for lang in languages]

    return jsonify({
        'success': True,
        'data': languages_data,
        'count': len(languages_data)
    }), 200
