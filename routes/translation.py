import logging

from flask import Blueprint, current_app, jsonify, request

from services.language_utils import AUTO_DETECT
from services.llm_models.translation_models import TranslationRequest
from services.llm_translation_service import TranslationError, get_model_display_name, translate as translate_text

logger = logging.getLogger(__name__)

bp = Blueprint('translation', __name__, url_prefix='/api')


@bp.route('/translate', methods=['POST'])
def translate():
    """
    Translate text to the target language.

    Request body:
    {
        "text": "Bank",
        "sourceLang": "de",    // optional, defaults to "auto"
        "targetLang": "en",
        "context": "finance"   // optional
    }

    Response:
    {
        "translation": "Detected Language: German 🇩🇪 ...",
        "model": "GPT-OSS 120B",
        "mode": "vocabulary"
    }
    """
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        data = {}

    text = data.get('text')
    source_lang = data.get('sourceLang') or AUTO_DETECT
    target_lang = data.get('targetLang')
    context = data.get('context') or None
    max_chars = current_app.config['MAX_TEXT_CHARS']

    # Validation
    if not text or not isinstance(text, str) or not text.strip():
        return jsonify({'error': 'Text is required'}), 400

    if len(text) > max_chars:
        return jsonify({'error': f'Text exceeds maximum length of {max_chars} characters'}), 400

    if not target_lang:
        return jsonify({'error': 'Target language is required'}), 400

    if target_lang == AUTO_DETECT:
        return jsonify({'error': 'Target language cannot be auto'}), 400

    if not all(isinstance(value, str) for value in (source_lang, target_lang, context or '')):
        return jsonify({'error': 'sourceLang, targetLang and context must be strings'}), 400

    groq_api_key = current_app.config.get('GROQ_API_KEY')
    gemini_api_key = current_app.config.get('GEMINI_API_KEY')

    if not groq_api_key:
        return jsonify({'error': 'GROQ_API_KEY not configured'}), 500

    try:
        result = translate_text(
            TranslationRequest(
                text=text.strip(),
                source_lang=source_lang,
                target_lang=target_lang,
                context=context
            ),
            groq_api_key,
            gemini_api_key,
            timeout=current_app.config['PROVIDER_TIMEOUT']
        )
    except TranslationError as e:
        logger.error(f'Translation error: {e}', exc_info=True)
        return jsonify({'error': 'Translation failed. Please try again.'}), 500
    except Exception as e:
        logger.error(f'Unexpected translation error: {str(e)}', exc_info=True)
        return jsonify({'error': 'Translation failed. Please try again.'}), 500

    return jsonify({
        'translation': result.translation,
        'model': get_model_display_name(result.model),
        'mode': result.mode.value
    }), 200
