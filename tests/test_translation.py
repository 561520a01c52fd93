"""
Integration tests for the HTTP routes (POST /api/translate, GET /api/languages).

Tests:
- Request validation (400s) and missing credential (500)
- Request normalization (trimmed text, default source language)
- Response shape with display names
- Translation failures mapped to a generic 500
"""

import sys
import os
import pytest
from unittest.mock import patch

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from app import create_app
from services.llm_models.translation_models import OutputMode, ProviderOutcome, TranslationResult
from services.llm_translation_service import ProviderRequestError, RateLimitExhaustedError


@pytest.fixture
def app():
    """Create and configure a test app with fake credentials"""
    app = create_app('testing')
    app.config['GROQ_API_KEY'] = 'gsk-test'
    app.config['GEMINI_API_KEY'] = 'gem-test'
    return app


@pytest.fixture
def client(app):
    with app.test_client() as client:
        yield client


@pytest.fixture
def mock_translate():
    with patch('routes.translation.translate_text') as mock:
        mock.return_value = TranslationResult(
            translation="Detected Language: German 🇩🇪\n\nBank [baŋk]",
            model="openai/gpt-oss-120b",
            mode=OutputMode.VOCABULARY
        )
        yield mock


class TestTranslateRoute:
    """Tests for POST /api/translate"""

    def test_success(self, client, mock_translate):
        response = client.post('/api/translate', json={
            'text': '  Bank  ',
            'sourceLang': 'de',
            'targetLang': 'en',
            'context': 'finance'
        })

        assert response.status_code == 200
        data = response.get_json()
        assert data['model'] == 'GPT-OSS 120B'
        assert data['mode'] == 'vocabulary'
        assert data['translation'].startswith('Detected Language')

        request_arg, groq_key, gemini_key = mock_translate.call_args.args
        assert request_arg.text == 'Bank'
        assert request_arg.source_lang == 'de'
        assert request_arg.target_lang == 'en'
        assert request_arg.context == 'finance'
        assert groq_key == 'gsk-test'
        assert gemini_key == 'gem-test'

    def test_source_lang_defaults_to_auto(self, client, mock_translate):
        response = client.post('/api/translate', json={'text': 'hello', 'targetLang': 'de'})

        assert response.status_code == 200
        request_arg = mock_translate.call_args.args[0]
        assert request_arg.source_lang == 'auto'
        assert request_arg.context is None

    @pytest.mark.parametrize("body,message", [
        ({'targetLang': 'en'}, 'Text is required'),
        ({'text': '', 'targetLang': 'en'}, 'Text is required'),
        ({'text': '   ', 'targetLang': 'en'}, 'Text is required'),
        ({'text': 42, 'targetLang': 'en'}, 'Text is required'),
        ({'text': 'hello'}, 'Target language is required'),
        ({'text': 'hello', 'targetLang': 'auto'}, 'Target language cannot be auto'),
        ({'text': 'hello', 'targetLang': 'en', 'context': 5}, 'must be strings'),
    ])
    def test_validation_errors(self, client, mock_translate, body, message):
        response = client.post('/api/translate', json=body)

        assert response.status_code == 400
        assert message in response.get_json()['error']
        mock_translate.assert_not_called()

    def test_text_too_long(self, client, mock_translate):
        response = client.post('/api/translate', json={'text': 'a' * 5001, 'targetLang': 'en'})

        assert response.status_code == 400
        assert '5000' in response.get_json()['error']
        mock_translate.assert_not_called()

    def test_text_at_limit_accepted(self, client, mock_translate):
        response = client.post('/api/translate', json={'text': 'a' * 5000, 'targetLang': 'en'})

        assert response.status_code == 200

    def test_missing_body(self, client, mock_translate):
        response = client.post('/api/translate', data='not json', content_type='text/plain')

        assert response.status_code == 400

    def test_missing_groq_key(self, app, client, mock_translate):
        app.config['GROQ_API_KEY'] = None

        response = client.post('/api/translate', json={'text': 'hello', 'targetLang': 'de'})

        assert response.status_code == 500
        assert 'GROQ_API_KEY' in response.get_json()['error']
        mock_translate.assert_not_called()

    @pytest.mark.parametrize("error", [
        RateLimitExhaustedError("All models hit rate limits"),
        ProviderRequestError("A failed: 401 - bad key", ProviderOutcome.provider_error("A", 401, "bad key")),
    ])
    def test_translation_failure_is_generic_500(self, client, mock_translate, error):
        mock_translate.side_effect = error

        response = client.post('/api/translate', json={'text': 'hello', 'targetLang': 'de'})

        assert response.status_code == 500
        assert response.get_json() == {'error': 'Translation failed. Please try again.'}

    def test_unexpected_exception_is_generic_json_500(self, client, mock_translate):
        mock_translate.side_effect = AttributeError("'list' object has no attribute 'get'")

        response = client.post('/api/translate', json={'text': 'hi', 'targetLang': 'de'})

        assert response.status_code == 500
        assert response.get_json() == {'error': 'Translation failed. Please try again.'}

    def test_unknown_model_id_passed_through(self, client, mock_translate):
        mock_translate.return_value = TranslationResult(
            translation="Hallo Welt", model="brand-new-model", mode=OutputMode.SENTENCE
        )

        response = client.post('/api/translate', json={'text': 'hello', 'targetLang': 'de'})

        assert response.get_json()['model'] == 'brand-new-model'
        assert response.get_json()['mode'] == 'sentence'


class TestLanguagesRoute:
    """Tests for GET /api/languages"""

    def test_lists_all_languages(self, client):
        response = client.get('/api/languages')

        assert response.status_code == 200
        data = response.get_json()
        assert data['success'] is True
        assert data['count'] == len(data['data'])
        assert data['data'][0]['code'] == 'auto'
        german = next(lang for lang in data['data'] if lang['code'] == 'de')
        assert german == {'code': 'de', 'name': 'German', 'native_name': 'Deutsch', 'flag': '🇩🇪'}

    def test_search_filter(self, client):
        response = client.get('/api/languages?q=deutsch')

        codes = [lang['code'] for lang in response.get_json()['data']]
        assert codes == ['de']


class TestServiceRoutes:
    """Tests for / and /health"""

    def test_home(self, client):
        response = client.get('/')

        assert response.status_code == 200
        assert 'version' in response.get_json()

    def test_health_reports_configured_keys(self, client):
        response = client.get('/health')

        assert response.get_json() == {
            'status': 'healthy',
            'groq_configured': True,
            'gemini_configured': True
        }
