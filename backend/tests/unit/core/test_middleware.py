"""
Unit Tests for HTTP middleware
"""
from httpx import AsyncClient

from app.core.middleware import should_skip_logging
from conftest import API


class TestResponseHeaders:

    async def test_request_id_generated(self, client: AsyncClient):
        response = await client.get('/health')

        assert response.headers['X-Request-ID']
        assert response.headers['X-Response-Time'].endswith('ms')

    async def test_request_id_propagated(self, client: AsyncClient):
        response = await client.get('/health', headers={'X-Request-ID': 'abc12345'})

        assert response.headers['X-Request-ID'] == 'abc12345'

    async def test_security_headers(self, client: AsyncClient):
        response = await client.get('/health')

        assert response.headers['X-Content-Type-Options'] == 'nosniff'
        assert response.headers['X-Frame-Options'] == 'DENY'

    async def test_api_responses_not_cached(self, client: AsyncClient):
        response = await client.get(f'{API}/guestbook')

        assert response.headers['Cache-Control'] == 'no-store'
        assert 'Cache-Control' not in (await client.get('/health')).headers


class TestSkipLogging:

    def test_probe_paths_skipped(self):
        assert should_skip_logging('/health')
        assert should_skip_logging('/docs/oauth2-redirect')

    def test_api_paths_logged(self):
        assert not should_skip_logging('/api/v1/boards')
