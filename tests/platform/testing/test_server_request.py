import attrs
import httpx
import orjson
import pytest

from src.platform.exception.exceptions import InvalidArgumentError
from src.platform.testing.server_request import DEFAULT_REMOTE_PORT, ServerRequest


@pytest.fixture
def request_value() -> ServerRequest:
    return ServerRequest(
        method='GET',
        uri='/users?active_only=true',
        headers=[('Accept', 'application/json')],
        server_params={'REMOTE_ADDR': '127.0.0.1'},
    )


@pytest.mark.unit
class TestServerRequest:
    def test_uri_is_parsed(self, request_value: ServerRequest) -> None:
        assert isinstance(request_value.uri, httpx.URL)
        assert request_value.uri.path == '/users'
        assert request_value.query_params == {'active_only': 'true'}

    def test_header_lookup_is_case_insensitive(self, request_value: ServerRequest) -> None:
        assert request_value.has_header('accept')
        assert request_value.get_header('ACCEPT') == ['application/json']
        assert request_value.get_header('X-Missing') == []
        assert request_value.get_header_line('X-Missing') == ''

    def test_is_frozen(self, request_value: ServerRequest) -> None:
        with pytest.raises(attrs.exceptions.FrozenInstanceError):
            request_value.method = 'POST'  # type: ignore[misc]

    def test_server_params_are_read_only(self, request_value: ServerRequest) -> None:
        with pytest.raises(TypeError):
            request_value.server_params['REMOTE_ADDR'] = '10.0.0.1'  # type: ignore[index]

    def test_with_header_replaces_existing_values(self, request_value: ServerRequest) -> None:
        changed = request_value.with_header('accept', 'text/html')

        assert changed.get_header('Accept') == ['text/html']
        assert request_value.get_header('Accept') == ['application/json']

    def test_with_added_header_appends(self, request_value: ServerRequest) -> None:
        changed = request_value.with_added_header('Accept', 'text/html')

        assert changed.get_header('Accept') == ['application/json', 'text/html']
        assert changed.get_header_line('Accept') == 'application/json, text/html'
        assert len(request_value.headers) == 1

    def test_without_header(self, request_value: ServerRequest) -> None:
        assert not request_value.without_header('ACCEPT').has_header('Accept')
        assert request_value.has_header('Accept')

    def test_with_parsed_body_returns_copy(self, request_value: ServerRequest) -> None:
        changed = request_value.with_parsed_body({'name': 'Buyer'})

        assert changed is not request_value
        assert changed.parsed_body == {'name': 'Buyer'}
        assert request_value.parsed_body is None

    def test_with_method_and_uri(self, request_value: ServerRequest) -> None:
        changed = request_value.with_method('DELETE').with_uri('/users/1')

        assert (changed.method, str(changed.uri)) == ('DELETE', '/users/1')
        assert (request_value.method, request_value.uri.path) == ('GET', '/users')

    @pytest.mark.parametrize('method', ['GET ', 'GE T', '', 'GET\n'])
    def test_invalid_method_is_rejected(self, method: str) -> None:
        with pytest.raises(InvalidArgumentError):
            ServerRequest(method=method, uri='/')

    def test_with_method_validates_too(self, request_value: ServerRequest) -> None:
        with pytest.raises(InvalidArgumentError):
            request_value.with_method('NOT VALID')


@pytest.mark.unit
class TestServerRequestContent:
    def test_json_body_is_serialized(self) -> None:
        request = (
            ServerRequest(method='POST', uri='/users')
            .with_parsed_body({'email': 'a@example.com'})
            .with_header('Content-Type', 'application/json; charset=utf-8')
        )

        assert orjson.loads(request.content()) == {'email': 'a@example.com'}

    def test_form_body_is_urlencoded(self) -> None:
        request = (
            ServerRequest(method='POST', uri='/login')
            .with_parsed_body({'name': 'Buyer One', 'tags': ['a', 'b']})
            .with_header('Content-Type', 'application/x-www-form-urlencoded')
        )

        assert request.content() == b'name=Buyer+One&tags=a&tags=b'

    def test_raw_body_without_parsed_body(self) -> None:
        request = ServerRequest(method='PUT', uri='/blob').with_body('raw')

        assert request.content() == b'raw'
    @pytest.mark.parametrize('content_type', [None, 'text/plain'])
    def test_parsed_body_without_renderable_content_type_is_rejected(
        self, content_type: str | None
    ) -> None:
        request = ServerRequest(method='POST', uri='/', body=b'x').with_parsed_body({'a': 1})
        if content_type is not None:
            request = request.with_header('Content-Type', content_type)

        with pytest.raises(InvalidArgumentError, match='Cannot render a parsed body'):
            request.content()


@pytest.mark.unit
class TestServerIdentity:
    BASE = httpx.URL('http://testserver')

    def test_relative_uri_without_server_params_uses_base(self) -> None:
        request = ServerRequest(method='GET', uri='/users?active_only=true')

        assert request.absolute_uri(self.BASE) == httpx.URL(
            'http://testserver/users?active_only=true'
        )
        assert request.client_address() is None

    def test_server_params_override_scheme_host_and_port(self) -> None:
        request = ServerRequest(
            method='GET',
            uri='/users',
            server_params={'HTTPS': 'on', 'SERVER_NAME': 'api.local', 'SERVER_PORT': '8443'},
        )

        assert request.is_secure
        assert request.absolute_uri(self.BASE) == httpx.URL('https://api.local:8443/users')

    @pytest.mark.parametrize('https', ['off', 'OFF', ''])
    def test_https_off_is_not_secure(self, https: str) -> None:
        request = ServerRequest(method='GET', uri='/', server_params={'HTTPS': https})

        assert not request.is_secure
        assert request.absolute_uri(self.BASE).scheme == 'http'

    def test_absolute_uri_is_kept(self) -> None:
        request = ServerRequest(
            method='GET', uri='http://other.test/x', server_params={'SERVER_NAME': 'api.local'}
        )

        assert request.absolute_uri(self.BASE) == httpx.URL('http://other.test/x')

    def test_client_address(self) -> None:
        with_port = ServerRequest(
            method='GET', uri='/', server_params={'REMOTE_ADDR': '10.1.2.3', 'REMOTE_PORT': 4000}
        )
        without_port = ServerRequest(
            method='GET', uri='/', server_params={'REMOTE_ADDR': '10.1.2.3'}
        )

        assert with_port.client_address() == ('10.1.2.3', 4000)
        assert without_port.client_address() == ('10.1.2.3', DEFAULT_REMOTE_PORT)

    def test_invalid_server_port_is_rejected(self) -> None:
        request = ServerRequest(method='GET', uri='/', server_params={'SERVER_PORT': 'http'})

        with pytest.raises(InvalidArgumentError, match='SERVER_PORT must be a port number'):
            request.absolute_uri(self.BASE)

    def test_invalid_remote_port_is_rejected(self) -> None:
        request = ServerRequest(
            method='GET', uri='/', server_params={'REMOTE_ADDR': '10.1.2.3', 'REMOTE_PORT': 'x'}
        )

        with pytest.raises(InvalidArgumentError, match='REMOTE_PORT must be a port number'):
            request.client_address()
