# -*- coding: utf-8 -*-
"""Tests for the HTTP transport"""

import gzip
import json
import socket
import http.client

import pytest

from typedfish.rest.v1 import AuthMethod, HttpClient, InvalidCredentialsError, \
                    JsonDecodingError, JsonObject, MAX_REDIRECTS, \
                    RestClientBase, \
                    ServerDownOrUnreachableError, StaticRestResponse, \
                    redfish_client

ROOT = {
    '@odata.id': '/redfish/v1/',
    'RedfishVersion': '1.15.0',
    'Links': {'Sessions': {'@odata.id': '/redfish/v1/SessionService/Sessions'}},
}


class FakeHTTPResponse(object):
    def __init__(self, status, body=b'', headers=None, reason='OK'):
        self.status = status
        self.reason = reason
        self._body = body
        self._headers = list((headers or {}).items())

    def read(self):
        return self._body

    def getheaders(self):
        return self._headers

    def getheader(self, name, default=None):
        for key, value in self._headers:
            if key.lower() == name.lower():
                return value
        return default


class FakeServer(object):
    """Routes (method, path) to canned responses and records requests"""
    def __init__(self):
        self.routes = dict()
        self.requests = list()
        self.connections = list()
        self.error = None

    def route(self, method, path, status=200, body=None, headers=None):
        if isinstance(body, (dict, list)):
            body = json.dumps(body).encode('utf-8')
        self.routes[(method, path)] = FakeHTTPResponse(status, body or b'', \
                                                                    headers)

    def connection(self, netloc, timeout=None, **kwargs):
        conn = FakeConnection(self, netloc, timeout)
        self.connections.append(conn)
        return conn


class FakeConnection(object):
    def __init__(self, server, netloc, timeout):
        self.server = server
        self.netloc = netloc
        self.timeout = timeout
        self.pending = None

    def request(self, method, path, body=None, headers=None):
        if self.server.error is not None:
            raise self.server.error
        self.server.requests.append({'method': method, 'path': path, \
                        'body': body, 'headers': dict(headers or {}), \
                        'netloc': self.netloc})
        self.pending = (method, path)

    def getresponse(self):
        return self.server.routes.get(self.pending, \
                                            FakeHTTPResponse(404, b'{}'))

    def close(self):
        pass


@pytest.fixture
def server(monkeypatch):
    fake = FakeServer()
    fake.route('GET', '/redfish/v1/', body=ROOT)
    monkeypatch.setattr(http.client, 'HTTPConnection', fake.connection)
    monkeypatch.setattr(http.client, 'HTTPSConnection', fake.connection)
    return fake


def test_client_reads_service_root(server):
    client = redfish_client('http://bmc.example', timeout=12)

    assert isinstance(client, HttpClient)
    assert client.root.RedfishVersion == '1.15.0'
    assert client.login_url == '/redfish/v1/SessionService/Sessions'
    assert server.connections[0].netloc == 'bmc.example'
    assert server.connections[0].timeout == 12
    assert server.requests[0]['headers']['OData-Version'] == '4.0'


def test_login_url_falls_back_to_default(server):
    server.route('GET', '/redfish/v1/', body={'@odata.id': '/redfish/v1/'})
    client = redfish_client('http://bmc.example')

    assert client.login_url == '/redfish/v1/SessionService/Sessions'


def test_unreachable_root_raises(server):
    server.route('GET', '/redfish/v1/', status=503)

    with pytest.raises(ServerDownOrUnreachableError):
        redfish_client('http://bmc.example')


def test_socket_failure_raises(server):
    server.error = socket.timeout('timed out')

    with pytest.raises(ServerDownOrUnreachableError):
        redfish_client('http://bmc.example')


def test_unsupported_scheme(server):
    with pytest.raises(ServerDownOrUnreachableError):
        RestClientBase('ftp://bmc.example')


def test_https_uses_https_connection(server):
    redfish_client('https://bmc.example', insecure=True)
    assert server.connections[0].netloc == 'bmc.example'


def test_patch_sends_json_body(server):
    server.route('PATCH', '/redfish/v1/Drives/0', status=204)
    client = redfish_client('http://bmc.example')

    resp = client.patch('/redfish/v1/Drives/0', \
                                        body={'WriteCacheEnabled': True})

    request = server.requests[-1]
    assert resp.status == 204
    assert request['method'] == 'PATCH'
    assert json.loads(request['body'].decode('utf-8')) == \
                                                    {'WriteCacheEnabled': True}
    assert request['headers']['Content-Type'] == 'application/json'
    assert request['headers']['Content-Length'] == len(request['body'])


def test_redirect_is_followed(server):
    server.route('GET', '/redfish/v1/Old', status=301, \
                headers={'Location': 'http://other.example/redfish/v1/New'})
    server.route('GET', '/redfish/v1/New', body={'Id': 'New'})
    client = redfish_client('http://bmc.example')

    resp = client.get('/redfish/v1/Old')

    assert resp.status == 200
    assert resp.dict == {'Id': 'New'}
    assert server.requests[-1]['netloc'] == 'other.example'


def test_redirect_cycle_is_cut_off(server):
    server.route('GET', '/redfish/v1/A', status=302, \
                headers={'Location': 'http://bmc.example/redfish/v1/B'})
    server.route('GET', '/redfish/v1/B', status=302, \
                headers={'Location': 'http://bmc.example/redfish/v1/A'})
    client = redfish_client('http://bmc.example')
    before = len(server.requests)

    with pytest.raises(ServerDownOrUnreachableError):
        client.get('/redfish/v1/A')

    assert len(server.requests) - before == MAX_REDIRECTS + 1


def test_status_399_is_treated_as_redirect(server):
    server.route('GET', '/redfish/v1/Odd', status=399, \
                headers={'Location': 'http://bmc.example/redfish/v1/New'})
    server.route('GET', '/redfish/v1/New', body={'Id': 'New'})
    client = redfish_client('http://bmc.example')

    resp = client.get('/redfish/v1/Odd')

    assert resp.status == 200
    assert resp.dict == {'Id': 'New'}


def test_gzip_body_is_decompressed(server):
    body = gzip.compress(json.dumps({'Id': 'zipped'}).encode('utf-8'))
    server.route('GET', '/redfish/v1/Zipped', body=body, \
                                    headers={'Content-Encoding': 'gzip'})
    client = redfish_client('http://bmc.example')

    assert client.get('/redfish/v1/Zipped').dict == {'Id': 'zipped'}


def test_session_login_and_logout(server):
    location = 'http://bmc.example/redfish/v1/SessionService/Sessions/7'
    server.route('POST', '/redfish/v1/SessionService/Sessions', status=201, \
                headers={'X-Auth-Token': 'token-7', 'Location': location})
    server.route('DELETE', '/redfish/v1/SessionService/Sessions/7')
    client = redfish_client('http://bmc.example', username='admin', \
                                                        password='secret')

    client.login(auth=AuthMethod.SESSION)

    login = server.requests[-1]
    assert json.loads(login['body'].decode('utf-8')) == \
                                {'UserName': 'admin', 'Password': 'secret'}
    assert client.get_session_key() == 'token-7'

    client.get('/redfish/v1/')
    assert server.requests[-1]['headers']['X-Auth-Token'] == 'token-7'

    client.logout()
    assert server.requests[-1]['method'] == 'DELETE'
    assert server.requests[-1]['path'] == \
                                        '/redfish/v1/SessionService/Sessions/7'
    assert client.get_session_key() is None


def test_basic_login_rejected(server):
    server.route('GET', '/redfish/v1/SessionService/Sessions', status=401)
    client = redfish_client('http://bmc.example', username='admin', \
                                                        password='wrong')

    with pytest.raises(InvalidCredentialsError):
        client.login(auth=AuthMethod.BASIC)

    assert client.get_authorization_key() is None


def test_basic_login_sets_authorization(server):
    server.route('GET', '/redfish/v1/SessionService/Sessions', body={})
    client = redfish_client('http://bmc.example', username='admin', \
                                                        password='secret')

    client.login(auth=AuthMethod.BASIC)
    client.get('/redfish/v1/')

    assert server.requests[-1]['headers']['Authorization'] == \
                                                    'Basic YWRtaW46c2VjcmV0'


def test_static_response():
    resp = StaticRestResponse(Status=200, Content={'Id': '1'}, \
                                    Headers={'X-Auth-Token': 'abc'})

    assert resp.status == 200
    assert resp.read == b'{"Id": "1"}'
    assert resp.obj.Id == '1'
    assert resp.getheader('x-auth-token') == 'abc'
    assert resp.session_key == 'abc'


def test_static_response_with_header_list():
    resp = StaticRestResponse(Status=204, Headers=[{'Location': '/s/1'}])

    assert resp.text == ''
    assert resp.session_location == '/s/1'


def test_malformed_body_raises():
    resp = StaticRestResponse(Status=200, Content=b'{oops')

    with pytest.raises(JsonDecodingError):
        resp.dict


def test_json_object_attribute_access():
    obj = JsonObject.parse({'Links': {'Members': [{'Id': 'a'}]}})

    assert obj.Links.Members[0].Id == 'a'
    with pytest.raises(KeyError):
        obj.Missing
