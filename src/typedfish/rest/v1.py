###
# Copyright 2016 Hewlett Packard Enterprise, Inc. All rights reserved.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#  http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
###

# -*- coding: utf-8 -*-
"""Helper module for working with Redfish REST technology."""

#---------Imports---------

import ssl
import gzip
import json
import time
import base64
import socket
import logging
import http.client

from collections import OrderedDict
from urllib.parse import urlparse, urlencode

#---------End of imports---------


#---------Debug logger---------

LOGGER = logging.getLogger(__name__)

#---------End of debug logger---------

MAX_REDIRECTS = 10

class TransportError(Exception):
    """Base class for failures talking to the Redfish service."""
    pass

class ServerDownOrUnreachableError(TransportError):
    """Raised when server is unreachable."""
    pass

class InvalidCredentialsError(TransportError):
    """Raised when invalid credentials have been provided."""
    pass

class DecompressResponseError(TransportError):
    """Raised when decompressing response failed."""
    pass

class RequestFailedError(TransportError):
    """Raised when the service answers with a non-success status."""
    def __init__(self, response, path=None):
        """Initialize RequestFailedError

        :param response: the failed response.
        :type response: RestResponse object.
        :param path: the path the request was sent to.
        :type path: str.

        """
        self.response = response
        self.status = response.status
        self.path = path
        super(RequestFailedError, self).__init__(\
                        "%s returned status %s" % (path, response.status))

class JsonDecodingError(Exception):
    """Raised when there is an error in json data."""
    pass

class JsonObject(dict):
    """Converts a JSON/Rest dict into a object so you can use .property
    notation"""
    __getattr__ = dict.__getitem__

    def __init__(self, d):
        """Initialize JsonObject

        :param d: dictionary to be parsed
        :type d: dict

        """
        super(JsonObject, self).__init__()
        self.update(**dict((k, self.parse(value)) for k, value in d.items()))

    @classmethod
    def parse(cls, value):
        """Parse for JSON value

        :param value: value to be parsed
        :type value: data type
        :returns: returns parsed value

        """
        if isinstance(value, dict):
            return cls(value)
        elif isinstance(value, list):
            return [cls.parse(i) for i in value]
        else:
            return value

class RestRequest(object):
    """Holder for Request information"""
    def __init__(self, path, method='GET', body=''):
        """Initialize RestRequest

        :param path: path within tree
        :type path: str
        :param method: method to be implemented
        :type method: str
        :param body: body payload for the rest call
        :type body: dict

        """
        self._path = path
        self._body = body
        self._method = method

    @property
    def path(self):
        """Return object path"""
        return self._path

    @property
    def method(self):
        """Return object method"""
        return self._method

    @property
    def body(self):
        """Return object body"""
        return self._body

    def __str__(self):
        """Format string"""
        body = self.body if self.body else ''
        if isinstance(body, bytes):
            body = body.decode('utf-8', 'ignore')

        return u"%s %s\n\n%s" % (self.method, self.path, body)

class RestResponse(object):
    """Returned by Rest requests"""
    def __init__(self, rest_request, http_response):
        """Initialize RestResponse

        :params rest_request: Holder for request information
        :type rest_request: RestRequest object
        :params http_response: Response from HTTP
        :type http_response: HTTPResponse

        """
        self._read = None
        self._status = None
        self._headers = None
        self._session_key = None
        self._session_location = None
        self._rest_request = rest_request
        self._http_response = http_response

        if self._http_response:
            self._read = self._http_response.read()

    @property
    def read(self):
        """Wrapper around httpresponse.read()"""
        return self._read

    @read.setter
    def read(self, read):
        """Property for setting _read

        :param read: The data to set to read.
        :type read: bytes.

        """
        if read is not None:
            if isinstance(read, dict):
                read = json.dumps(read, indent=4)
            if isinstance(read, str):
                read = read.encode('utf-8')
            self._read = read

    def getheaders(self):
        """Property for accessing the headers"""
        return self._http_response.getheaders()

    def getheader(self, name):
        """Property for accessing an individual header

        :param name: The header name to retrieve.
        :type name: str.
        :returns: returns a header from HTTP response

        """
        return self._http_response.getheader(name, None)

    @property
    def text(self):
        """Property for accessing the data as an unparsed string"""
        if self.read is None:
            return ''
        return self.read.decode('utf-8', 'ignore')

    @text.setter
    def text(self, value):
        """Property for setting text unparsed data

        :param value: The unparsed data to set as text.
        :type value: str.

        """
        self.read = value

    @property
    def dict(self):
        """Property for accessing the data as an dict"""
        try:
            return json.loads(self.text)
        except ValueError as excp:
            LOGGER.debug(u"%s for JSON content %s", excp, self.text)
            raise JsonDecodingError('Error in json decoding.')

    @property
    def obj(self):
        """Property for accessing the data as an object"""
        return JsonObject.parse(self.dict)

    @property
    def status(self):
        """Property for accessing the status code"""
        if self._status:
            return self._status

        return self._http_response.status

    @property
    def session_key(self):
        """Property for accessing the saved session key"""
        if self._session_key:
            return self._session_key

        self._session_key = self.getheader('x-auth-token')
        return self._session_key

    @property
    def session_location(self):
        """Property for accessing the saved session location"""
        if self._session_location:
            return self._session_location

        self._session_location = self.getheader('location')
        return self._session_location

    @property
    def request(self):
        """Property for accessing the saved http request"""
        return self._rest_request

    def __str__(self):
        """Class string formatter"""
        headerstr = ''
        for header in self.getheaders():
            headerstr += u'%s %s\n' % (header[0], header[1])

        return u"%(status)s\n%(headerstr)s\n\n%(body)s" % \
                            {'status': self.status, 'headerstr': headerstr, \
                             'body': self.text}

class JSONEncoder(json.JSONEncoder):
    """JSON Encoder class"""
    def default(self, obj):
        """Set defaults in JSON encoder class

        :param obj: object to be encoded into JSON.
        :type obj: RestResponse object.
        :returns: returns a JSON ordered dict

        """
        if isinstance(obj, RestResponse):
            jsondict = OrderedDict()
            jsondict['Status'] = obj.status
            jsondict['Headers'] = list()

            for hdr in obj.getheaders():
                headerd = dict()
                headerd[hdr[0]] = hdr[1]
                jsondict['Headers'].append(headerd)

            if obj.text:
                jsondict['Content'] = obj.dict

            return jsondict

        return json.JSONEncoder.default(self, obj)

class StaticRestResponse(RestResponse):
    """A RestResponse object built from data instead of a socket."""
    def __init__(self, **kwargs):
        restreq = kwargs.get('restreq', None)

        super(StaticRestResponse, self).__init__(restreq, None)

        self._headers = kwargs.get('Headers', dict())
        self._status = kwargs.get('Status', None)

        if 'session_key' in kwargs:
            self._session_key = kwargs['session_key']

        if 'session_location' in kwargs:
            self._session_location = kwargs['session_location']

        if 'Content' in kwargs:
            content = kwargs['Content']

            if isinstance(content, bytes):
                self._read = content
            elif isinstance(content, str):
                self._read = content.encode('utf-8')
            else:
                self._read = json.dumps(content).encode('utf-8')
        else:
            self._read = b''

    def getheaders(self):
        """Function for accessing the headers"""
        returnlist = list()

        if isinstance(self._headers, dict):
            for key, value in self._headers.items():
                returnlist.append((key, value))
        else:
            for item in self._headers:
                returnlist.append(list(item.items())[0])

        return returnlist

    def getheader(self, name):
        """Function for accessing an individual header

        :param name: The header name to retrieve.
        :type name: str.

        """
        for key, value in self.getheaders():
            if key.lower() == name.lower():
                return value

        return None

class AuthMethod(object):
    """AUTH Method class"""
    BASIC = 'basic'
    SESSION = 'session'

class RestClientBase(object):
    """Base class for RestClients"""
    def __init__(self, base_url, username=None, password=None, \
                 default_prefix='/redfish/v1/', sessionkey=None, \
                 timeout=None, insecure=False):
        """Initialization of the base class RestClientBase

        :param base_url: The URL of the remote system
        :type base_url: str
        :param username: The user name used for authentication
        :type username: str
        :param password: The password used for authentication
        :type password: str
        :param default_prefix: The default root point
        :type default_prefix: str
        :param sessionkey: session key for the current login of base_url
        :type sessionkey: str
        :param timeout: seconds allowed for each blocking socket operation
        :type timeout: float
        :param insecure: skip verification of the service certificate
        :type insecure: bool

        """
        self.__base_url = base_url
        self.__username = username
        self.__password = password
        self.__url = urlparse(base_url)
        self.__session_key = sessionkey
        self.__authorization_key = None
        self.__session_location = None
        self._conn = None
        self._conn_count = 0
        self.timeout = timeout
        self.insecure = insecure
        self.login_url = None
        self.default_prefix = default_prefix

        self.__init_connection()
        self.get_root_object()
        self.__destroy_connection()

    def __init_connection(self, url=None):
        """Function for initiating connection with remote server

        :param url: The URL of the remote system
        :type url: str

        """
        self.__destroy_connection()

        url = url if url else self.__url
        if url.scheme.upper() == "HTTPS":
            if self.insecure:
                context = ssl._create_unverified_context()
            else:
                context = ssl.create_default_context()

            self._conn = http.client.HTTPSConnection(url.netloc, \
                                        timeout=self.timeout, context=context)
        elif url.scheme.upper() == "HTTP":
            self._conn = http.client.HTTPConnection(url.netloc, \
                                                        timeout=self.timeout)
        else:
            raise ServerDownOrUnreachableError("Unsupported URL scheme " \
                                                        "'%s'" % url.scheme)

    def __destroy_connection(self):
        """Function for closing connection with remote server"""
        if self._conn:
            self._conn.close()

        self._conn = None
        self._conn_count = 0

    def get_username(self):
        """Return used user name"""
        return self.__username

    def set_username(self, username):
        """Set user name

        :param username: The user name to be set.
        :type username: str

        """
        self.__username = username

    def get_password(self):
        """Return used password"""
        return self.__password

    def set_password(self, password):
        """Set password

        :param password: The password to be set.
        :type password: str

        """
        self.__password = password

    def get_base_url(self):
        """Return used URL"""
        return self.__base_url

    def get_session_key(self):
        """Return session key"""
        return self.__session_key

    def set_session_key(self, session_key):
        """Set session key

        :param session_key: The session_key to be set.
        :type session_key: str

        """
        self.__session_key = session_key

    def get_session_location(self):
        """Return session location"""
        return self.__session_location

    def get_authorization_key(self):
        """Return authorization key"""
        return self.__authorization_key

    def get_root_object(self):
        """Perform an initial get and store the result"""
        resp = self.get('%s%s' % (self.__url.path, self.default_prefix))

        if resp.status != 200:
            raise ServerDownOrUnreachableError("Server not reachable, " \
                                               "return code: %d" % resp.status)

        self.root = resp.obj
        self.root_resp = resp

    def get(self, path, args=None, headers=None):
        """Perform a GET request

        :param path: the URL path.
        :type path: str.
        :param args: the arguments to get.
        :type args: dict.
        :param headers: dict of headers to be appended.
        :type headers: dict.
        :returns: returns a rest request with method 'Get'

        """
        return self._rest_request(path, method='GET', args=args, \
                                                                headers=headers)

    def head(self, path, args=None, headers=None):
        """Perform a HEAD request

        :param path: the URL path.
        :type path: str.
        :param args: the arguments to get.
        :type args: dict.
        :returns: returns a rest request with method 'Head'

        """
        return self._rest_request(path, method='HEAD', args=args, \
                                                                headers=headers)

    def post(self, path, args=None, body=None, headers=None):
        """Perform a POST request

        :param path: the URL path.
        :type path: str.
        :param args: the arguments to post.
        :type args: dict.
        :param body: the body to the sent.
        :type body: str.
        :param headers: dict of headers to be appended.
        :type headers: dict.
        :returns: returns a rest request with method 'Post'

        """
        return self._rest_request(path, method='POST', args=args, body=body, \
                                                                headers=headers)

    def put(self, path, args=None, body=None, headers=None):
        """Perform a PUT request

        :param path: the URL path.
        :type path: str.
        :param args: the arguments to put.
        :type args: dict.
        :param body: the body to the sent.
        :type body: str.
        :param headers: dict of headers to be appended.
        :type headers: dict.
        :returns: returns a rest request with method 'Put'

        """
        return self._rest_request(path, method='PUT', args=args, body=body, \
                                                                headers=headers)

    def patch(self, path, args=None, body=None, headers=None):
        """Perform a PATCH request

        :param path: the URL path.
        :type path: str.
        :param args: the arguments to patch.
        :type args: dict.
        :param body: the body to the sent.
        :type body: str.
        :param headers: dict of headers to be appended.
        :type headers: dict.
        :returns: returns a rest request with method 'Patch'

        """
        return self._rest_request(path, method='PATCH', args=args, body=body, \
                                                                headers=headers)

    def delete(self, path, args=None, headers=None):
        """Perform a DELETE request

        :param path: the URL path.
        :type path: str.
        :param args: the arguments to delete.
        :type args: dict.
        :param headers: dict of headers to be appended.
        :type headers: dict.
        :returns: returns a rest request with method 'Delete'

        """
        return self._rest_request(path, method='DELETE', args=args, \
                                                                headers=headers)

    def _get_req_headers(self, headers=None):
        """Get the request headers

        :param headers: additional headers to be utilized
        :type headers: dict
        :returns: returns headers

        """
        headers = headers if isinstance(headers, dict) else dict()

        if self.__session_key:
            headers['X-Auth-Token'] = self.__session_key
        elif self.__authorization_key:
            headers['Authorization'] = self.__authorization_key

        headers['Accept'] = '*/*'
        headers['Connection'] = 'Keep-Alive'

        return headers

    def _rest_request(self, path, method='GET', args=None, body=None, \
                                                                headers=None):
        """Rest request main function

        :param path: path within tree
        :type path: str
        :param method: method to be implemented
        :type method: str
        :param args: the arguments for method
        :type args: dict
        :param body: body payload for the rest call
        :type body: dict
        :param headers: provide additional headers
        :type headers: dict
        :returns: returns a RestResponse object

        """
        headers = self._get_req_headers(headers)
        reqpath = path.replace('//', '/')

        if body is not None:
            if isinstance(body, (dict, list)):
                headers['Content-Type'] = u'application/json'
                body = json.dumps(body)
            elif not isinstance(body, (str, bytes)):
                headers['Content-Type'] = u'application/x-www-form-urlencoded'
                body = urlencode(body)

            if isinstance(body, str):
                body = body.encode('utf-8')

            headers['Content-Length'] = len(body)

        if args:
            if method == 'GET':
                reqpath += '?' + urlencode(args)
            elif method in ('PUT', 'POST', 'PATCH'):
                headers['Content-Type'] = u'application/x-www-form-urlencoded'
                body = urlencode(args).encode('utf-8')

        restreq = RestRequest(reqpath, method=method, body=body)

        if LOGGER.isEnabledFor(logging.DEBUG):
            logbody = None
            if restreq.body and restreq.body[:1] == b'{':
                logbody = restreq.body.decode('utf-8', 'ignore')
            LOGGER.debug('HTTP REQUEST: %s\n\tPATH: %s\n\tBODY: %s', \
                                    restreq.method, restreq.path, logbody)

        redirects = 0

        try:
            while True:
                if self._conn is None:
                    self.__init_connection()

                self._conn.request(method.upper(), reqpath, body=body, \
                                                                headers=headers)
                self._conn_count += 1

                inittime = time.time()
                resp = self._conn.getresponse()
                endtime = time.time()
                LOGGER.info('Response Time to %s: %s seconds.', \
                                        restreq.path, str(endtime-inittime))

                if resp.getheader('Connection') == 'close':
                    self.__destroy_connection()
                if not 300 <= resp.status < 400 or resp.status == 304:
                    break

                redirects += 1
                if redirects > MAX_REDIRECTS:
                    self.__destroy_connection()
                    raise ServerDownOrUnreachableError("Too many redirects " \
                                        "following %s" % restreq.path)

                newloc = resp.getheader('location')
                newurl = urlparse(newloc)

                reqpath = newurl.path
                resp.read()
                self.__init_connection(newurl if newurl.netloc else None)
        except (socket.error, http.client.HTTPException) as excp:
            self.__destroy_connection()
            LOGGER.info('Request to %s failed [%s]', path, excp)
            raise ServerDownOrUnreachableError("Unable to reach %s: %s" % \
                                                                (path, excp))

        restresp = RestResponse(restreq, resp)

        if restresp.getheader('content-encoding') == "gzip":
            try:
                restresp.read = gzip.decompress(restresp.read)
            except (OSError, EOFError) as excp:
                LOGGER.error('Error occur while decompressing body: %s', excp)
                raise DecompressResponseError()

        self.__destroy_connection()

        if LOGGER.isEnabledFor(logging.DEBUG):
            headerstr = ''
            for header in restresp.getheaders():
                headerstr += '\t%s: %s\n' % (header[0], header[1])

            LOGGER.debug('HTTP RESPONSE for %s:\nCode: %s\nHeaders:\n' \
                         '%s\nBody Response of %s: %s', restresp.request.path, \
                         str(restresp.status) + ' ' + resp.reason, headerstr, \
                         restresp.request.path, restresp.text)

        return restresp

    def login(self, username=None, password=None, auth=AuthMethod.BASIC):
        """Login and start a REST session.  Remember to call logout() when
        you are done.

        :param username: the user name.
        :type username: str.
        :param password: the password.
        :type password: str.
        :param auth: authentication method
        :type auth: object/instance of class AuthMethod

        """
        self.__username = username if username else self.__username
        self.__password = password if password else self.__password

        if auth == AuthMethod.BASIC:
            auth_key = base64.b64encode(('%s:%s' % (self.__username, \
                            self.__password)).encode('utf-8')).decode('utf-8')
            self.__authorization_key = u'Basic %s' % auth_key

            headers = dict()
            headers['Authorization'] = self.__authorization_key

            respvalidate = self._rest_request('%s%s' % (self.__url.path, \
                                            self.login_url), headers=headers)

            if respvalidate.status == 401:
                self.__authorization_key = None
                raise InvalidCredentialsError("Basic authentication " \
                                            "rejected for %s" % self.__username)
        elif auth == AuthMethod.SESSION:
            data = dict()
            data['UserName'] = self.__username
            data['Password'] = self.__password

            resp = self._rest_request(self.login_url, method="POST", \
                                                                    body=data)

            LOGGER.info('Login returned code %s: %s', resp.status, resp.text)

            self.__session_key = resp.session_key
            self.__session_location = resp.session_location

            if not self.__session_key and not resp.status == 200:
                raise InvalidCredentialsError("Session login rejected for " \
                                                        "%s" % self.__username)
            else:
                self.set_username(None)
                self.set_password(None)

    def logout(self):
        """ Logout of session. YOU MUST CALL THIS WHEN YOU ARE DONE TO FREE
        UP SESSIONS"""
        if self.__session_key:
            session_loc = urlparse(self.__session_location).path

            resp = self.delete(session_loc)
            LOGGER.info("User logged out: %s", resp.text)

            self.__session_key = None
            self.__session_location = None

        self.__authorization_key = None

class HttpClient(RestClientBase):
    """A client for Redfish services over HTTP(S)"""
    def __init__(self, base_url, username=None, password=None, \
                            default_prefix='/redfish/v1/', sessionkey=None, \
                            timeout=None, insecure=False):
        """Initialize HttpClient

        :param base_url: The url of the remote system
        :type base_url: str
        :param username: The user name used for authentication
        :type username: str
        :param password: The password used for authentication
        :type password: str
        :param default_prefix: The default root point
        :type default_prefix: str
        :param sessionkey: session key for the current login of base_url
        :type sessionkey: str
        :param timeout: seconds allowed for each blocking socket operation
        :type timeout: float
        :param insecure: skip verification of the service certificate
        :type insecure: bool

        """
        super(HttpClient, self).__init__(base_url, username=username, \
                            password=password, default_prefix=default_prefix, \
                            sessionkey=sessionkey, timeout=timeout, \
                            insecure=insecure)

        try:
            self.login_url = self.root.Links.Sessions['@odata.id']
        except (KeyError, AttributeError):
            self.login_url = '%sSessionService/Sessions' % default_prefix

    def _get_req_headers(self, headers=None):
        """Get the request headers for HTTP client

        :param headers: additional headers to be utilized
        :type headers: dict
        :returns: returns request headers

        """
        headers = super(HttpClient, self)._get_req_headers(headers)
        headers['OData-Version'] = '4.0'

        return headers

def redfish_client(base_url=None, username=None, password=None, \
                            default_prefix='/redfish/v1/', sessionkey=None, \
                            timeout=None, insecure=False):
    """Create and return a Redfish client instance.

    :param base_url: rest host or ip address.
    :type base_url: str.
    :param username: user name required to login to server
    :type: str
    :param password: password credentials required to login
    :type password: str
    :param default_prefix: default root to extract tree
    :type default_prefix: str
    :param sessionkey: session key credential for current login
    :type sessionkey: str
    :param timeout: seconds allowed for each blocking socket operation
    :type timeout: float
    :param insecure: skip verification of the service certificate
    :type insecure: bool
    :returns: a client object.

    """
    return HttpClient(base_url=base_url, username=username, \
                      password=password, default_prefix=default_prefix, \
                      sessionkey=sessionkey, timeout=timeout, insecure=insecure)
